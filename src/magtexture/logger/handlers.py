"""ログハンドラを提供するモジュール"""

import logging
import logging.handlers
import sys
from collections import deque
from pathlib import Path
from typing import List, Optional, TextIO

from .formatters import FieldFormatter, ColoredFormatter


def _level(level: str) -> int:
    return getattr(logging, level.upper())


class FileLogHandler(logging.handlers.RotatingFileHandler):
    """ローテーション付きファイルログハンドラ

    Args:
        filename: ログファイルのパス
        formatter: ログフォーマッタ（省略時はミリ秒付きの FieldFormatter）
        max_bytes: 1ファイルの最大サイズ（バイト）
        backup_count: 保持する過去ログの数
        level: ログレベル名
    """

    def __init__(
        self,
        filename: Path,
        formatter: Optional[logging.Formatter] = None,
        max_bytes: int = 10_000_000,
        backup_count: int = 5,
        encoding: str = "utf-8",
        level: str = "info",
    ):
        super().__init__(
            filename=str(filename),
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding=encoding,
        )
        self.setFormatter(formatter or FieldFormatter(precise=True))
        self.setLevel(_level(level))


class ConsoleLogHandler(logging.StreamHandler):
    """コンソールへのログハンドラ（既定は標準エラー出力）

    出力先が端末でない場合は色付けを行いません。
    """

    def __init__(
        self,
        fmt: Optional[str] = None,
        level: str = "info",
        use_color: bool = True,
        stream: Optional[TextIO] = None,
    ):
        stream = stream or sys.stderr
        super().__init__(stream)
        use_color = use_color and hasattr(stream, "isatty") and stream.isatty()
        self.setFormatter(ColoredFormatter(fmt, use_color=use_color))
        self.setLevel(_level(level))


class BufferedLogHandler(logging.Handler):
    """最近のログメッセージをメモリ上に保持するハンドラ

    容量を超えると古いものから捨てます。
    """

    def __init__(self, capacity: int = 1000, formatter: Optional[logging.Formatter] = None):
        super().__init__()
        self.buffer: deque = deque(maxlen=capacity)
        self.setFormatter(formatter or FieldFormatter())

    @property
    def capacity(self) -> int:
        return self.buffer.maxlen

    def emit(self, record: logging.LogRecord):
        try:
            self.buffer.append(self.format(record))
        except Exception:
            self.handleError(record)

    def get_logs(self) -> List[str]:
        """バッファ内のログを古い順に取得"""
        return list(self.buffer)

    def clear(self):
        self.buffer.clear()
