"""ログフォーマッタを提供するモジュール

書式文字列そのものは LogConfig.formats で管理し、ここでは時刻の精度と
端末向けの色付けだけを扱います。
"""

import logging
from typing import Optional


class FieldFormatter(logging.Formatter):
    """書式を受け取るフォーマッタ

    Args:
        fmt: logging の書式文字列
        precise: True のとき時刻をミリ秒まで出力
    """

    default_time_format = "%Y-%m-%d %H:%M:%S"

    def __init__(self, fmt: Optional[str] = None, precise: bool = False):
        super().__init__(fmt or "%(asctime)s %(levelname)s %(name)s: %(message)s")
        self.default_msec_format = "%s.%03d" if precise else None


class ColoredFormatter(FieldFormatter):
    """ログレベルごとに色を付けるフォーマッタ

    レコード自体は書き換えないので、同じレコードを受け取る他のハンドラには
    影響しません。
    """

    COLORS = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(self, fmt: Optional[str] = None, use_color: bool = True):
        super().__init__(fmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = self.COLORS.get(record.levelno) if self.use_color else None
        if color is None:
            return message
        return f"{color}{message}{self.RESET}"
