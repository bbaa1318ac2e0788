"""磁化配置生成用ロガーを提供するモジュール

このモジュールは、配置の構築、サンプリング、保存の各段階で一貫した
ロギング機能を提供します。
"""

import logging
from pathlib import Path
from typing import Optional, Dict, Any, Union

import numpy as np

from .config import LogConfig
from .handlers import FileLogHandler, ConsoleLogHandler, BufferedLogHandler
from .formatters import FieldFormatter


class FieldLogger:
    """磁化配置生成用ロガークラス

    ルートロガーだけがハンドラを持ち、start_section で作るセクションロガーは
    標準 logging の伝播によって親のハンドラとバッファを共有します。
    """

    def __init__(
        self,
        name: str,
        config: Optional[LogConfig] = None,
        parent: Optional["FieldLogger"] = None,
    ):
        """ロガーを初期化

        Args:
            name: ロガーの名前
            config: ロギング設定
            parent: 親ロガー（階層的ロギング用）
        """
        self.name = name
        self.config = config or LogConfig()
        self.parent = parent

        if parent is None:
            self.config.validate()
            self.config.create_directories()
            self._debug_buffer = BufferedLogHandler(
                self.config.buffer_capacity,
                FieldFormatter(self.config.formats.get("buffer")),
            )
            self.logger = self._create_logger()
            self.logger.info(f"ロギングシステムを初期化: {name}")
        else:
            self._debug_buffer = parent._debug_buffer
            self.logger = logging.getLogger(name)

    def _create_logger(self) -> logging.Logger:
        """ロガーを生成して設定"""
        logger = logging.getLogger(self.name)
        logger.setLevel(getattr(logging, self.config.level.upper()))

        # 既存のハンドラを閉じてクリア
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()

        if self.config.file_logging["enabled"]:
            logger.addHandler(
                FileLogHandler(
                    filename=self.config.get_file_path(),
                    formatter=FieldFormatter(self.config.formats.get("file"), precise=True),
                    max_bytes=self.config.file_logging["max_bytes"],
                    backup_count=self.config.file_logging["backup_count"],
                    level=self.config.file_logging["level"],
                )
            )

        if self.config.console_logging["enabled"]:
            logger.addHandler(
                ConsoleLogHandler(
                    fmt=self.config.formats.get("console"),
                    level=self.config.console_logging["level"],
                    use_color=self.config.console_logging["color"],
                )
            )

        logger.addHandler(self._debug_buffer)
        return logger

    def start_section(self, name: str) -> "FieldLogger":
        """新しいログセクションを開始

        Args:
            name: セクション名

        Returns:
            セクション用の子ロガー
        """
        return FieldLogger(f"{self.name}.{name}", self.config, self)

    def get_recent_logs(self, n: int = 100) -> list:
        """最近のログメッセージを取得"""
        return self._debug_buffer.get_logs()[-n:]

    def save_debug_info(self, path: Union[str, Path]):
        """バッファ内のログをファイルに保存"""
        path = Path(path)
        with path.open("w", encoding="utf-8") as f:
            for log in self._debug_buffer.get_logs():
                f.write(f"{log}\n")

    def log_error_with_context(
        self, msg: str, error: Exception, context: Optional[Dict[str, Any]] = None
    ):
        """エラー情報をコンテキスト付きでログ出力"""
        error_info = {
            "message": msg,
            "error_type": type(error).__name__,
            "error_msg": str(error),
            "context": context or {},
        }
        self.logger.error(f"Error occurred: {error_info}", exc_info=error)

    def log_performance(self, section: str, elapsed: float):
        """処理時間をログ出力"""
        self.logger.info(f"Performance - {section}: {elapsed:.3f} seconds")

    def log_field_summary(self, label: str, samples: np.ndarray, level: str = "info"):
        """サンプリングした磁化配置の統計をログ出力

        Args:
            label: 配置の名前
            samples: 最後の軸が3成分の配列
            level: ログレベル
        """
        norms = np.linalg.norm(samples, axis=-1)
        mean = samples.reshape(-1, 3).mean(axis=0)
        summary = {
            "cells": int(norms.size),
            "mean": [round(float(m), 6) for m in mean],
            "min_norm": float(norms.min()),
            "max_norm": float(norms.max()),
        }
        getattr(self.logger, level.lower())(f"Field summary - {label}: {summary}")

    def __getattr__(self, name: str):
        """未定義の属性アクセスを標準ロガーに転送（info, debug など）"""
        if name == "logger":
            raise AttributeError(name)
        return getattr(self.logger, name)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """エラーが発生した場合はログに記録し、例外を伝播させる"""
        if exc_type is not None:
            self.log_error_with_context(
                "Error in section", exc_val, {"section": self.name}
            )
        return False
