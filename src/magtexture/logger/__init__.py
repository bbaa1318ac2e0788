"""ロギングパッケージ

このパッケージは、配置の生成からサンプリング、保存までで使用される
統一的なロギング機能を提供します。
"""

from .logger import FieldLogger
from .handlers import FileLogHandler, ConsoleLogHandler, BufferedLogHandler
from .formatters import FieldFormatter, ColoredFormatter
from .config import LogConfig

__all__ = [
    "FieldLogger",
    "FileLogHandler",
    "ConsoleLogHandler",
    "BufferedLogHandler",
    "FieldFormatter",
    "ColoredFormatter",
    "LogConfig",
]
