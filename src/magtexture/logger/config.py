"""ロギング設定を管理するモジュール"""

from dataclasses import dataclass, field
from typing import Dict, Any, Optional
from pathlib import Path

VALID_LEVELS = {"debug", "info", "warning", "error", "critical"}

DEFAULT_FORMATS = {
    "file": "%(asctime)s %(levelname)-8s %(name)s [%(filename)s:%(lineno)d] %(message)s",
    "console": "%(levelname)-8s %(name)s: %(message)s",
    "buffer": "%(asctime)s %(levelname)s %(name)s: %(message)s",
}


@dataclass
class LogConfig:
    """ロギング設定を管理するクラス

    Attributes:
        level: 基本ログレベル
        log_dir: ログファイル出力ディレクトリ
        file_logging: ファイルへのログ出力設定
        console_logging: コンソールへのログ出力設定
        buffer_capacity: メモリ上に保持する最近のログ数
        formats: 出力先ごとの書式 (file / console / buffer)
    """

    level: str = "info"
    log_dir: Path = Path("logs")
    file_logging: Dict[str, Any] = field(
        default_factory=lambda: {
            "enabled": True,
            "filename": "magtexture.log",
            "level": "info",
            "max_bytes": 10_000_000,  # 10MB
            "backup_count": 5,
        }
    )
    console_logging: Dict[str, Any] = field(
        default_factory=lambda: {"enabled": True, "level": "info", "color": True}
    )
    buffer_capacity: int = 1000
    formats: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_FORMATS))

    def __post_init__(self):
        if isinstance(self.log_dir, str):
            self.log_dir = Path(self.log_dir)

    def validate(self):
        """設定の妥当性を検証

        Raises:
            ValueError: 無効な設定値が検出された場合
        """
        levels = [
            self.level,
            self.file_logging.get("level", "info"),
            self.console_logging.get("level", "info"),
        ]
        for level in levels:
            if not isinstance(level, str) or level.lower() not in VALID_LEVELS:
                raise ValueError(f"Invalid log level: {level!r}")

        if self.buffer_capacity <= 0:
            raise ValueError("buffer_capacity は正の値である必要があります")

        for target, fmt in self.formats.items():
            if target not in DEFAULT_FORMATS or not isinstance(fmt, str):
                raise ValueError(f"無効なログ書式です: {target}={fmt!r}")

    def get_file_path(self, filename: Optional[str] = None) -> Path:
        """ログファイルのパスを取得"""
        filename = filename or self.file_logging["filename"]
        return self.log_dir / filename

    def create_directories(self):
        """必要なディレクトリを作成"""
        if self.file_logging["enabled"]:
            self.log_dir.mkdir(parents=True, exist_ok=True)

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "LogConfig":
        """辞書から設定を生成（未指定の項目は既定値）"""
        base = cls()
        return cls(
            level=config.get("level", base.level),
            log_dir=Path(config.get("log_dir", base.log_dir)),
            file_logging={**base.file_logging, **config.get("file_logging", {})},
            console_logging={
                **base.console_logging,
                **config.get("console_logging", {}),
            },
            buffer_capacity=config.get("buffer_capacity", base.buffer_capacity),
            formats={**base.formats, **config.get("formats", {})},
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "level": self.level,
            "log_dir": str(self.log_dir),
            "file_logging": dict(self.file_logging),
            "console_logging": dict(self.console_logging),
            "buffer_capacity": self.buffer_capacity,
            "formats": dict(self.formats),
        }
