"""生成設定パッケージ

このパッケージは、磁化配置の生成設定を管理するためのクラスを提供します。
"""

from .run_config import (
    RunConfig,
    TextureConfig,
    TransformConfig,
    OutputConfig,
    TRANSFORM_DEFAULTS,
)
from .builder import build_field, build_texture, apply_transform

__all__ = [
    "RunConfig",
    "TextureConfig",
    "TransformConfig",
    "OutputConfig",
    "TRANSFORM_DEFAULTS",
    "build_field",
    "build_texture",
    "apply_transform",
]
