"""Field モジュール

このモジュールは、磁化配置の生成器と合成演算を提供します。
"""

from .base import Field, no_nan
from .generators import (
    uniform,
    vortex,
    antivortex,
    neel_skyrmion,
    bloch_skyrmion,
    two_domain,
    vortex_wall,
    helical,
)
from .combinators import translate, scale, rotate_z, superpose, normalize
from .random import (
    DEFAULT_SEED,
    SeededRandomSource,
    random_mag,
    random_mag_seed,
    hashed_random_mag,
)
from .registry import TEXTURES, TextureSpec, coerce_parameters, create_texture, describe

__all__ = [
    "Field",
    "no_nan",
    "uniform",
    "vortex",
    "antivortex",
    "neel_skyrmion",
    "bloch_skyrmion",
    "two_domain",
    "vortex_wall",
    "helical",
    "translate",
    "scale",
    "rotate_z",
    "superpose",
    "normalize",
    "DEFAULT_SEED",
    "SeededRandomSource",
    "random_mag",
    "random_mag_seed",
    "hashed_random_mag",
    "TEXTURES",
    "TextureSpec",
    "create_texture",
    "coerce_parameters",
    "describe",
]
