"""マイクロマグネティクス用の磁化初期配置ライブラリ

座標 (x, y, z) から磁化ベクトルへの写像 Field を、標準的な生成器
（一様、渦、反渦、スキルミオン、磁壁、らせん、ランダム）と合成演算
（平行移動、拡大縮小、z軸回転、重ね合わせ）で組み立てます。

例:
    mesh = MeshGeometry(cell_size=(5e-9, 5e-9, 5e-9), grid_size=(64, 64, 1))
    m = vortex(1, 1, mesh).transl(50e-9, 0, 0).add(0.1, random_mag_seed(3))
    data = sample(m, mesh)
"""

from .core import Vector3, MeshGeometry, MeshContext
from .core.field import (
    Field,
    no_nan,
    uniform,
    vortex,
    antivortex,
    neel_skyrmion,
    bloch_skyrmion,
    two_domain,
    vortex_wall,
    helical,
    translate,
    scale,
    rotate_z,
    superpose,
    normalize,
    SeededRandomSource,
    random_mag,
    random_mag_seed,
    hashed_random_mag,
    create_texture,
)
from .sampling import sample, sample_normalized

__version__ = "0.1.0"

__all__ = [
    "Vector3",
    "MeshGeometry",
    "MeshContext",
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
    "SeededRandomSource",
    "random_mag",
    "random_mag_seed",
    "hashed_random_mag",
    "create_texture",
    "sample",
    "sample_normalized",
]
