"""Field をメッシュのセル中心でサンプリングするモジュール

シミュレーションエンジンはセルごとに Field を1回評価して磁化の初期値を
設定します。評価順は z（外側）、y、x（内側）の順で固定されており、
逐次乱数配置の値はこの順序で決まります。
"""

from __future__ import annotations
from typing import Optional, Tuple
import time

import numpy as np

from ..core.field import Field
from ..core.mesh import MeshGeometry


def cell_coordinates(mesh: MeshGeometry) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """各軸のセル中心座標（原点が領域中心）"""
    return mesh.coordinates()


def sample(field: Field, mesh: MeshGeometry, logger=None) -> np.ndarray:
    """Field をすべてのセル中心で評価

    Args:
        field: 評価する磁化配置
        mesh: メッシュ幾何情報
        logger: ロガー（省略可）

    Returns:
        形状 (nx, ny, nz, 3) の float64 配列
    """
    nx, ny, nz = mesh.grid_size
    xs, ys, zs = cell_coordinates(mesh)
    data = np.empty((nx, ny, nz, 3), dtype=np.float64)

    start = time.perf_counter()
    for iz in range(nz):
        z = float(zs[iz])
        for iy in range(ny):
            y = float(ys[iy])
            for ix in range(nx):
                data[ix, iy, iz] = tuple(field(float(xs[ix]), y, z))

    if logger is not None:
        logger.debug(f"{field.name} を {mesh.ncell} セルでサンプリング")
        logger.log_performance(f"sample {field.name}", time.perf_counter() - start)
        if not field.pure:
            logger.warning(
                f"{field.name} は評価順に依存します（z, y, x の順で評価）"
            )
    return data


def sample_normalized(
    field: Field, mesh: MeshGeometry, logger=None
) -> np.ndarray:
    """サンプリング後に各セルのベクトルを正規化（ゼロベクトルはゼロのまま）"""
    data = sample(field, mesh, logger)
    norms = np.linalg.norm(data, axis=-1, keepdims=True)
    return np.divide(data, norms, out=np.zeros_like(data), where=norms > 0)
