"""計算メッシュの幾何情報を提供するモジュール

生成器はコンストラクト時に一度だけセルサイズと領域サイズを読み取ります。
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Protocol, Tuple, runtime_checkable

import numpy as np

from .vector import Vector3


@runtime_checkable
class MeshContext(Protocol):
    """セルサイズと領域サイズを提供するオブジェクト"""

    @property
    def cell_size(self) -> Tuple[float, float, float]: ...

    @property
    def world_size(self) -> Tuple[float, float, float]: ...


@dataclass(frozen=True)
class MeshGeometry:
    """3D計算グリッドの不変情報を表現

    Attributes:
        cell_size: 各方向のセルサイズ [m]
        grid_size: 各方向のセル数
    """

    cell_size: Tuple[float, float, float]
    grid_size: Tuple[int, int, int] = (1, 1, 1)

    def __post_init__(self):
        """初期化後の検証"""
        if len(self.cell_size) != 3 or len(self.grid_size) != 3:
            raise ValueError("MeshGeometryは3次元データのみ対応しています")
        # YAML由来のリストもタプルに揃える
        object.__setattr__(self, "cell_size", tuple(float(c) for c in self.cell_size))
        object.__setattr__(self, "grid_size", tuple(int(n) for n in self.grid_size))
        if not all(0 < c < math.inf for c in self.cell_size):
            raise ValueError(f"セルサイズは正の有限値である必要があります: {self.cell_size}")
        if any(n <= 0 for n in self.grid_size):
            raise ValueError("グリッドサイズは正の値である必要があります")

    @property
    def world_size(self) -> Tuple[float, float, float]:
        """領域全体のサイズ"""
        return tuple(c * n for c, n in zip(self.cell_size, self.grid_size))

    @property
    def ncell(self) -> int:
        return self.grid_size[0] * self.grid_size[1] * self.grid_size[2]

    def cell_center(self, ix: int, iy: int, iz: int) -> Vector3:
        """セル中心の座標（原点が領域中心）"""
        nx, ny, nz = self.grid_size
        cx, cy, cz = self.cell_size
        return Vector3(
            cx * (ix - 0.5 * (nx - 1)),
            cy * (iy - 0.5 * (ny - 1)),
            cz * (iz - 0.5 * (nz - 1)),
        )

    def coordinates(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """各軸のセル中心座標の1次元配列"""
        return tuple(
            c * (np.arange(n, dtype=np.float64) - 0.5 * (n - 1))
            for c, n in zip(self.cell_size, self.grid_size)
        )

    @classmethod
    def from_dict(cls, config: dict) -> MeshGeometry:
        return cls(
            cell_size=tuple(config["cell_size"]),
            grid_size=tuple(config.get("grid_size", (1, 1, 1))),
        )

    def to_dict(self) -> dict:
        return {"cell_size": list(self.cell_size), "grid_size": list(self.grid_size)}

    def __repr__(self) -> str:
        return f"MeshGeometry(cell_size={self.cell_size}, grid_size={self.grid_size})"
