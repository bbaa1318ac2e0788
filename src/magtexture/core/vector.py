"""3次元ベクトルを提供するモジュール

磁化方向などの3成分ベクトルを不変な値オブジェクトとして扱います。
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator
import math

import numpy as np


@dataclass(frozen=True)
class Vector3:
    """float64 の3成分ベクトル"""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def __len__(self) -> int:
        return 3

    def add(self, other: Vector3) -> Vector3:
        """成分ごとの和"""
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def scale(self, factor: float) -> Vector3:
        """スカラー倍"""
        return Vector3(factor * self.x, factor * self.y, factor * self.z)

    def madd(self, weight: float, other: Vector3) -> Vector3:
        """self + weight * other を返す"""
        return Vector3(
            self.x + weight * other.x,
            self.y + weight * other.y,
            self.z + weight * other.z,
        )

    def dot(self, other: Vector3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def norm(self) -> float:
        """ユークリッドノルム"""
        return math.sqrt(self.dot(self))

    def normalized(self) -> Vector3:
        """単位ベクトルを返す

        ゼロベクトルはゼロベクトルのまま返します。
        """
        n = self.norm()
        if n == 0.0:
            return self
        return self.scale(1.0 / n)

    def has_nan(self) -> bool:
        """いずれかの成分が NaN かどうか"""
        return math.isnan(self.x) or math.isnan(self.y) or math.isnan(self.z)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @classmethod
    def of(cls, values) -> Vector3:
        """3要素のシーケンスから生成"""
        vx, vy, vz = values
        return cls(float(vx), float(vy), float(vz))

    def __repr__(self) -> str:
        return f"Vector3({self.x!r}, {self.y!r}, {self.z!r})"
