"""乱数による磁化配置を提供するモジュール

SeededRandomSource は単位球面上に一様分布する方向を逐次生成するストリームです。
同じシードと同じ呼び出し順であれば、ビット単位で同じ列を再現します。

注意:
    random_mag_seed が返す Field は座標の関数ではありません。評価のたびに
    ストリームを1ステップ進めるため、再現性は評価順にのみ依存します。
    ストリームはスレッドセーフではないので、並列にサンプリングする場合は
    呼び出し側で同期するか、座標から方向を決める hashed_random_mag を使います。
"""

from __future__ import annotations
from typing import Iterator, List
import math

import numpy as np

from ..vector import Vector3
from .base import Field

# シード未指定時の既定値
DEFAULT_SEED = 0

_SEED_MASK = (1 << 64) - 1


def _seed_entropy(seed: int) -> int:
    """64ビット整数シードを非負のエントロピーに変換"""
    return int(seed) & _SEED_MASK


def random_direction(rng: np.random.Generator) -> Vector3:
    """単位球面上の一様乱数ベクトルを1つ生成"""
    theta = 2 * rng.random() * math.pi
    z = 2 * (rng.random() - 0.5)
    b = math.sqrt(1 - z * z)
    x = b * math.cos(theta)
    y = b * math.sin(theta)
    return Vector3(x, y, z)


class SeededRandomSource:
    """決定的な単位ベクトル乱数ストリーム"""

    def __init__(self, seed: int = DEFAULT_SEED):
        """
        Args:
            seed: 乱数シード（0 も有効な既定値）
        """
        self._seed = int(seed)
        self._rng = np.random.default_rng(_seed_entropy(self._seed))
        self._count = 0

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def count(self) -> int:
        """これまでに生成した方向の数"""
        return self._count

    def next_direction(self) -> Vector3:
        """次の方向を生成"""
        self._count += 1
        return random_direction(self._rng)

    def take(self, n: int) -> List[Vector3]:
        return [self.next_direction() for _ in range(n)]

    def reset(self) -> None:
        """シード直後の状態に戻す"""
        self._rng = np.random.default_rng(_seed_entropy(self._seed))
        self._count = 0

    def __iter__(self) -> Iterator[Vector3]:
        while True:
            yield self.next_direction()

    def __repr__(self) -> str:
        return f"SeededRandomSource(seed={self._seed}, count={self._count})"


def random_mag() -> Field:
    """既定シードによるランダム磁化"""
    return random_mag_seed(DEFAULT_SEED)


def random_mag_seed(seed: int) -> Field:
    """シードを指定したランダム磁化

    評価ごとに新しい方向を生成し、座標は無視します。
    """
    source = SeededRandomSource(seed)

    def func(x, y, z):
        return source.next_direction()

    return Field(func, f"RandomMagSeed({seed})", pure=False)


def _coordinate_bits(x: float, y: float, z: float) -> List[int]:
    # -0.0 と 0.0 を同一視する
    coords = np.array([x + 0.0, y + 0.0, z + 0.0], dtype=np.float64)
    return [int(b) for b in coords.view(np.uint64)]


def hashed_random_mag(seed: int = DEFAULT_SEED) -> Field:
    """座標とシードから方向を決めるランダム磁化

    random_mag_seed と異なり座標の純粋関数なので、評価順に依存せず
    並列評価しても同じ結果になります。
    """
    entropy = _seed_entropy(seed)

    def func(x, y, z):
        ss = np.random.SeedSequence([entropy] + _coordinate_bits(x, y, z))
        return random_direction(np.random.default_rng(ss))

    return Field(func, f"HashedRandomMag({seed})")
