"""磁化配置 Field の基底クラスを提供するモジュール

Field は座標 (x, y, z) から磁化ベクトルへの写像です。生成器はパラメータを
値として閉じ込めた Field を返し、合成演算は常に新しい Field を返します。
既存の Field が変更されることはありません。
"""

from __future__ import annotations
from typing import Callable
import math

from ..vector import Vector3

# 評価関数の型
FieldFunc = Callable[[float, float, float], Vector3]


def no_nan(v: Vector3, pol: float) -> Vector3:
    """NaN を含むベクトルを (0, 0, pol) に置き換える

    渦やスキルミオンの中心 (r=0) では面内成分が 0/0 になるため、
    すべての特異な生成器はこの関数を通して値を返します。
    """
    if v.has_nan():
        return Vector3(0.0, 0.0, float(pol))
    return v


def ratio(num: float, den: float) -> float:
    """num/den を計算する。分母が 0 のときは NaN を返す"""
    if den == 0.0:
        return math.nan
    return num / den


class Field:
    """不変な磁化配置

    Attributes:
        name: ログや repr 用の名前
        pure: 座標のみの関数かどうか（逐次乱数配置は False）
    """

    __slots__ = ("_func", "_name", "_pure")

    def __init__(self, func: FieldFunc, name: str = "Field", pure: bool = True):
        """
        Args:
            func: 評価関数 (x, y, z) -> Vector3
            name: 配置の名前
            pure: 評価順に依存しない場合 True
        """
        self._func = func
        self._name = name
        self._pure = pure

    @property
    def name(self) -> str:
        return self._name

    @property
    def pure(self) -> bool:
        return self._pure

    def __call__(self, x: float, y: float, z: float) -> Vector3:
        """位置 (x, y, z) での磁化ベクトルを返す"""
        return self._func(x, y, z)

    def evaluate(self, x: float, y: float, z: float) -> Vector3:
        return self._func(x, y, z)

    # 合成演算（combinators モジュールへ委譲）

    def transl(self, dx: float, dy: float, dz: float) -> Field:
        """平行移動したコピーを返す

        例: vortex(1, 1, mesh).transl(100e-9, 0, 0)  # 中心が x=100nm の渦
        """
        from .combinators import translate

        return translate(self, dx, dy, dz)

    def scale(self, sx: float, sy: float, sz: float) -> Field:
        """座標を拡大縮小したコピーを返す"""
        from .combinators import scale

        return scale(self, sx, sy, sz)

    def rot_z(self, theta: float) -> Field:
        """z軸まわりに theta [rad] 回転したコピーを返す"""
        from .combinators import rotate_z

        return rotate_z(self, theta)

    def add(self, weight: float, other: Field) -> Field:
        """self + weight * other を返す

        例: uniform(1, 0, 0).add(0.2, random_mag())  # 20% のランダム揺らぎ
        """
        from .combinators import superpose

        return superpose(self, weight, other)

    def normalized(self) -> Field:
        """各点で正規化したコピーを返す"""
        from .combinators import normalize

        return normalize(self)

    def __repr__(self) -> str:
        suffix = "" if self._pure else ", pure=False"
        return f"{self.__class__.__name__}({self._name}{suffix})"
