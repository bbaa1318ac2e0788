"""Field の合成演算を提供するモジュール

各演算は既存の Field とパラメータを受け取り、新しい Field を返します。
入力の Field は評価関数として閉じ込められるだけで変更されません。
"""

from __future__ import annotations
import math

from ..vector import Vector3
from .base import Field


def translate(field: Field, dx: float, dy: float, dz: float) -> Field:
    """field(x-dx, y-dy, z-dz) を返す Field"""

    def func(x, y, z):
        return field(x - dx, y - dy, z - dz)

    return Field(func, f"{field.name}.transl({dx}, {dy}, {dz})", field.pure)


def scale(field: Field, sx: float, sy: float, sz: float) -> Field:
    """field(x/sx, y/sy, z/sz) を返す Field

    倍率 0 は呼び出し側の誤りで、評価時に ZeroDivisionError になります。
    """

    def func(x, y, z):
        return field(x / sx, y / sy, z / sz)

    return Field(func, f"{field.name}.scale({sx}, {sy}, {sz})", field.pure)


def rotate_z(field: Field, theta: float) -> Field:
    """z軸まわりの剛体回転

    m'(p) = R(theta) · m(R(-theta) · p)

    位置と磁化の両方の面内成分を回転し、z成分はそのまま通します。
    """
    cos = math.cos(theta)
    sin = math.sin(theta)

    def func(x, y, z):
        x_ = x * cos + y * sin
        y_ = -x * sin + y * cos
        m = field(x_, y_, z)
        mx_ = m.x * cos - m.y * sin
        my_ = m.x * sin + m.y * cos
        return Vector3(mx_, my_, m.z)

    return Field(func, f"{field.name}.rot_z({theta})", field.pure)


def superpose(field: Field, weight: float, other: Field) -> Field:
    """field(p) + weight * other(p) を返す Field

    再正規化は行いません。単位ベクトル同士の和は一般に単位ベクトルになりません。
    """

    def func(x, y, z):
        return field(x, y, z).madd(weight, other(x, y, z))

    return Field(
        func,
        f"{field.name}.add({weight}, {other.name})",
        field.pure and other.pure,
    )


def normalize(field: Field) -> Field:
    """各点で単位ベクトルに正規化した Field（ゼロベクトルはゼロのまま）"""

    def func(x, y, z):
        return field(x, y, z).normalized()

    return Field(func, f"{field.name}.normalized()", field.pure)
