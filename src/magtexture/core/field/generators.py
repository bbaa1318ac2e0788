"""標準的な磁化配置の生成器を提供するモジュール

各生成器はパラメータと（必要なら）メッシュの長さスケールを生成時に一度だけ
読み取り、それらを閉じ込めた Field を返します。評価時にメッシュを参照し直す
ことはありません。
"""

from __future__ import annotations
from typing import Sequence
import math

from ..mesh import MeshContext
from ..vector import Vector3
from .base import Field, no_nan, ratio


def _cell_x(mesh: MeshContext) -> float:
    return float(mesh.cell_size[0])


def uniform(mx: float, my: float, mz: float) -> Field:
    """一様磁化

    正規化は行いません。例:
        uniform(1, 0, 0)  # x方向に飽和
    """
    m = Vector3(float(mx), float(my), float(mz))

    def func(x, y, z):
        return m

    return Field(func, f"Uniform({mx}, {my}, {mz})")


def vortex(circ: int, pol: int, mesh: MeshContext) -> Field:
    """渦磁化

    Args:
        circ: 循環の向き (+1 / -1)
        pol: コアの分極 (+1 / -1)
        mesh: セルサイズを与えるメッシュ

    コアは数セルにわたって平滑化されており、基底状態へ容易に緩和します。
    """
    diam2 = 2 * _cell_x(mesh) ** 2

    def func(x, y, z):
        r2 = x * x + y * y
        r = math.hypot(x, y)
        mx = ratio(-y * circ, r)
        my = ratio(x * circ, r)
        mz = 1.5 * pol * math.exp(-r2 / diam2)
        return no_nan(Vector3(mx, my, mz), pol)

    return Field(func, f"Vortex({circ}, {pol})")


def antivortex(circ: int, pol: int, mesh: MeshContext) -> Field:
    """反渦磁化"""
    diam2 = 2 * _cell_x(mesh) ** 2

    def func(x, y, z):
        r2 = x * x + y * y
        r = math.hypot(x, y)
        mx = ratio(-x * circ, r)
        my = ratio(y * circ, r)
        mz = 1.5 * pol * math.exp(-r2 / diam2)
        return no_nan(Vector3(mx, my, mz), pol)

    return Field(func, f"Antivortex({circ}, {pol})")


def _skyrmion_mz(r2: float, w2: float, pol: int) -> float:
    return 2 * pol * (math.exp(-r2 / w2) - 0.5)


def neel_skyrmion(charge: int, pol: int, mesh: MeshContext) -> Field:
    """ネール型スキルミオン（面内成分は動径方向）"""
    w = 8 * _cell_x(mesh)
    w2 = w * w

    def func(x, y, z):
        r2 = x * x + y * y
        r = math.hypot(x, y)
        mz = _skyrmion_mz(r2, w2, pol)
        mx = ratio(x * charge, r) * (1 - abs(mz))
        my = ratio(y * charge, r) * (1 - abs(mz))
        return no_nan(Vector3(mx, my, mz), pol)

    return Field(func, f"NeelSkyrmion({charge}, {pol})")


def bloch_skyrmion(charge: int, pol: int, mesh: MeshContext) -> Field:
    """ブロッホ型スキルミオン（面内成分は方位角方向）"""
    w = 8 * _cell_x(mesh)
    w2 = w * w

    def func(x, y, z):
        r2 = x * x + y * y
        r = math.hypot(x, y)
        mz = _skyrmion_mz(r2, w2, pol)
        mx = ratio(-y * charge, r) * (1 - abs(mz))
        my = ratio(x * charge, r) * (1 - abs(mz))
        return no_nan(Vector3(mx, my, mz), pol)

    return Field(func, f"BlochSkyrmion({charge}, {pol})")


def two_domain(
    left: Sequence[float],
    wall: Sequence[float],
    right: Sequence[float],
    mesh: MeshContext,
) -> Field:
    """磁壁を挟んだ2磁区配置

    x < 0 が左磁区、x >= 0 が右磁区です。磁壁はガウス重み
    g = exp(-(x/ww)^2), ww = 2 * セルサイズ で平滑化されます。

    例:
        two_domain((1, 0, 0), (0, 1, 0), (-1, 0, 0), mesh)  # head-to-head, ネール磁壁
        two_domain((1, 0, 0), (0, 0, 1), (-1, 0, 0), mesh)  # head-to-head, ブロッホ磁壁
        two_domain((0, 0, 1), (1, 0, 0), (0, 0, -1), mesh)  # up-down, ブロッホ磁壁
    """
    m_left = Vector3.of(left)
    m_wall = Vector3.of(wall)
    m_right = Vector3.of(right)
    ww = 2 * _cell_x(mesh)

    def func(x, y, z):
        m = m_left if x < 0 else m_right
        gauss = math.exp(-((x / ww) ** 2))
        return Vector3(
            (1 - gauss) * m.x + gauss * m_wall.x,
            (1 - gauss) * m.y + gauss * m_wall.y,
            (1 - gauss) * m.z + gauss * m_wall.z,
        )

    return Field(func, f"TwoDomain({tuple(m_left)}, {tuple(m_wall)}, {tuple(m_right)})")


def vortex_wall(
    m_left: float, m_right: float, circ: int, pol: int, mesh: MeshContext
) -> Field:
    """渦型磁壁

    |x| > h/2 (h は y方向の領域サイズ) では面内の一様磁化、内側では渦を返します。
    """
    h = float(mesh.world_size[1])
    v = vortex(circ, pol, mesh)
    left = Vector3(float(m_left), 0.0, 0.0)
    right = Vector3(float(m_right), 0.0, 0.0)

    def func(x, y, z):
        if x < -h / 2:
            return left
        if x > h / 2:
            return right
        return v(x, y, z)

    return Field(func, f"VortexWall({m_left}, {m_right}, {circ}, {pol})")


def helical(ld: float, qx: float, qy: float) -> Field:
    """らせん磁化

    Args:
        ld: らせん周期 [m]
        qx, qy: 面内の波数ベクトルの向き

    例:
        helical(70e-9, 1, 0)  # 周期 70nm、q は x方向
        helical(30e-9, 1, 1)  # 周期 30nm、q は x=y 方向

    mx^2 + my^2 = m_v^2, m_v^2 + mz^2 = 1 なので出力は常に単位ベクトルです。
    |q| = 0 のときは q を +x 方向とみなします。
    """
    q_norm = math.hypot(qx, qy)
    cos_theta = qx / q_norm if q_norm > 0 else 1.0
    cos_theta = max(-1.0, min(1.0, cos_theta))
    sin_theta = math.sin(math.acos(cos_theta))
    k = 2 * math.pi / ld

    def func(x, y, z):
        u = cos_theta * x + sin_theta * y
        m_v = math.cos(k * u)
        return Vector3(sin_theta * m_v, cos_theta * m_v, math.sin(k * u))

    return Field(func, f"Helical({ld}, {qx}, {qy})")
