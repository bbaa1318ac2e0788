"""名前から磁化配置を生成するレジストリ

設定ファイルなどから文字列で配置を指定するために、各生成器を名前と説明付きで
登録します。
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

from ..mesh import MeshContext
from .base import Field
from . import generators
from .random import random_mag, random_mag_seed, hashed_random_mag


def real(value: Any) -> float:
    # YAML は "70e-9" のような小数点なしの指数表記を文字列として読む
    if isinstance(value, bool):
        raise TypeError(f"数値ではありません: {value!r}")
    return float(value)


def integer(value: Any) -> int:
    if isinstance(value, bool):
        raise TypeError(f"整数ではありません: {value!r}")
    if isinstance(value, int):
        return value
    number = float(value)
    if not number.is_integer():
        raise ValueError(f"整数ではありません: {value!r}")
    return int(number)


def vector(value: Any) -> List[float]:
    if isinstance(value, (str, bytes)) or len(value) != 3:
        raise ValueError(f"3成分のベクトルが必要です: {value!r}")
    return [real(c) for c in value]


@dataclass(frozen=True)
class TextureSpec:
    """登録された配置の情報

    Attributes:
        constructor: 生成関数
        description: 説明文
        parameters: 受け付けるパラメータ名
        kinds: 各パラメータの変換関数（real / integer / vector）
        needs_mesh: メッシュを必要とするかどうか
    """

    constructor: Callable[..., Field]
    description: str
    parameters: Tuple[str, ...] = ()
    kinds: Tuple[Callable[[Any], Any], ...] = ()
    needs_mesh: bool = False


TEXTURES: Dict[str, TextureSpec] = {}


def declare(
    name: str,
    constructor: Callable[..., Field],
    description: str,
    parameters: Optional[Dict[str, Callable[[Any], Any]]] = None,
    needs_mesh: bool = False,
) -> None:
    """配置を登録

    Args:
        parameters: パラメータ名から変換関数への対応（宣言順が引数順）
    """
    if name in TEXTURES:
        raise ValueError(f"配置名が重複しています: {name}")
    parameters = parameters or {}
    TEXTURES[name] = TextureSpec(
        constructor,
        description,
        tuple(parameters),
        tuple(parameters.values()),
        needs_mesh,
    )


def coerce_parameters(name: str, parameters: Dict[str, Any]) -> Dict[str, Any]:
    """パラメータを登録された型に変換

    Raises:
        ValueError: 数値として解釈できない値がある場合
    """
    spec = TEXTURES[name]
    kinds = dict(zip(spec.parameters, spec.kinds))
    result = {}
    for key, value in parameters.items():
        if key not in kinds:
            result[key] = value
            continue
        try:
            result[key] = kinds[key](value)
        except (TypeError, ValueError) as e:
            raise ValueError(f"{name} のパラメータ {key} が不正です: {value!r}") from e
    return result


def create_texture(
    name: str,
    parameters: Optional[Dict[str, Any]] = None,
    mesh: Optional[MeshContext] = None,
) -> Field:
    """名前とパラメータから Field を生成

    Raises:
        ValueError: 未登録の名前、不明なパラメータ、またはメッシュ不足の場合
    """
    if name not in TEXTURES:
        raise ValueError(
            f"未対応の配置です: {name} (有効な値: {', '.join(sorted(TEXTURES))})"
        )
    spec = TEXTURES[name]
    parameters = dict(parameters or {})

    unknown = set(parameters) - set(spec.parameters)
    if unknown:
        raise ValueError(f"{name} に不明なパラメータがあります: {sorted(unknown)}")
    missing = [p for p in spec.parameters if p not in parameters]
    if missing:
        raise ValueError(f"{name} にパラメータが不足しています: {missing}")

    parameters = coerce_parameters(name, parameters)
    args = [parameters[p] for p in spec.parameters]
    if spec.needs_mesh:
        if mesh is None:
            raise ValueError(f"{name} にはメッシュ情報が必要です")
        args.append(mesh)
    return spec.constructor(*args)


def describe() -> Dict[str, str]:
    """登録済み配置の説明一覧"""
    return {name: spec.description for name, spec in TEXTURES.items()}


declare("Uniform", generators.uniform,
        "Uniform magnetization in given direction",
        {"mx": real, "my": real, "mz": real})
declare("Vortex", generators.vortex,
        "Vortex magnetization with given circulation and core polarization",
        {"circ": integer, "pol": integer}, needs_mesh=True)
declare("Antivortex", generators.antivortex,
        "Antivortex magnetization with given circulation and core polarization",
        {"circ": integer, "pol": integer}, needs_mesh=True)
declare("NeelSkyrmion", generators.neel_skyrmion,
        "Néel skyrmion magnetization with given charge and core polarization",
        {"charge": integer, "pol": integer}, needs_mesh=True)
declare("BlochSkyrmion", generators.bloch_skyrmion,
        "Bloch skyrmion magnetization with given chirality and core polarization",
        {"charge": integer, "pol": integer}, needs_mesh=True)
declare("TwoDomain", generators.two_domain,
        "Two-domain magnetization with given magnetization in left domain, wall, and right domain",
        {"left": vector, "wall": vector, "right": vector}, needs_mesh=True)
declare("VortexWall", generators.vortex_wall,
        "Vortex wall magnetization with given mx in left and right domain and core circulation and polarization",
        {"m_left": real, "m_right": real, "circ": integer, "pol": integer}, needs_mesh=True)
declare("RandomMag", random_mag, "Random magnetization")
declare("RandomMagSeed", random_mag_seed,
        "Random magnetization with given seed", {"seed": integer})
declare("HashedRandomMag", hashed_random_mag,
        "Random magnetization derived from seed and position", {"seed": integer})
declare("Helical", generators.helical,
        "Helical magnetization with helical length ld and with q-vector along (qx, qy)",
        {"ld": real, "qx": real, "qy": real})
