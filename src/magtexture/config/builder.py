"""設定から Field を組み立てるモジュール"""

from __future__ import annotations

from ..core.field import Field, create_texture
from ..core.mesh import MeshGeometry
from .run_config import RunConfig, TextureConfig, TransformConfig


def build_texture(texture: TextureConfig, mesh: MeshGeometry) -> Field:
    return create_texture(texture.type, texture.parameters, mesh)


def apply_transform(field: Field, transform: TransformConfig, mesh: MeshGeometry) -> Field:
    """1つの変換を適用した新しい Field を返す"""
    p = transform.resolved()
    if transform.type == "translate":
        return field.transl(p["dx"], p["dy"], p["dz"])
    if transform.type == "scale":
        return field.scale(p["sx"], p["sy"], p["sz"])
    if transform.type == "rotate_z":
        return field.rot_z(p["theta"])
    if transform.type == "add":
        return field.add(p["weight"], build_texture(transform.texture, mesh))
    if transform.type == "normalize":
        return field.normalized()
    raise ValueError(f"未対応の変換です: {transform.type}")


def build_field(config: RunConfig, logger=None) -> Field:
    """配置と変換列から Field を構築

    変換は設定ファイルに書かれた順に適用されます。
    """
    field = build_texture(config.texture, config.mesh)
    for transform in config.transforms:
        field = apply_transform(field, transform, config.mesh)
    if logger is not None:
        logger.info(f"配置を構築: {field.name}")
    return field
