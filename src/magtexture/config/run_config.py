"""磁化配置の生成設定を管理するモジュール

このモジュールは、YAMLフォーマットの設定ファイルを読み込み、
適切なクラスのインスタンスに変換する機能を提供します。
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union
from pathlib import Path

import yaml

from ..core.field import TEXTURES, coerce_parameters
from ..core.mesh import MeshGeometry
from ..logger import LogConfig

# 変換の種類と既定パラメータ
TRANSFORM_DEFAULTS: Dict[str, Dict[str, float]] = {
    "translate": {"dx": 0.0, "dy": 0.0, "dz": 0.0},
    "scale": {"sx": 1.0, "sy": 1.0, "sz": 1.0},
    "rotate_z": {"theta": 0.0},
    "add": {"weight": 1.0},
    "normalize": {},
}


@dataclass
class TextureConfig:
    """配置の設定

    Attributes:
        type: 登録済み配置名（例: "Vortex"）
        parameters: 生成器のパラメータ
    """

    type: str
    parameters: Dict[str, Any] = field(default_factory=dict)

    def validate(self):
        """設定値の妥当性を検証"""
        if self.type not in TEXTURES:
            raise ValueError(f"未対応の配置です: {self.type}")
        expected = set(TEXTURES[self.type].parameters)
        given = set(self.parameters)
        if given != expected:
            raise ValueError(
                f"{self.type} のパラメータが一致しません: "
                f"expected={sorted(expected)}, given={sorted(given)}"
            )

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> TextureConfig:
        if "type" not in config:
            raise ValueError("配置の type が指定されていません")
        texture = cls(type=config["type"], parameters=dict(config.get("parameters") or {}))
        texture.validate()
        texture.parameters = coerce_parameters(texture.type, texture.parameters)
        return texture

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "parameters": dict(self.parameters)}


@dataclass
class TransformConfig:
    """合成演算の設定

    Attributes:
        type: translate / scale / rotate_z / add / normalize
        parameters: 演算のパラメータ（未指定は既定値）
        texture: add で重ね合わせる配置
    """

    type: str
    parameters: Dict[str, float] = field(default_factory=dict)
    texture: Optional[TextureConfig] = None

    def validate(self):
        """設定値の妥当性を検証"""
        if self.type not in TRANSFORM_DEFAULTS:
            raise ValueError(f"未対応の変換です: {self.type}")
        unknown = set(self.parameters) - set(TRANSFORM_DEFAULTS[self.type])
        if unknown:
            raise ValueError(f"{self.type} に不明なパラメータがあります: {sorted(unknown)}")
        if self.type == "add" and self.texture is None:
            raise ValueError("add には texture が必要です")
        if self.type == "scale" and any(
            self.resolved()[k] == 0 for k in ("sx", "sy", "sz")
        ):
            raise ValueError("scale の倍率は0にできません")

    def resolved(self) -> Dict[str, float]:
        """既定値で補完したパラメータ"""
        return {**TRANSFORM_DEFAULTS[self.type], **self.parameters}

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> TransformConfig:
        config = dict(config)
        kind = config.pop("type", None)
        if kind is None:
            raise ValueError("変換の type が指定されていません")
        texture = config.pop("texture", None)
        transform = cls(
            type=kind,
            parameters={k: float(v) for k, v in config.items()},
            texture=TextureConfig.from_dict(texture) if texture is not None else None,
        )
        transform.validate()
        return transform

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"type": self.type, **self.parameters}
        if self.texture is not None:
            result["texture"] = self.texture.to_dict()
        return result


@dataclass
class OutputConfig:
    """出力の設定

    Attributes:
        root: ストレージのルートディレクトリ
        path: サンプル配列の保存先（root からの相対パス）
        normalize: 保存前にセルごとに正規化するかどうか
        plot: z断面の画像を出力するかどうか
        plot_path: 画像の保存先
        slice_index: 描画する z断面のインデックス
    """

    root: Path = Path("results")
    path: str = "m0.npy"
    normalize: bool = False
    plot: bool = False
    plot_path: str = "m0.png"
    slice_index: int = 0

    def __post_init__(self):
        if isinstance(self.root, str):
            self.root = Path(self.root)

    def validate(self):
        """設定値の妥当性を検証"""
        if not self.path:
            raise ValueError("出力パスは空にできません")
        if not self.path.endswith(".npy"):
            raise ValueError(f"未対応の出力フォーマットです: {self.path}")
        if self.slice_index < 0:
            raise ValueError("slice_index は非負である必要があります")

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> OutputConfig:
        base = cls()
        output = cls(
            root=Path(config.get("root", base.root)),
            path=config.get("path", base.path),
            normalize=config.get("normalize", base.normalize),
            plot=config.get("plot", base.plot),
            plot_path=config.get("plot_path", base.plot_path),
            slice_index=config.get("slice_index", base.slice_index),
        )
        output.validate()
        return output

    def to_dict(self) -> Dict[str, Any]:
        return {
            "root": str(self.root),
            "path": self.path,
            "normalize": self.normalize,
            "plot": self.plot,
            "plot_path": self.plot_path,
            "slice_index": self.slice_index,
        }


@dataclass
class RunConfig:
    """生成処理全体の設定"""

    mesh: MeshGeometry
    texture: TextureConfig
    transforms: List[TransformConfig] = field(default_factory=list)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LogConfig = field(default_factory=LogConfig)

    def validate(self):
        """設定全体の妥当性を検証"""
        self.texture.validate()
        for transform in self.transforms:
            transform.validate()
        self.output.validate()
        self.logging.validate()
        if self.output.slice_index >= self.mesh.grid_size[2]:
            raise ValueError("slice_index がグリッドの範囲外です")

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> RunConfig:
        """辞書から設定を生成"""
        if "mesh" not in config:
            raise ValueError("mesh の設定が存在しません")
        if "texture" not in config:
            raise ValueError("texture の設定が存在しません")
        try:
            mesh = MeshGeometry.from_dict(config["mesh"])
        except KeyError as e:
            raise ValueError(f"mesh の設定に {e} がありません") from e

        run = cls(
            mesh=mesh,
            texture=TextureConfig.from_dict(config["texture"]),
            transforms=[
                TransformConfig.from_dict(t) for t in config.get("transforms") or []
            ],
            output=OutputConfig.from_dict(config.get("output") or {}),
            logging=LogConfig.from_dict(config.get("logging") or {}),
        )
        run.validate()
        return run

    @classmethod
    def from_yaml(cls, filepath: Union[str, Path]) -> RunConfig:
        """YAMLファイルから設定を読み込む

        Raises:
            FileNotFoundError: 設定ファイルが存在しない場合
        """
        filepath = Path(filepath)
        if not filepath.exists():
            raise FileNotFoundError(f"設定ファイルが見つかりません: {filepath}")
        with open(filepath, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}
        if not isinstance(config, dict):
            raise TypeError(f"設定ファイルの形式が不正です: {filepath}")
        return cls.from_dict(config)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mesh": self.mesh.to_dict(),
            "texture": self.texture.to_dict(),
            "transforms": [t.to_dict() for t in self.transforms],
            "output": self.output.to_dict(),
            "logging": self.logging.to_dict(),
        }

    def save(self, filepath: Union[str, Path]):
        """設定をYAMLファイルとして保存"""
        with open(filepath, "w", encoding="utf-8") as f:
            yaml.safe_dump(self.to_dict(), f, default_flow_style=False, allow_unicode=True)
