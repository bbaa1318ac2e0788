"""磁化配置の z断面を可視化するモジュール"""

from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from ..core.mesh import MeshGeometry


def render_slice(
    samples: np.ndarray,
    mesh: MeshGeometry,
    iz: int = 0,
    ax: Optional[Axes] = None,
    **kwargs,
) -> Tuple[Figure, Dict[str, Any]]:
    """z断面の面内成分を矢印で、mz を色で描画

    Args:
        samples: 形状 (nx, ny, nz, 3) のサンプル配列
        mesh: メッシュ幾何情報
        iz: 描画する z断面のインデックス
        ax: 既存のAxes（Noneの場合は新規作成）
        **kwargs: density, cmap, title

    Returns:
        (図, メタデータの辞書)のタプル
    """
    if samples.ndim != 4 or samples.shape[-1] != 3:
        raise ValueError("サンプル配列の形状は (nx, ny, nz, 3) である必要があります")
    if not 0 <= iz < samples.shape[2]:
        raise ValueError(f"z断面のインデックスが範囲外です: {iz}")

    if ax is None:
        fig, ax = plt.subplots()
    else:
        fig = ax.figure

    mx = samples[:, :, iz, 0]
    my = samples[:, :, iz, 1]
    mz = samples[:, :, iz, 2]

    xs, ys, _ = mesh.coordinates()
    X, Y = np.meshgrid(xs, ys, indexing="ij")

    density = kwargs.get("density", 20)
    skip = max(1, min(mx.shape) // density)

    image = ax.pcolormesh(
        X, Y, mz, cmap=kwargs.get("cmap", "RdBu_r"), vmin=-1.0, vmax=1.0, shading="auto"
    )
    fig.colorbar(image, ax=ax, label="mz")
    ax.quiver(
        X[::skip, ::skip],
        Y[::skip, ::skip],
        mx[::skip, ::skip],
        my[::skip, ::skip],
        color="black",
        pivot="middle",
    )

    if "title" in kwargs:
        ax.set_title(kwargs["title"])
    ax.set_aspect("equal")
    ax.set_xlabel("x [m]")
    ax.set_ylabel("y [m]")

    in_plane = np.sqrt(mx**2 + my**2)
    metadata = {
        "slice": iz,
        "data_range": {
            "min_mz": float(np.min(mz)),
            "max_mz": float(np.max(mz)),
            "max_in_plane": float(np.max(in_plane)),
        },
        "skip": skip,
    }
    return fig, metadata


def save_slice(
    samples: np.ndarray,
    mesh: MeshGeometry,
    path: Union[str, Path],
    iz: int = 0,
    dpi: int = 150,
    **kwargs,
) -> Dict[str, Any]:
    """z断面を画像ファイルとして保存"""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig, metadata = render_slice(samples, mesh, iz, **kwargs)
    try:
        fig.savefig(path, dpi=dpi, bbox_inches="tight")
    finally:
        plt.close(fig)
    metadata["path"] = str(path)
    return metadata
