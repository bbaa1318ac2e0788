"""サンプリングした磁化配置の保存と読み込み"""

from __future__ import annotations

import numpy as np

from .backend import Backend
from . import files


def save_samples(samples: np.ndarray, path: str, backend: Backend, logger=None) -> None:
    """配列を .npy 形式でバックエンドに書き込む"""
    with files.must_create(path, backend, logger) as writer:
        np.save(writer, samples, allow_pickle=False)
    if logger is not None:
        logger.info(f"磁化配置を保存: {path} shape={samples.shape}")


def load_samples(path: str, backend: Backend, logger=None) -> np.ndarray:
    """バックエンドから .npy 形式の配列を読み込む"""
    with files.must_open(path, backend, logger) as reader:
        samples = np.load(reader, allow_pickle=False)
    if logger is not None:
        logger.debug(f"磁化配置を読み込み: {path} shape={samples.shape}")
    return samples
