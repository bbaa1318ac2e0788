"""追記専用ストレージのバックエンドを提供するモジュール

バックエンドは read / append / remove の3操作だけを持ちます。
ファイル単位の書き込みはすべて末尾への追記として順番に行われます。
"""

from __future__ import annotations
from pathlib import Path
from typing import Protocol, Union, runtime_checkable
import os


@runtime_checkable
class Backend(Protocol):
    """追記専用ストレージ"""

    def read(self, path: str) -> bytes: ...

    def append(self, path: str, data: bytes) -> None: ...

    def remove(self, path: str) -> None: ...


class LocalBackend:
    """ローカルディレクトリ上のバックエンド

    パスはすべてルートディレクトリからの相対パスとして解釈されます。
    """

    def __init__(self, root: Union[str, Path] = "."):
        self.root = Path(root).resolve()

    def _resolve(self, path: str) -> Path:
        target = (self.root / path).resolve()
        if target != self.root and self.root not in target.parents:
            raise ValueError(f"ルート外のパスは指定できません: {path}")
        return target

    def read(self, path: str) -> bytes:
        """ファイル全体を読み込む

        Raises:
            FileNotFoundError: ファイルが存在しない場合
        """
        return self._resolve(path).read_bytes()

    def append(self, path: str, data: bytes) -> None:
        """ファイル末尾に追記（存在しなければ作成）"""
        target = self._resolve(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, "ab") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())

    def remove(self, path: str) -> None:
        """ファイルを削除

        Raises:
            FileNotFoundError: ファイルが存在しない場合
        """
        os.remove(self._resolve(path))

    def __repr__(self) -> str:
        return f"LocalBackend({str(self.root)!r})"
