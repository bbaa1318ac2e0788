"""バックエンド上のファイル操作ユーティリティ

create はファイルを作り直し（既存の内容は消える）、大きなバッファ付きの
追記ライタを返します。ライタの close() と flush() はバッファの内容を
順番どおりにバックエンドへ追記します。
"""

from __future__ import annotations
from typing import BinaryIO
import io

from .backend import Backend

# 書き込みバッファサイズ
BUFSIZE = 16 * 1024 * 1024


class AppendWriter(io.RawIOBase):
    """write のたびにバックエンドへ追記する生ライタ"""

    def __init__(self, backend: Backend, path: str):
        super().__init__()
        self.backend = backend
        self.path = path

    def writable(self) -> bool:
        return True

    def write(self, b) -> int:
        data = bytes(b)
        self.backend.append(self.path, data)
        return len(data)


def touch(path: str, backend: Backend) -> None:
    """空の追記でファイルを作成（既存なら内容は変わらない）"""
    backend.append(path, b"")


def remove(path: str, backend: Backend) -> None:
    """ファイルを削除

    Raises:
        FileNotFoundError: ファイルが存在しない場合
    """
    backend.remove(path)


def create(path: str, backend: Backend, buffer_size: int = BUFSIZE) -> io.BufferedWriter:
    """書き込み用にファイルを作成

    既存の内容は削除されるので、同じパスへの再作成は冪等です。
    """
    try:
        backend.remove(path)
    except FileNotFoundError:
        pass
    touch(path, backend)
    return io.BufferedWriter(AppendWriter(backend, path), buffer_size=buffer_size)


def open(path: str, backend: Backend) -> BinaryIO:
    """読み込み用にファイルを開く

    Raises:
        FileNotFoundError: ファイルが存在しない場合
    """
    return io.BytesIO(backend.read(path))


def must_create(path: str, backend: Backend, logger=None) -> io.BufferedWriter:
    """create と同じだが、失敗をログに残してから例外を送出する"""
    try:
        return create(path, backend)
    except Exception as e:
        if logger is not None:
            logger.log_error_with_context("ファイルを作成できません", e, {"path": path})
        raise


def must_open(path: str, backend: Backend, logger=None) -> BinaryIO:
    """open と同じだが、失敗をログに残してから例外を送出する"""
    try:
        return open(path, backend)
    except Exception as e:
        if logger is not None:
            logger.log_error_with_context("ファイルを開けません", e, {"path": path})
        raise
