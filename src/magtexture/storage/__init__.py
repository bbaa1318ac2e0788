"""追記専用ストレージパッケージ

生成した磁化配置を永続化するためのシンクです。
"""

from .backend import Backend, LocalBackend
from .files import BUFSIZE, AppendWriter, create, open, remove, touch, must_create, must_open
from .samples import save_samples, load_samples

__all__ = [
    "Backend",
    "LocalBackend",
    "BUFSIZE",
    "AppendWriter",
    "create",
    "open",
    "remove",
    "touch",
    "must_create",
    "must_open",
    "save_samples",
    "load_samples",
]
