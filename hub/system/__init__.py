"""Filesystem implementations for the stemcell hub."""

from hub.system.os_filesystem import OsFileSystem
from hub.system.caching_filesystem import CachingFileSystem
from hub.system.reload import install_reload_signal, periodic_drop, remove_reload_signal

__all__ = [
    "OsFileSystem",
    "CachingFileSystem",
    "install_reload_signal",
    "periodic_drop",
    "remove_reload_signal",
]
