"""
Read-through caching decorator for IFileSystem.

This module provides CachingFileSystem, which memoizes whole-file reads and
non-recursive glob expansions in memory and forwards every other operation
to the wrapped filesystem untouched. Cached entries stay until drop_cache()
is called; changes made behind the cache's back are not detected.
"""

import logging
import threading
from typing import Dict, List, Optional, Tuple

from hub.interfaces.filesystem import IFileSystem

logger = logging.getLogger(__name__)


def _forward(name: str):
    """Build a method that calls ``name`` on the wrapped filesystem."""

    def method(self, *args, **kwargs):
        return getattr(self._fs, name)(*args, **kwargs)

    # Not functools.wraps: it would copy __isabstractmethod__ from IFileSystem.
    method.__name__ = name
    method.__qualname__ = f"CachingFileSystem.{name}"
    method.__doc__ = getattr(IFileSystem, name).__doc__
    return method


class CachingFileSystem(IFileSystem):
    """
    Filesystem decorator caching read_file and glob results in memory.

    Implements the IFileSystem interface.

    Each of the two caches is a plain dict guarded by its own lock. The lock
    is held for the whole lookup-fetch-store sequence, so at most one
    underlying read (or glob) is in flight per cache at any time. Only
    successful results are stored; exceptions from the wrapped filesystem
    propagate unchanged and leave the cache as it was.

    recursive_glob is deliberately not cached, even for a pattern that glob
    has cached.

    Attributes:
        _fs: The wrapped filesystem
        _read_cache: path -> bytes
        _glob_cache: pattern -> tuple of matches (callers get a fresh list)

    Example:
        >>> fs = CachingFileSystem(OsFileSystem())
        >>> fs.read_file("/etc/hostname")   # miss, reads disk
        >>> fs.read_file("/etc/hostname")   # hit
        >>> fs.drop_cache()
    """

    def __init__(self, fs: IFileSystem, log: Optional[logging.Logger] = None):
        """
        Initialize the caching filesystem.

        Args:
            fs: Filesystem to wrap
            log: Logger for hit/miss/reload records (default: module logger)
        """
        self._fs = fs

        self._read_cache: Dict[str, bytes] = {}
        self._read_cache_lock = threading.Lock()

        self._glob_cache: Dict[str, Tuple[str, ...]] = {}
        self._glob_cache_lock = threading.Lock()

        self._log_tag = "CachingFileSystem"
        self._logger = log or logger

    def drop_cache(self) -> None:
        """
        Forget every cached read and glob result.

        Each cache is swapped for a fresh dict under its own lock. The two
        swaps are separate, so a concurrent caller may briefly see one cache
        emptied and the other still populated.
        """
        self._logger.info(f"{self._log_tag}: Reloading data")

        with self._read_cache_lock:
            self._read_cache = {}

        with self._glob_cache_lock:
            self._glob_cache = {}

    def stats(self) -> dict:
        """
        Get cache entry counts.

        Returns:
            Dictionary containing:
                - read_entries: Number of cached file contents
                - glob_entries: Number of cached glob results
        """
        with self._read_cache_lock:
            read_entries = len(self._read_cache)
        with self._glob_cache_lock:
            glob_entries = len(self._glob_cache)
        return {"read_entries": read_entries, "glob_entries": glob_entries}

    def read_file(self, path: str) -> bytes:
        with self._read_cache_lock:
            if path in self._read_cache:
                self._logger.debug(f"{self._log_tag}: hit: read[{path}]")
                return self._read_cache[path]

            self._logger.debug(f"{self._log_tag}: miss: read[{path}]")

            content = self._fs.read_file(path)
            self._read_cache[path] = content
            return content

    def read_file_string(self, path: str) -> str:
        return self.read_file(path).decode("utf-8")

    def glob(self, pattern: str) -> List[str]:
        with self._glob_cache_lock:
            if pattern in self._glob_cache:
                self._logger.debug(f"{self._log_tag}: hit: glob[{pattern}]")
                return list(self._glob_cache[pattern])

            self._logger.debug(f"{self._log_tag}: miss: glob[{pattern}]")

            matches = tuple(self._fs.glob(pattern))
            self._glob_cache[pattern] = matches
            return list(matches)

    home_dir = _forward("home_dir")
    expand_path = _forward("expand_path")
    mkdir_all = _forward("mkdir_all")
    remove_all = _forward("remove_all")
    chown = _forward("chown")
    chmod = _forward("chmod")
    open_file = _forward("open_file")
    write_file = _forward("write_file")
    write_file_string = _forward("write_file_string")
    write_file_quietly = _forward("write_file_quietly")
    converge_file_contents = _forward("converge_file_contents")
    read_file_with_opts = _forward("read_file_with_opts")
    file_exists = _forward("file_exists")
    rename = _forward("rename")
    symlink = _forward("symlink")
    read_and_follow_link = _forward("read_and_follow_link")
    readlink = _forward("readlink")
    copy_file = _forward("copy_file")
    copy_dir = _forward("copy_dir")
    temp_file = _forward("temp_file")
    temp_dir = _forward("temp_dir")
    change_temp_root = _forward("change_temp_root")
    stat = _forward("stat")
    stat_with_opts = _forward("stat_with_opts")
    lstat = _forward("lstat")
    recursive_glob = _forward("recursive_glob")
    walk = _forward("walk")
