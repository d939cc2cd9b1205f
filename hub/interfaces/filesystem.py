"""
Filesystem interface.

This module defines IFileSystem, the full set of filesystem operations the hub
relies on, together with the small option records some operations accept.
Implementations:
    - OsFileSystem: the local operating system
    - CachingFileSystem: read-through cache over another IFileSystem
"""

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import BinaryIO, Callable, List, Optional


@dataclass(frozen=True)
class ReadOpts:
    """Options for IFileSystem.read_file_with_opts."""

    quiet: bool = False


@dataclass(frozen=True)
class StatOpts:
    """Options for IFileSystem.stat_with_opts."""

    quiet: bool = False


@dataclass(frozen=True)
class ConvergeFileContentsOpts:
    """Options for IFileSystem.converge_file_contents."""

    dry_run: bool = False


class _SkipDir:
    def __repr__(self) -> str:
        return "SKIP_DIR"


# Returned from a walk callback to skip the contents of the visited directory.
SKIP_DIR = _SkipDir()

WalkFunc = Callable[[str, Optional[os.stat_result], Optional[Exception]], object]


class IFileSystem(ABC):
    """
    Abstract interface for filesystem access.

    Every operation raises an exception on failure; callers that wrap an
    IFileSystem must let those exceptions through untouched.

    Example:
        ```python
        fs = OsFileSystem()
        fs.write_file_string("/tmp/hub/a.txt", "hello")
        assert fs.read_file_string("/tmp/hub/a.txt") == "hello"
        ```
    """

    @abstractmethod
    def home_dir(self, username: str) -> str:
        """Return the home directory of ``username`` ("" for the current user)."""
        pass

    @abstractmethod
    def expand_path(self, path: str) -> str:
        """Expand a leading ``~`` and return an absolute path."""
        pass

    @abstractmethod
    def mkdir_all(self, path: str, perm: int) -> None:
        """Create ``path`` and any missing parents."""
        pass

    @abstractmethod
    def remove_all(self, file_or_dir: str) -> None:
        """Remove a file or a whole directory tree. Missing paths are ignored."""
        pass

    @abstractmethod
    def chown(self, path: str, username: str) -> None:
        """Change ownership to ``username`` or ``user:group``."""
        pass

    @abstractmethod
    def chmod(self, path: str, perm: int) -> None:
        pass

    @abstractmethod
    def open_file(self, path: str, flag: int, perm: int) -> BinaryIO:
        """Open ``path`` with ``os.open`` flags and return a binary file object."""
        pass

    @abstractmethod
    def write_file(self, path: str, content: bytes) -> None:
        pass

    @abstractmethod
    def write_file_string(self, path: str, content: str) -> None:
        pass

    @abstractmethod
    def write_file_quietly(self, path: str, content: bytes) -> None:
        """Same as write_file but without the diagnostic log line."""
        pass

    @abstractmethod
    def converge_file_contents(
        self,
        path: str,
        content: bytes,
        opts: Optional[ConvergeFileContentsOpts] = None,
    ) -> bool:
        """
        Make ``path`` hold ``content``.

        Returns:
            True if the file was (or, with dry_run, would be) written,
            False if it already held ``content``.
        """
        pass

    @abstractmethod
    def read_file(self, path: str) -> bytes:
        pass

    @abstractmethod
    def read_file_string(self, path: str) -> str:
        pass

    @abstractmethod
    def read_file_with_opts(self, path: str, opts: ReadOpts) -> bytes:
        pass

    @abstractmethod
    def file_exists(self, path: str) -> bool:
        pass

    @abstractmethod
    def rename(self, old_path: str, new_path: str) -> None:
        pass

    @abstractmethod
    def symlink(self, old_path: str, new_path: str) -> None:
        """Create ``new_path`` pointing at ``old_path``."""
        pass

    @abstractmethod
    def read_and_follow_link(self, symlink_path: str) -> str:
        """Resolve every link on the way and return the final target."""
        pass

    @abstractmethod
    def readlink(self, symlink_path: str) -> str:
        """Return the raw target of a symlink."""
        pass

    @abstractmethod
    def copy_file(self, src_path: str, dst_path: str) -> None:
        pass

    @abstractmethod
    def copy_dir(self, src_path: str, dst_path: str) -> None:
        pass

    @abstractmethod
    def temp_file(self, prefix: str) -> BinaryIO:
        pass

    @abstractmethod
    def temp_dir(self, prefix: str) -> str:
        pass

    @abstractmethod
    def change_temp_root(self, path: str) -> None:
        """Place subsequent temp files and directories under ``path``."""
        pass

    @abstractmethod
    def stat(self, path: str) -> os.stat_result:
        pass

    @abstractmethod
    def stat_with_opts(self, path: str, opts: StatOpts) -> os.stat_result:
        pass

    @abstractmethod
    def lstat(self, path: str) -> os.stat_result:
        pass

    @abstractmethod
    def glob(self, pattern: str) -> List[str]:
        """Expand a non-recursive glob pattern."""
        pass

    @abstractmethod
    def recursive_glob(self, pattern: str) -> List[str]:
        """Expand a glob pattern where ``**`` crosses directory levels."""
        pass

    @abstractmethod
    def walk(self, root: str, walk_func: WalkFunc) -> None:
        """
        Visit ``root`` and everything below it in lexical order.

        ``walk_func(path, stat_result, error)`` is called per entry. Returning
        SKIP_DIR for a directory skips its contents; raising stops the walk.
        """
        pass
