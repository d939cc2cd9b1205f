"""
Local operating system implementation of IFileSystem.

OS errors are re-raised as FileSystemException (FileNotFoundException for
missing paths) chained to the original error, with the path in ``details``.
"""

import glob as globlib
import logging
import os
import pwd
import shutil
import tempfile
from contextlib import contextmanager
from typing import BinaryIO, List, Optional

from hub.exceptions import FileNotFoundException, FileSystemException
from hub.interfaces.filesystem import (
    SKIP_DIR,
    ConvergeFileContentsOpts,
    IFileSystem,
    ReadOpts,
    StatOpts,
    WalkFunc,
)

logger = logging.getLogger(__name__)


@contextmanager
def _wrap_os_error(message: str, path: str):
    """Translate OSError raised inside the block into FileSystemException."""
    try:
        yield
    except FileNotFoundError as e:
        raise FileNotFoundException(message, details={"path": path}) from e
    except (OSError, KeyError) as e:
        raise FileSystemException(message, details={"path": path}) from e


def _mode_for_flags(flag: int) -> str:
    accmode = flag & (os.O_RDONLY | os.O_WRONLY | os.O_RDWR)
    if accmode == os.O_RDWR:
        return "a+b" if flag & os.O_APPEND else "r+b"
    if accmode == os.O_WRONLY:
        return "ab" if flag & os.O_APPEND else "wb"
    return "rb"


class OsFileSystem(IFileSystem):
    """
    IFileSystem backed by the local OS.

    Attributes:
        _temp_root: Directory for temp_file/temp_dir (None = system default)
    """

    def __init__(self, temp_root: Optional[str] = None):
        self._temp_root = temp_root

    def home_dir(self, username: str) -> str:
        if not username:
            return os.path.expanduser("~")
        with _wrap_os_error(f"Looking up home directory for {username}", username):
            return pwd.getpwnam(username).pw_dir

    def expand_path(self, path: str) -> str:
        if path.startswith("~"):
            path = os.path.expanduser(path)
        return os.path.abspath(path)

    def mkdir_all(self, path: str, perm: int) -> None:
        logger.debug(f"Making dir {path} with perm {perm:o}")
        with _wrap_os_error(f"Making dir {path}", path):
            os.makedirs(path, mode=perm, exist_ok=True)

    def remove_all(self, file_or_dir: str) -> None:
        logger.debug(f"Remove all {file_or_dir}")
        with _wrap_os_error(f"Removing {file_or_dir}", file_or_dir):
            if os.path.islink(file_or_dir) or os.path.isfile(file_or_dir):
                os.remove(file_or_dir)
            elif os.path.isdir(file_or_dir):
                shutil.rmtree(file_or_dir)

    def chown(self, path: str, username: str) -> None:
        logger.debug(f"Chown {path} to user {username}")
        user, _, group = username.partition(":")
        with _wrap_os_error(f"Chowning {path} to {username}", path):
            shutil.chown(path, user=user, group=group or None)

    def chmod(self, path: str, perm: int) -> None:
        logger.debug(f"Chmod {path} to {perm:o}")
        with _wrap_os_error(f"Chmoding {path}", path):
            os.chmod(path, perm)

    def open_file(self, path: str, flag: int, perm: int) -> BinaryIO:
        logger.debug(f"Opening file {path}")
        with _wrap_os_error(f"Opening file {path}", path):
            fd = os.open(path, flag, perm)
            return os.fdopen(fd, _mode_for_flags(flag))

    def write_file(self, path: str, content: bytes) -> None:
        logger.debug(f"Writing {path}")
        self._write(path, content)

    def write_file_string(self, path: str, content: str) -> None:
        self.write_file(path, content.encode("utf-8"))

    def write_file_quietly(self, path: str, content: bytes) -> None:
        self._write(path, content)

    def _write(self, path: str, content: bytes) -> None:
        with _wrap_os_error(f"Writing file {path}", path):
            parent = os.path.dirname(path)
            if parent:
                os.makedirs(parent, exist_ok=True)
            with open(path, "wb") as f:
                f.write(content)

    def converge_file_contents(
        self,
        path: str,
        content: bytes,
        opts: Optional[ConvergeFileContentsOpts] = None,
    ) -> bool:
        opts = opts or ConvergeFileContentsOpts()

        try:
            with open(path, "rb") as f:
                if f.read() == content:
                    return False
        except FileNotFoundError:
            pass
        except OSError as e:
            raise FileSystemException(
                f"Reading file {path}", details={"path": path}
            ) from e

        if opts.dry_run:
            return True

        self.write_file(path, content)
        return True

    def read_file(self, path: str) -> bytes:
        return self.read_file_with_opts(path, ReadOpts())

    def read_file_string(self, path: str) -> str:
        return self.read_file(path).decode("utf-8")

    def read_file_with_opts(self, path: str, opts: ReadOpts) -> bytes:
        if not opts.quiet:
            logger.debug(f"Reading file {path}")
        with _wrap_os_error(f"Reading file {path}", path):
            with open(path, "rb") as f:
                content = f.read()
        if not opts.quiet:
            logger.debug(f"Read {len(content)} bytes from {path}")
        return content

    def file_exists(self, path: str) -> bool:
        return os.path.exists(path)

    def rename(self, old_path: str, new_path: str) -> None:
        with _wrap_os_error(f"Renaming {old_path} to {new_path}", old_path):
            os.rename(old_path, new_path)

    def symlink(self, old_path: str, new_path: str) -> None:
        logger.debug(f"Symlinking oldPath {old_path} with newPath {new_path}")
        with _wrap_os_error(f"Symlinking {new_path} to {old_path}", new_path):
            if os.path.lexists(new_path):
                if os.path.islink(new_path) and os.readlink(new_path) == old_path:
                    return
                self.remove_all(new_path)
            os.symlink(old_path, new_path)

    def read_and_follow_link(self, symlink_path: str) -> str:
        with _wrap_os_error(f"Following link {symlink_path}", symlink_path):
            return os.path.realpath(symlink_path, strict=True)

    def readlink(self, symlink_path: str) -> str:
        with _wrap_os_error(f"Reading link {symlink_path}", symlink_path):
            return os.readlink(symlink_path)

    def copy_file(self, src_path: str, dst_path: str) -> None:
        logger.debug(f"Copying file {src_path} to {dst_path}")
        with _wrap_os_error(f"Copying {src_path} to {dst_path}", src_path):
            shutil.copy(src_path, dst_path)

    def copy_dir(self, src_path: str, dst_path: str) -> None:
        logger.debug(f"Copying dir {src_path} to {dst_path}")
        with _wrap_os_error(f"Copying dir {src_path} to {dst_path}", src_path):
            shutil.copytree(src_path, dst_path, symlinks=True, dirs_exist_ok=True)

    def temp_file(self, prefix: str) -> BinaryIO:
        with _wrap_os_error(f"Creating temp file {prefix}", self._temp_root or ""):
            return tempfile.NamedTemporaryFile(
                prefix=prefix, dir=self._temp_root, delete=False
            )

    def temp_dir(self, prefix: str) -> str:
        with _wrap_os_error(f"Creating temp dir {prefix}", self._temp_root or ""):
            return tempfile.mkdtemp(prefix=prefix, dir=self._temp_root)

    def change_temp_root(self, path: str) -> None:
        self.mkdir_all(path, 0o700)
        self._temp_root = path

    def stat(self, path: str) -> os.stat_result:
        return self.stat_with_opts(path, StatOpts())

    def stat_with_opts(self, path: str, opts: StatOpts) -> os.stat_result:
        if not opts.quiet:
            logger.debug(f"Stat '{path}'")
        with _wrap_os_error(f"Stating {path}", path):
            return os.stat(path)

    def lstat(self, path: str) -> os.stat_result:
        logger.debug(f"Lstat '{path}'")
        with _wrap_os_error(f"Lstating {path}", path):
            return os.lstat(path)

    def glob(self, pattern: str) -> List[str]:
        logger.debug(f"Glob '{pattern}'")
        return sorted(globlib.glob(pattern))

    def recursive_glob(self, pattern: str) -> List[str]:
        logger.debug(f"RecursiveGlob '{pattern}'")
        return sorted(globlib.glob(pattern, recursive=True))

    def walk(self, root: str, walk_func: WalkFunc) -> None:
        try:
            info = os.lstat(root)
        except OSError as e:
            walk_func(root, None, e)
            return
        self._walk(root, info, walk_func)

    def _walk(self, path: str, info: os.stat_result, walk_func: WalkFunc) -> None:
        result = walk_func(path, info, None)
        if not os.path.isdir(path) or os.path.islink(path):
            return
        if result is SKIP_DIR:
            return

        try:
            names = sorted(os.listdir(path))
        except OSError as e:
            walk_func(path, info, e)
            return

        for name in names:
            child = os.path.join(path, name)
            try:
                child_info = os.lstat(child)
            except OSError as e:
                walk_func(child, None, e)
                continue
            self._walk(child, child_info, walk_func)
