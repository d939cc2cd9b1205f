"""
Interface definitions for dependency injection.

This package provides abstract interfaces for the hub components,
enabling loose coupling and easier testing through dependency injection.
"""

from hub.interfaces.filesystem import (
    ConvergeFileContentsOpts,
    IFileSystem,
    ReadOpts,
    StatOpts,
    WalkFunc,
    SKIP_DIR,
)

__all__ = [
    "ConvergeFileContentsOpts",
    "IFileSystem",
    "ReadOpts",
    "StatOpts",
    "WalkFunc",
    "SKIP_DIR",
]
