"""Dependency injection functions for FastAPI.

This module provides dependency injection for the application, including:
- Settings singleton
- CachingFileSystem singleton
- Config singleton (loaded through the caching filesystem)
- ManifestRepository creation
- Utility functions for testing (reset_dependencies)
"""

from typing import Optional

from fastapi import Depends

from hub.config import Config, Settings, get_settings, load_config
from hub.repositories.manifest_repository import ManifestRepository
from hub.system.caching_filesystem import CachingFileSystem
from hub.system.os_filesystem import OsFileSystem


# Filesystem singleton
_filesystem: Optional[CachingFileSystem] = None


def get_filesystem() -> CachingFileSystem:
    """Get or create the process-wide caching filesystem.

    Returns:
        CachingFileSystem: Caching decorator over the local OS filesystem
    """
    global _filesystem
    if _filesystem is None:
        _filesystem = CachingFileSystem(OsFileSystem())
    return _filesystem


# Config singleton
_config: Optional[Config] = None


def get_config(
    settings: Settings = Depends(get_settings),
    fs: CachingFileSystem = Depends(get_filesystem),
) -> Config:
    """Get or load the hub configuration.

    Raises:
        ConfigException: The config file could not be read or parsed
    """
    global _config
    if _config is None:
        _config = load_config(settings.config_path, fs)
    return _config


def get_manifest_repository(
    config: Config = Depends(get_config),
    fs: CachingFileSystem = Depends(get_filesystem),
) -> ManifestRepository:
    """Create a manifest repository rooted at the configured repos dir."""
    return ManifestRepository(fs, config.repos.dir)


def reset_dependencies() -> None:
    """Reset all singletons (for testing).

    This function clears the cached filesystem, config and settings,
    allowing tests to start with fresh instances.
    """
    global _filesystem, _config
    _filesystem = None
    _config = None
    get_settings.cache_clear()
