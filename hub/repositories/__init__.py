"""
Repository package for data access layer.

This package provides repository pattern implementations for managing
data access across the hub.
"""

from hub.repositories.manifest_repository import ManifestRepository

__all__ = ["ManifestRepository"]
