"""Manifest repository over a directory of JSON documents.

Manifests are read through an IFileSystem, normally a CachingFileSystem, so
repeated listings and reads are served from memory until the cache is
dropped.
"""

import json
import logging
import os
from typing import List, Optional

from hub.exceptions import FileNotFoundException, ManifestException
from hub.interfaces.filesystem import IFileSystem

logger = logging.getLogger(__name__)


class ManifestRepository:
    """Read-only access to ``<root_dir>/<name>.json`` manifests.

    Example:
        ```python
        repo = ManifestRepository(CachingFileSystem(OsFileSystem()), "/data")
        for name in repo.list_names():
            print(name, repo.get(name)["version"])
        ```
    """

    SUFFIX = ".json"

    def __init__(self, fs: IFileSystem, root_dir: str):
        """Initialize the repository.

        Args:
            fs: Filesystem to read manifests through
            root_dir: Directory holding the manifest files
        """
        self._fs = fs
        self._root_dir = root_dir

    @property
    def root_dir(self) -> str:
        return self._root_dir

    def list_names(self) -> List[str]:
        """Return manifest names (file names without suffix) in glob order."""
        pattern = os.path.join(self._root_dir, f"*{self.SUFFIX}")
        return [
            os.path.basename(path)[: -len(self.SUFFIX)]
            for path in self._fs.glob(pattern)
        ]

    def get(self, name: str) -> Optional[dict]:
        """Load a manifest by name.

        Args:
            name: Manifest name without directory or suffix

        Returns:
            The decoded manifest, or None if it does not exist

        Raises:
            ManifestException: The name is invalid or the file is not a JSON object
        """
        if not name or os.sep in name or name.startswith("."):
            raise ManifestException(f"Invalid manifest name: {name}", details={"name": name})

        path = os.path.join(self._root_dir, f"{name}{self.SUFFIX}")
        try:
            content = self._fs.read_file_string(path)
        except FileNotFoundException:
            logger.debug(f"Manifest not found: {path}")
            return None
        except UnicodeDecodeError as e:
            raise ManifestException(
                f"Manifest {name} is not valid UTF-8", details={"name": name, "error": str(e)}
            ) from e

        try:
            manifest = json.loads(content)
        except json.JSONDecodeError as e:
            raise ManifestException(
                f"Manifest {name} is not valid JSON", details={"name": name, "error": str(e)}
            ) from e

        if not isinstance(manifest, dict):
            raise ManifestException(
                f"Manifest {name} must be a JSON object", details={"name": name}
            )
        return manifest
