"""
Hub configuration file model.

The hub is configured by a JSON document whose keys are PascalCase, e.g.::

    {
      "Repos": {"Type": "file", "Dir": "/var/vcap/store/hub"},
      "APIKey": "secret",
      "ActAsWorker": false,
      "Watcher": {"Enabled": true, "Periodic": "10m", "Threads": 2}
    }

Missing keys take their defaults.
"""

import logging

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from hub.exceptions import ConfigParseException, ConfigReadException, FileSystemException
from hub.interfaces.filesystem import IFileSystem

logger = logging.getLogger(__name__)


class _ConfigModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class ReposOptions(_ConfigModel):
    """Where release and stemcell data is stored."""

    type: str = Field("file", alias="Type")
    dir: str = Field("", alias="Dir")
    conn_url: str = Field("", alias="ConnURL")


class FactoryOptions(_ConfigModel):
    """Options shared by the background watcher/importer workers."""

    enabled: bool = Field(False, alias="Enabled")
    periodic: str = Field("", alias="Periodic")
    threads: int = Field(1, alias="Threads", ge=1)


class Config(_ConfigModel):
    """Complete hub configuration."""

    repos: ReposOptions = Field(default_factory=ReposOptions, alias="Repos")

    api_key: str = Field("", alias="APIKey")

    # Does not start web server; just does background work
    act_as_worker: bool = Field(False, alias="ActAsWorker")

    watcher: FactoryOptions = Field(default_factory=FactoryOptions, alias="Watcher")
    importer: FactoryOptions = Field(default_factory=FactoryOptions, alias="Importer")

    stemcell_importer: FactoryOptions = Field(
        default_factory=FactoryOptions, alias="StemcellImporter"
    )


def load_config(path: str, fs: IFileSystem) -> Config:
    """
    Read and parse the hub configuration file.

    Args:
        path: Location of the JSON config file
        fs: Filesystem used to read it

    Returns:
        The parsed Config

    Raises:
        ConfigReadException: The file could not be read
        ConfigParseException: The content is not a valid config document
    """
    try:
        content = fs.read_file(path)
    except FileSystemException as e:
        raise ConfigReadException(
            f"Reading config {path}", details={"path": path, "reason": e.message}
        ) from e

    try:
        config = Config.model_validate_json(content)
    except ValidationError as e:
        raise ConfigParseException(
            "Unmarshalling config", details={"path": path, "errors": e.error_count()}
        ) from e

    logger.info(f"Loaded config from {path} (act_as_worker={config.act_as_worker})")
    return config
