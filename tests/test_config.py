"""Tests for hub settings and the JSON config file."""

import json

import pytest
from unittest.mock import MagicMock

from hub.config import Config, FactoryOptions, ReposOptions, Settings, load_config
from hub.exceptions import (
    ConfigException,
    ConfigParseException,
    ConfigReadException,
    FileNotFoundException,
)
from hub.interfaces.filesystem import IFileSystem
from hub.system.os_filesystem import OsFileSystem


FULL_CONFIG = {
    "Repos": {"Type": "file", "Dir": "/var/vcap/store/hub"},
    "APIKey": "secret",
    "ActAsWorker": True,
    "Watcher": {"Enabled": True, "Periodic": "10m", "Threads": 2},
    "Importer": {"Enabled": True},
    "StemcellImporter": {"Enabled": False, "Periodic": "1h"},
}


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(FULL_CONFIG))
    return path


class TestLoadConfig:
    """Tests for load_config."""

    def test_load_full_config(self, config_file):
        """Test loading every field from a complete file."""
        config = load_config(str(config_file), OsFileSystem())

        assert config.repos == ReposOptions(type="file", dir="/var/vcap/store/hub")
        assert config.api_key == "secret"
        assert config.act_as_worker is True
        assert config.watcher == FactoryOptions(enabled=True, periodic="10m", threads=2)
        assert config.importer.enabled is True
        assert config.importer.threads == 1
        assert config.stemcell_importer.periodic == "1h"

    def test_missing_keys_use_defaults(self, tmp_path):
        """Test that a partial document loads with defaults."""
        path = tmp_path / "config.json"
        path.write_text('{"APIKey": "k"}')

        config = load_config(str(path), OsFileSystem())

        assert config.api_key == "k"
        assert config.act_as_worker is False
        assert config.repos.type == "file"
        assert config.repos.dir == ""
        assert config.watcher.enabled is False

    def test_empty_object(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{}")

        assert load_config(str(path), OsFileSystem()) == Config()

    def test_missing_file(self, tmp_path):
        """Test that an unreadable file raises ConfigReadException."""
        path = str(tmp_path / "missing.json")

        with pytest.raises(ConfigReadException) as exc_info:
            load_config(path, OsFileSystem())

        assert exc_info.value.message == f"Reading config {path}"
        assert isinstance(exc_info.value.__cause__, FileNotFoundException)

    def test_invalid_json(self, tmp_path):
        """Test that malformed JSON raises ConfigParseException."""
        path = tmp_path / "config.json"
        path.write_text("{not json")

        with pytest.raises(ConfigParseException) as exc_info:
            load_config(str(path), OsFileSystem())

        assert exc_info.value.message == "Unmarshalling config"
        assert exc_info.value.__cause__ is not None

    def test_wrong_types(self, tmp_path):
        """Test that a field of the wrong type is a parse error."""
        path = tmp_path / "config.json"
        path.write_text('{"Watcher": {"Threads": "many"}}')

        with pytest.raises(ConfigException):
            load_config(str(path), OsFileSystem())

    def test_reads_through_given_filesystem(self):
        """Test that the config is read via the injected filesystem."""
        fs = MagicMock(spec=IFileSystem)
        fs.read_file.return_value = b'{"APIKey": "from-fs"}'

        config = load_config("/etc/hub.json", fs)

        assert config.api_key == "from-fs"
        fs.read_file.assert_called_once_with("/etc/hub.json")

    def test_config_immutable(self):
        """Test that Config is frozen."""
        config = Config()

        with pytest.raises(Exception):  # ValidationError
            config.api_key = "new"

    def test_populate_by_field_name(self):
        config = Config(api_key="x", act_as_worker=True)

        assert config.api_key == "x"
        assert config.act_as_worker is True


class TestSettings:
    """Tests for environment-driven Settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("HUB_PORT", raising=False)
        settings = Settings(_env_file=None)

        assert settings.config_path == "config.json"
        assert settings.port == 8080
        assert settings.cache_drop_interval == 0
        assert settings.reload_on_sighup is True

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("HUB_PORT", "9000")
        monkeypatch.setenv("HUB_CONFIG_PATH", "/etc/hub.json")
        monkeypatch.setenv("HUB_CACHE_DROP_INTERVAL", "30")

        settings = Settings(_env_file=None)

        assert settings.port == 9000
        assert settings.config_path == "/etc/hub.json"
        assert settings.cache_drop_interval == 30
