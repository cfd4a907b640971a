"""
Unit tests for the configuration singleton.
"""

import tomllib

import pytest

from dockmem.config import (
    clear_config_cache,
    get_config,
    get_config_info,
    is_config_loaded,
    set_config_path,
)
from dockmem.config import manager
from dockmem.models.config import AppConfig
from dockmem.validation import ValidationError


@pytest.mark.unit
class TestConfigManager:

    def test_load_from_explicit_path(self, config_file):
        set_config_path(config_file)

        config = get_config()

        assert config.runtime.timeout == 5.0
        assert is_config_loaded()
        assert get_config_info()["config_path"] == str(config_file)

    def test_config_is_cached(self, config_file):
        set_config_path(config_file)
        assert get_config() is get_config()

        clear_config_cache()
        assert not is_config_loaded()

    def test_missing_explicit_path(self, temp_dir):
        set_config_path(temp_dir / "missing.toml")

        with pytest.raises(FileNotFoundError):
            get_config()

    def test_missing_default_path_uses_defaults(self, temp_dir, monkeypatch):
        monkeypatch.setattr(manager, "_CONFIG_FILE_PATH", temp_dir / "absent.toml")

        assert get_config() == AppConfig()

    def test_malformed_toml(self, temp_dir):
        path = temp_dir / "config.toml"
        path.write_text("[report\n")
        set_config_path(path)

        with pytest.raises(tomllib.TOMLDecodeError):
            get_config()

    def test_invalid_values(self, temp_dir):
        path = temp_dir / "config.toml"
        path.write_text("[report]\ncolumn_padding = 0\n")
        set_config_path(path)

        with pytest.raises(ValidationError):
            get_config()

    def test_repository_config_matches_defaults(self):
        """The shipped conf/config.toml documents the built-in defaults."""
        assert manager._load_config(manager._DEFAULT_CONFIG_FILE_PATH, required=True) == AppConfig()
