"""Tests for configuration loading."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
import yaml

from simple_localization.config import (
    EnvConfigSource,
    FileConfigSource,
    LocalizationConfig,
    load_config,
)
from simple_localization.errors import ConfigSourceError, ConfigValidationError


class TestLocalizationConfig:
    """Tests for LocalizationConfig."""

    def test_defaults(self):
        config = LocalizationConfig()
        assert config.localization_dir is None
        assert config.resource_package is None
        assert config.resource_subdirectory == "locales"
        assert config.locale_variable == "LANG"
        assert config.diagnostics == "log"
        assert config.log_level == "WARNING"

    def test_normalization(self):
        """Test values are normalized on creation."""
        config = LocalizationConfig(localization_dir="loc", diagnostics="SILENT", log_level="info")
        assert config.localization_dir == Path("loc")
        assert config.diagnostics == "silent"
        assert config.log_level == "INFO"

    def test_from_dict_unknown_key(self):
        """Test unknown keys are rejected."""
        with pytest.raises(ConfigValidationError) as exc_info:
            LocalizationConfig.from_dict({"localisation_dir": "x"})
        assert "localisation_dir" in str(exc_info.value)

    def test_invalid_values(self):
        """Test invalid values are reported together."""
        with pytest.raises(ConfigValidationError) as exc_info:
            LocalizationConfig.from_dict({"diagnostics": "email", "log_level": "LOUD"})
        assert len(exc_info.value.errors) == 2

    def test_empty_locale_variable(self):
        with pytest.raises(ConfigValidationError):
            LocalizationConfig.from_dict({"locale_variable": ""})

    def test_to_dict(self, tmp_path):
        config = LocalizationConfig(localization_dir=tmp_path)
        data = config.to_dict()
        assert data["localization_dir"] == str(tmp_path)
        assert LocalizationConfig.from_dict(data) == config


class TestEnvConfigSource:
    """Tests for EnvConfigSource."""

    def test_legacy_directory_variable(self):
        """Test LOCALIZATION_DIR sets the directory."""
        values = EnvConfigSource(environ={"LOCALIZATION_DIR": "/srv/loc"}).load()
        assert values == {"localization_dir": "/srv/loc"}

    def test_prefixed_variables(self):
        environ = {
            "SIMPLE_LOCALIZATION_LOCALE_VARIABLE": "LC_ALL",
            "SIMPLE_LOCALIZATION_DIAGNOSTICS": "silent",
            "SIMPLE_LOCALIZATION_RESOURCE_PACKAGE": "myapp",
            "UNRELATED": "x",
        }
        values = EnvConfigSource(environ=environ).load()
        assert values == {
            "locale_variable": "LC_ALL",
            "diagnostics": "silent",
            "resource_package": "myapp",
        }

    def test_prefixed_directory_overrides_legacy(self):
        environ = {"LOCALIZATION_DIR": "/old", "SIMPLE_LOCALIZATION_DIR": "/new"}
        assert EnvConfigSource(environ=environ).load() == {"localization_dir": "/new"}

    def test_empty_values_ignored(self):
        environ = {"LOCALIZATION_DIR": "", "SIMPLE_LOCALIZATION_DIAGNOSTICS": ""}
        assert EnvConfigSource(environ=environ).load() == {}

    def test_unknown_prefixed_variable_ignored(self, caplog):
        """Test an unrecognized prefixed variable is skipped with a warning."""
        environ = {
            "SIMPLE_LOCALIZATION_DEBUG": "1",
            "SIMPLE_LOCALIZATION_DIAGNOSTICS": "silent",
        }
        with caplog.at_level(logging.WARNING, logger="simple_localization.config"):
            values = EnvConfigSource(environ=environ).load()

        assert values == {"diagnostics": "silent"}
        assert "SIMPLE_LOCALIZATION_DEBUG" in caplog.text


class TestFileConfigSource:
    """Tests for FileConfigSource."""

    def test_yaml(self, tmp_path):
        path = tmp_path / "localization.yaml"
        path.write_text(yaml.safe_dump({"locale_variable": "LC_ALL", "diagnostics": "silent"}))
        assert FileConfigSource(path).load() == {"locale_variable": "LC_ALL", "diagnostics": "silent"}

    def test_json(self, tmp_path):
        path = tmp_path / "localization.json"
        path.write_text(json.dumps({"resource_package": "myapp"}))
        assert FileConfigSource(path).load() == {"resource_package": "myapp"}

    def test_toml_table(self, tmp_path):
        path = tmp_path / "pyproject.toml"
        path.write_text('[simple_localization]\nlocale_variable = "LC_MESSAGES"\n')
        assert FileConfigSource(path).load() == {"locale_variable": "LC_MESSAGES"}

    def test_relative_directory_resolved_against_file(self, tmp_path):
        path = tmp_path / "conf" / "localization.yaml"
        path.parent.mkdir()
        path.write_text("localization_dir: ../localization\n")
        values = FileConfigSource(path).load()
        assert values["localization_dir"] == str(tmp_path / "conf" / "../localization")

    def test_missing_required(self, tmp_path):
        with pytest.raises(ConfigSourceError, match="not found"):
            FileConfigSource(tmp_path / "missing.yaml").load()

    def test_missing_optional(self, tmp_path):
        assert FileConfigSource(tmp_path / "missing.yaml", required=False).load() == {}

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "localization.ini"
        path.write_text("[x]")
        with pytest.raises(ConfigSourceError, match="Unsupported"):
            FileConfigSource(path).load()

    def test_invalid_content(self, tmp_path):
        path = tmp_path / "localization.json"
        path.write_text("{not json")
        with pytest.raises(ConfigSourceError, match="Failed to parse"):
            FileConfigSource(path).load()

    def test_non_mapping(self, tmp_path):
        path = tmp_path / "localization.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigSourceError, match="mapping"):
            FileConfigSource(path).load()


class TestLoadConfig:
    """Tests for load_config precedence."""

    def test_environment_only(self):
        config = load_config(environ={"LOCALIZATION_DIR": "/srv/loc"})
        assert config.localization_dir == Path("/srv/loc")
        assert config.sources == ["env"]

    def test_precedence(self, tmp_path):
        """Test file < environment < overrides."""
        path = tmp_path / "localization.yaml"
        path.write_text(
            yaml.safe_dump({
                "locale_variable": "LC_ALL",
                "diagnostics": "silent",
                "log_level": "ERROR",
            })
        )
        environ = {
            "SIMPLE_LOCALIZATION_DIAGNOSTICS": "log",
            "SIMPLE_LOCALIZATION_LOG_LEVEL": "INFO",
        }

        config = load_config(path, environ=environ, log_level="DEBUG")

        assert config.locale_variable == "LC_ALL"
        assert config.diagnostics == "log"
        assert config.log_level == "DEBUG"
        assert config.sources == [f"file:{path}", "env", "overrides"]

    def test_none_overrides_ignored(self):
        config = load_config(environ={"LOCALIZATION_DIR": "/srv/loc"}, localization_dir=None)
        assert config.localization_dir == Path("/srv/loc")

    def test_invalid_environment_value(self):
        with pytest.raises(ConfigValidationError):
            load_config(environ={"SIMPLE_LOCALIZATION_DIAGNOSTICS": "email"})

    def test_unknown_environment_variable_does_not_fail(self):
        """Test stray prefixed variables do not invalidate the configuration."""
        environ = {
            "LOCALIZATION_DIR": "/srv/loc",
            "SIMPLE_LOCALIZATION_DEBUG": "1",
        }
        config = load_config(environ=environ)
        assert config.localization_dir == Path("/srv/loc")
