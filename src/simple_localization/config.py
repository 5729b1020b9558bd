"""Configuration for simple-localization.

Configuration is merged from several sources, later ones overriding
earlier ones:

    defaults < configuration file < environment variables < overrides

Environment variables:
    LOCALIZATION_DIR                          Directory of translation files
    SIMPLE_LOCALIZATION_DIR                   Same, takes precedence
    SIMPLE_LOCALIZATION_RESOURCE_PACKAGE      Package shipping translation files
    SIMPLE_LOCALIZATION_RESOURCE_SUBDIRECTORY Directory inside that package
    SIMPLE_LOCALIZATION_LOCALE_VARIABLE       Variable holding the system locale
    SIMPLE_LOCALIZATION_DIAGNOSTICS           "log" or "silent"
    SIMPLE_LOCALIZATION_LOG_LEVEL             Level of diagnostic log records

Usage:
    >>> from simple_localization.config import load_config
    >>>
    >>> config = load_config("localization.yaml")
    >>> config.localization_dir
    PosixPath('localization')
"""

from __future__ import annotations

import json
import logging
import os
import tomllib
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Mapping

import yaml

from simple_localization.errors import ConfigSourceError, ConfigValidationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "SIMPLE_LOCALIZATION_"
LEGACY_DIR_VARIABLE = "LOCALIZATION_DIR"
DIAGNOSTIC_MODES = ("log", "silent")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


# =============================================================================
# Configuration Sources
# =============================================================================


class ConfigSource(ABC):
    """Abstract base class for configuration sources."""

    @abstractmethod
    def load(self) -> dict[str, Any]:
        """Load configuration from source.

        Returns:
            Dictionary of configuration values.
        """
        pass


class EnvConfigSource(ConfigSource):
    """Environment variable configuration source.

    Example:
        SIMPLE_LOCALIZATION_LOCALE_VARIABLE=LC_ALL

        Will produce:
        {"locale_variable": "LC_ALL"}

    Prefixed variables that name no configuration key are logged and skipped.
    """

    _ALIASES = {"dir": "localization_dir"}

    def __init__(
        self,
        prefix: str = ENV_PREFIX,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize environment source.

        Args:
            prefix: Environment variable prefix.
            environ: Environment mapping. Defaults to ``os.environ``.
        """
        self._prefix = prefix
        self._environ = environ

    def load(self) -> dict[str, Any]:
        environ = os.environ if self._environ is None else self._environ
        known = LocalizationConfig.known_keys()
        result: dict[str, Any] = {}

        legacy_dir = environ.get(LEGACY_DIR_VARIABLE)
        if legacy_dir:
            result["localization_dir"] = legacy_dir

        for key, value in environ.items():
            if not key.startswith(self._prefix) or value == "":
                continue
            config_key = key[len(self._prefix):].lower()
            config_key = self._ALIASES.get(config_key, config_key)
            if config_key not in known:
                logger.warning(f"Ignoring unknown environment variable: {key}")
                continue
            result[config_key] = value

        return result


class FileConfigSource(ConfigSource):
    """File-based configuration source.

    Supports YAML, JSON, and TOML formats, detected from the file extension.
    A TOML file may keep its settings under a ``[simple_localization]`` table.
    """

    def __init__(self, path: str | Path, *, required: bool = True) -> None:
        """Initialize file source.

        Args:
            path: Path to configuration file.
            required: Raise error if file not found.
        """
        self._path = Path(path)
        self._required = required

    def load(self) -> dict[str, Any]:
        if not self._path.exists():
            if self._required:
                raise ConfigSourceError(f"Configuration file not found: {self._path}")
            return {}

        content = self._path.read_text(encoding="utf-8")
        suffix = self._path.suffix.lower()

        try:
            if suffix in (".yaml", ".yml"):
                data = yaml.safe_load(content) or {}
            elif suffix == ".json":
                data = json.loads(content)
            elif suffix == ".toml":
                data = tomllib.loads(content)
                data = data.get("simple_localization", data)
            else:
                raise ConfigSourceError(f"Unsupported file format: {suffix}")
        except (yaml.YAMLError, json.JSONDecodeError, tomllib.TOMLDecodeError) as e:
            raise ConfigSourceError(f"Failed to parse config {self._path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigSourceError(f"Configuration must be a mapping: {self._path}")

        # Relative directories are resolved against the config file.
        localization_dir = data.get("localization_dir")
        if localization_dir and not Path(localization_dir).is_absolute():
            data["localization_dir"] = str(self._path.parent / localization_dir)

        return data


# =============================================================================
# Configuration Profile
# =============================================================================


@dataclass
class LocalizationConfig:
    """Resolved configuration.

    Attributes:
        localization_dir: Directory containing one translation file per locale.
        resource_package: Package shipping translation files as package data.
        resource_subdirectory: Directory of translation files inside the package.
        locale_variable: Environment variable holding the system locale.
        diagnostics: How lookup failures are reported ("log" or "silent").
        log_level: Level of diagnostic log records.
    """

    localization_dir: Path | None = None
    resource_package: str | None = None
    resource_subdirectory: str = "locales"
    locale_variable: str = "LANG"
    diagnostics: str = "log"
    log_level: str = "WARNING"
    sources: list[str] = field(default_factory=list, compare=False)

    def __post_init__(self) -> None:
        if self.localization_dir is not None and not isinstance(self.localization_dir, Path):
            self.localization_dir = Path(self.localization_dir)
        self.diagnostics = str(self.diagnostics).lower()
        self.log_level = str(self.log_level).upper()

    def validate(self) -> None:
        """Validate configuration values.

        Raises:
            ConfigValidationError: If any value is invalid.
        """
        errors = []
        if self.diagnostics not in DIAGNOSTIC_MODES:
            errors.append(
                f"diagnostics must be one of {', '.join(DIAGNOSTIC_MODES)}, "
                f"got {self.diagnostics!r}"
            )
        if self.log_level not in LOG_LEVELS:
            errors.append(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}")
        if not self.locale_variable:
            errors.append("locale_variable must not be empty")
        if errors:
            raise ConfigValidationError(errors)

    @classmethod
    def known_keys(cls) -> frozenset[str]:
        """Names of the settable configuration keys."""
        return frozenset(f.name for f in fields(cls)) - {"sources"}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LocalizationConfig":
        """Create a configuration from a flat dictionary.

        Raises:
            ConfigValidationError: On unknown keys or invalid values.
        """
        unknown = sorted(set(data) - cls.known_keys())
        if unknown:
            raise ConfigValidationError([f"unknown configuration key: {k}" for k in unknown])

        config = cls(**{k: v for k, v in data.items() if v is not None})
        config.validate()
        return config

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "localization_dir": str(self.localization_dir) if self.localization_dir else None,
            "resource_package": self.resource_package,
            "resource_subdirectory": self.resource_subdirectory,
            "locale_variable": self.locale_variable,
            "diagnostics": self.diagnostics,
            "log_level": self.log_level,
        }


def load_config(
    path: str | Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
    **overrides: Any,
) -> LocalizationConfig:
    """Load configuration from file, environment and explicit overrides.

    Args:
        path: Optional YAML, JSON or TOML configuration file.
        environ: Environment mapping. Defaults to ``os.environ``.
        **overrides: Values taking precedence over every source.

    Returns:
        Validated configuration.

    Raises:
        ConfigSourceError: If the file cannot be read or parsed.
        ConfigValidationError: If the merged values are invalid.
    """
    merged: dict[str, Any] = {}
    sources: list[str] = []

    if path is not None:
        merged.update(FileConfigSource(path).load())
        sources.append(f"file:{path}")

    env_values = EnvConfigSource(environ=environ).load()
    if env_values:
        merged.update(env_values)
        sources.append("env")

    explicit = {k: v for k, v in overrides.items() if v is not None}
    if explicit:
        merged.update(explicit)
        sources.append("overrides")

    config = LocalizationConfig.from_dict(merged)
    config.sources = sources
    return config
