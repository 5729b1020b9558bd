"""Exception hierarchy for simple-localization.

Lookups never raise: a missing locale or phrase is reported through the
diagnostics channel and the source text is returned. The exceptions below
are raised only by the explicit construction APIs (loading resources,
loading configuration, building a ``Localizer``).
"""

from __future__ import annotations

from pathlib import Path


class LocalizationError(Exception):
    """Base exception for simple-localization."""

    pass


class ResourceError(LocalizationError):
    """A translation resource could not be loaded.

    Attributes:
        source: File, directory or package the resource came from.
    """

    def __init__(self, message: str, source: Path | str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.source = source

    def __str__(self) -> str:
        if self.source is None:
            return self.message
        return f"{self.message} ({self.source})"


class ConfigError(LocalizationError):
    """Base configuration error."""

    pass


class ConfigValidationError(ConfigError):
    """Configuration validation error."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Configuration validation failed: {', '.join(errors)}")


class ConfigSourceError(ConfigError):
    """Configuration source error."""

    pass
