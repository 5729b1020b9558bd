"""Diagnostics channel for failed lookups.

Every failed lookup produces one condition object describing what went
wrong. Conditions are handed to a ``DiagnosticReporter``; the caller still
receives the source text, whatever the reporter does with the condition.

Example:
    from simple_localization.diagnostics import CollectingReporter
    from simple_localization.localizer import Localizer

    reporter = CollectingReporter()
    localizer = Localizer(catalog, reporter=reporter)
    localizer.translate("Hello", "fr_FR")  # -> "Hello"
    reporter.conditions  # [LocaleNotFound(locale_key='fr_FR')]
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Protocol, Union, runtime_checkable

logger = logging.getLogger("simple_localization")


class ConditionKind(str, Enum):
    """Kinds of lookup failure."""

    LOCALE_NOT_FOUND = "locale_not_found"
    PHRASE_NOT_FOUND = "phrase_not_found"
    ENVIRONMENT_INDICATOR_MISSING = "environment_indicator_missing"
    MALFORMED_ENVIRONMENT_INDICATOR = "malformed_environment_indicator"


@dataclass(frozen=True)
class LocaleNotFound:
    """No resource exists for the requested locale."""

    locale_key: str

    kind: ClassVar[ConditionKind] = ConditionKind.LOCALE_NOT_FOUND

    @property
    def message(self) -> str:
        return f"Translation Error: locale '{self.locale_key}' doesn't exist"


@dataclass(frozen=True)
class PhraseNotFound:
    """The locale exists but has no entry for the phrase."""

    text: str
    locale_key: str

    kind: ClassVar[ConditionKind] = ConditionKind.PHRASE_NOT_FOUND

    @property
    def message(self) -> str:
        return (
            f"Translation Error: No translation of '{self.text}' "
            f"exists in '{self.locale_key}' language"
        )


@dataclass(frozen=True)
class EnvironmentIndicatorMissing:
    """The locale environment variable is not set."""

    variable: str = "LANG"

    kind: ClassVar[ConditionKind] = ConditionKind.ENVIRONMENT_INDICATOR_MISSING

    @property
    def message(self) -> str:
        return f"Translation Error: '{self.variable}' environment variable doesn't exist"


@dataclass(frozen=True)
class MalformedEnvironmentIndicator:
    """The locale environment variable has no usable locale part."""

    raw: str
    variable: str = "LANG"

    kind: ClassVar[ConditionKind] = ConditionKind.MALFORMED_ENVIRONMENT_INDICATOR

    @property
    def message(self) -> str:
        return (
            f"Translation Error: '{self.variable}' environment variable is not "
            f"suitable to parse: {self.raw!r} (example: en_US.UTF-8)"
        )


Condition = Union[
    LocaleNotFound,
    PhraseNotFound,
    EnvironmentIndicatorMissing,
    MalformedEnvironmentIndicator,
]


@runtime_checkable
class DiagnosticReporter(Protocol):
    """Receives lookup failure conditions."""

    def report(self, condition: Condition) -> None:
        """Handle a single condition."""
        ...


class LoggingReporter:
    """Reporter that writes conditions to the ``simple_localization`` logger."""

    def __init__(
        self,
        level: int | str = logging.WARNING,
        logger_: logging.Logger | None = None,
    ) -> None:
        if isinstance(level, str):
            level = logging.getLevelName(level.upper())
            if not isinstance(level, int):
                level = logging.WARNING
        self.level = level
        self.logger = logger_ or logger

    def report(self, condition: Condition) -> None:
        self.logger.log(
            self.level,
            condition.message,
            extra={"condition_kind": condition.kind.value},
        )


class CollectingReporter:
    """Reporter that keeps every condition in memory."""

    def __init__(self) -> None:
        self._conditions: list[Condition] = []
        self._lock = threading.Lock()

    def report(self, condition: Condition) -> None:
        with self._lock:
            self._conditions.append(condition)

    @property
    def conditions(self) -> list[Condition]:
        with self._lock:
            return list(self._conditions)

    def of_kind(self, kind: ConditionKind) -> list[Condition]:
        """Return collected conditions of one kind."""
        return [c for c in self.conditions if c.kind is kind]

    def clear(self) -> None:
        with self._lock:
            self._conditions.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._conditions)


class NullReporter:
    """Reporter that drops every condition."""

    def report(self, condition: Condition) -> None:
        pass


def create_reporter(mode: str = "log", level: int | str = logging.WARNING) -> DiagnosticReporter:
    """Create a reporter from a configuration mode.

    Args:
        mode: ``"log"`` or ``"silent"``.
        level: Log level used by the logging reporter.

    Returns:
        Reporter instance.
    """
    if mode == "silent":
        return NullReporter()
    if mode == "log":
        return LoggingReporter(level)
    raise ValueError(f"Unknown diagnostics mode: {mode}")
