"""Translation lookup.

``Localizer`` answers lookups against an immutable ``Catalog``. A missing
locale or phrase never raises: the condition is reported through the
diagnostics channel and the source text is returned unchanged.

The module-level functions use one process-wide localizer, built lazily
and exactly once from the configuration (see ``simple_localization.config``)
on first use. Call ``configure()`` at startup to install one explicitly.

Example:
    from simple_localization import translate, translate_using_system_locale

    # localization/tr_TR contains: "Hello" => "Merhaba"
    translate("Hello", "tr_TR")            # "Merhaba"
    translate("Hello", "fr_FR")            # "Hello"

    # LANG=tr_TR.UTF-8
    translate_using_system_locale("Hello")  # "Merhaba"
"""

from __future__ import annotations

import logging
import threading
from typing import Mapping

from simple_localization.catalog import Catalog
from simple_localization.config import LocalizationConfig, load_config
from simple_localization.diagnostics import (
    Condition,
    DiagnosticReporter,
    EnvironmentIndicatorMissing,
    LocaleNotFound,
    LoggingReporter,
    MalformedEnvironmentIndicator,
    PhraseNotFound,
    create_reporter,
)
from simple_localization.environment import (
    DEFAULT_LOCALE_VARIABLE,
    parse_locale_indicator,
    read_locale_indicator,
)
from simple_localization.errors import LocalizationError
from simple_localization.resources import ResourceProvider, provider_from_config

logger = logging.getLogger("simple_localization")


class Localizer:
    """Translates phrases using a fixed catalog.

    Attributes:
        catalog: Catalog the lookups read from.
        reporter: Receives a condition for every failed lookup.
        locale_variable: Environment variable holding the system locale.
    """

    def __init__(
        self,
        catalog: Catalog,
        reporter: DiagnosticReporter | None = None,
        environ: Mapping[str, str] | None = None,
        locale_variable: str = DEFAULT_LOCALE_VARIABLE,
    ) -> None:
        """Initialize localizer.

        Args:
            catalog: Fully built catalog.
            reporter: Diagnostics reporter. Defaults to logging.
            environ: Environment mapping. Defaults to ``os.environ``, read
                at lookup time.
            locale_variable: Environment variable holding the system locale.
        """
        self.catalog = catalog
        self.reporter = reporter if reporter is not None else LoggingReporter()
        self.locale_variable = locale_variable
        self._environ = environ

    @classmethod
    def from_provider(
        cls,
        provider: ResourceProvider,
        reporter: DiagnosticReporter | None = None,
        **kwargs,
    ) -> "Localizer":
        """Build a localizer by loading and parsing every resource once.

        Raises:
            ResourceError: If the resources cannot be loaded.
        """
        return cls(Catalog.from_provider(provider), reporter=reporter, **kwargs)

    @classmethod
    def from_config(
        cls,
        config: LocalizationConfig | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> "Localizer":
        """Build a localizer from configuration.

        Args:
            config: Configuration. Loaded from the environment if omitted.
            environ: Environment mapping used for lookups.

        Raises:
            ConfigError: If the configuration is invalid.
            ResourceError: If the resources cannot be loaded.
        """
        if config is None:
            config = load_config(environ=environ)
        return cls.from_provider(
            provider_from_config(config),
            reporter=create_reporter(config.diagnostics, config.log_level),
            environ=environ,
            locale_variable=config.locale_variable,
        )

    def _report(self, condition: Condition) -> None:
        try:
            self.reporter.report(condition)
        except Exception:
            logger.exception(f"Diagnostics reporter failed on {condition.kind.value}")

    def translate(self, text: str, locale_key: str) -> str:
        """Get the translation of ``text`` in a specific locale.

        Args:
            text: Source-language phrase.
            locale_key: Locale key (e.g. ``"tr_TR"``).

        Returns:
            The translation if it exists, otherwise ``text``.
        """
        phrases = self.catalog.get(locale_key)
        if phrases is None:
            self._report(LocaleNotFound(locale_key))
            return text

        translation = phrases.get(text)
        if translation is None:
            self._report(PhraseNotFound(text, locale_key))
            return text

        return translation

    def system_locale(self) -> str | None:
        """Locale key from the environment, reporting why it is unusable."""
        raw = read_locale_indicator(self._environ, self.locale_variable)
        if raw is None:
            self._report(EnvironmentIndicatorMissing(self.locale_variable))
            return None

        locale_key = parse_locale_indicator(raw)
        if locale_key is None:
            self._report(MalformedEnvironmentIndicator(raw, self.locale_variable))
        return locale_key

    def translate_using_system_locale(self, text: str) -> str:
        """Get the translation of ``text`` in the system's locale.

        The locale is read from the ``LANG`` environment variable (or the
        configured ``locale_variable``): ``tr_TR.UTF-8`` selects ``tr_TR``.

        Returns:
            The translation if it exists, otherwise ``text``.
        """
        locale_key = self.system_locale()
        if locale_key is None:
            return text
        return self.translate(text, locale_key)

    def __repr__(self) -> str:
        return f"Localizer(catalog={self.catalog!r})"


# =============================================================================
# Process-wide localizer
# =============================================================================

_localizer: Localizer | None = None
_lock = threading.Lock()


def _build_default_localizer() -> Localizer:
    try:
        return Localizer.from_config()
    except LocalizationError as e:
        logger.error(f"Translations unavailable, lookups will return source text: {e}")
    except Exception as e:
        logger.exception(f"Translations unavailable, lookups will return source text: {e}")
    return Localizer(Catalog.empty())


def get_localizer() -> Localizer:
    """Get the process-wide localizer, building it on first use.

    Concurrent first calls build it once; every caller gets the same fully
    built instance. If the configuration or resources cannot be loaded the
    error is logged and an empty catalog is used.
    """
    global _localizer
    if _localizer is None:
        with _lock:
            if _localizer is None:
                _localizer = _build_default_localizer()
    return _localizer


def configure(
    localizer: Localizer | None = None,
    *,
    config: LocalizationConfig | None = None,
) -> Localizer:
    """Install the process-wide localizer eagerly.

    Args:
        localizer: Localizer to install.
        config: Configuration to build one from when ``localizer`` is omitted.

    Returns:
        The installed localizer.

    Raises:
        ConfigError: If the configuration is invalid.
        ResourceError: If the resources cannot be loaded.
    """
    global _localizer
    if localizer is None:
        localizer = Localizer.from_config(config)
    with _lock:
        _localizer = localizer
    return localizer


def reset_localizer() -> None:
    """Drop the process-wide localizer (for testing)."""
    global _localizer
    with _lock:
        _localizer = None


def translate(text: str, locale_key: str) -> str:
    """Translate ``text`` into ``locale_key``, or return it unchanged."""
    return get_localizer().translate(text, locale_key)


def translate_using_system_locale(text: str) -> str:
    """Translate ``text`` into the system locale, or return it unchanged."""
    return get_localizer().translate_using_system_locale(text)


# Short names
trl = translate
tr = translate_using_system_locale
