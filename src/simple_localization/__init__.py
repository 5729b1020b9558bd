"""simple-localization - static-text translation from plain-text locale files.

Example:
    from simple_localization import tr, trl

    trl("Hello", "tr_TR")  # "Merhaba", or "Hello" if no translation exists
    tr("Hello")            # same, using the locale in $LANG
"""

from simple_localization.catalog import Catalog
from simple_localization.config import LocalizationConfig, load_config
from simple_localization.diagnostics import (
    CollectingReporter,
    ConditionKind,
    DiagnosticReporter,
    EnvironmentIndicatorMissing,
    LocaleNotFound,
    LoggingReporter,
    MalformedEnvironmentIndicator,
    NullReporter,
    PhraseNotFound,
)
from simple_localization.errors import (
    ConfigError,
    ConfigSourceError,
    ConfigValidationError,
    LocalizationError,
    ResourceError,
)
from simple_localization.localizer import (
    Localizer,
    configure,
    get_localizer,
    reset_localizer,
    tr,
    translate,
    translate_using_system_locale,
    trl,
)
from simple_localization.parser import (
    EntryKind,
    TranslationEntry,
    iter_entries,
    parse_translations,
)
from simple_localization.resources import (
    DirectoryResourceProvider,
    MappingResourceProvider,
    PackageResourceProvider,
    ResourceProvider,
)

# Version: Single source of truth from pyproject.toml
try:
    from importlib.metadata import version, PackageNotFoundError

    __version__ = version("simple-localization")
except PackageNotFoundError:
    # Package not installed (development mode)
    __version__ = "0.0.0.dev"

__all__ = [
    # Core API
    "translate",
    "translate_using_system_locale",
    "trl",
    "tr",
    "Localizer",
    "configure",
    "get_localizer",
    "reset_localizer",
    # Catalog & parsing
    "Catalog",
    "EntryKind",
    "TranslationEntry",
    "iter_entries",
    "parse_translations",
    # Resources
    "ResourceProvider",
    "DirectoryResourceProvider",
    "PackageResourceProvider",
    "MappingResourceProvider",
    # Diagnostics
    "DiagnosticReporter",
    "ConditionKind",
    "LocaleNotFound",
    "PhraseNotFound",
    "EnvironmentIndicatorMissing",
    "MalformedEnvironmentIndicator",
    "LoggingReporter",
    "CollectingReporter",
    "NullReporter",
    # Configuration
    "LocalizationConfig",
    "load_config",
    # Errors
    "LocalizationError",
    "ResourceError",
    "ConfigError",
    "ConfigSourceError",
    "ConfigValidationError",
]
