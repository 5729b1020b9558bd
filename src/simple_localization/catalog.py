"""Translation catalog.

The catalog maps each locale key to that locale's phrase mapping. It is
built once from a full set of resources and never changes afterwards, so a
single instance can be shared by every thread without locking.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterator, Mapping

from simple_localization.errors import ResourceError
from simple_localization.parser import parse_translations
from simple_localization.resources import ResourceProvider

logger = logging.getLogger(__name__)


class Catalog:
    """Immutable collection of phrase mappings indexed by locale key.

    Example:
        catalog = Catalog.from_resources({"tr_TR": '"Hello" => "Merhaba"'})

        catalog.lookup("Hello", "tr_TR")    # "Merhaba"
        catalog.lookup("Goodbye", "tr_TR")  # None
        "tr_TR" in catalog                  # True
    """

    __slots__ = ("_locales",)

    def __init__(self, locales: Mapping[str, Mapping[str, str]] | None = None) -> None:
        """Initialize catalog.

        Args:
            locales: Locale key to phrase mapping. Copied and frozen.
        """
        frozen = {
            key: MappingProxyType(dict(phrases))
            for key, phrases in (locales or {}).items()
        }
        object.__setattr__(self, "_locales", MappingProxyType(frozen))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Catalog is immutable")

    @classmethod
    def empty(cls) -> "Catalog":
        """Create a catalog with no locales."""
        return cls()

    @classmethod
    def from_resources(cls, resources: Mapping[str, str]) -> "Catalog":
        """Build a catalog by parsing every resource once.

        Args:
            resources: Locale key to raw translation file text.

        Returns:
            Fully populated catalog.

        Raises:
            ResourceError: If a locale key is empty.
        """
        locales: dict[str, Mapping[str, str]] = {}
        for locale_key, text in resources.items():
            if not locale_key:
                raise ResourceError("Locale key must not be empty")
            locales[locale_key] = parse_translations(text)
            logger.debug(f"Parsed {len(locales[locale_key])} phrases for locale: {locale_key}")
        return cls(locales)

    @classmethod
    def from_provider(cls, provider: ResourceProvider) -> "Catalog":
        """Build a catalog from a resource provider."""
        return cls.from_resources(provider.load())

    def get(self, locale_key: str) -> Mapping[str, str] | None:
        """Get the phrase mapping of a locale, if present."""
        return self._locales.get(locale_key)

    def lookup(self, text: str, locale_key: str) -> str | None:
        """Get the translation of ``text`` in a locale.

        Returns:
            The translated phrase, or None when the locale or the phrase is
            absent. An empty string is a valid translation.
        """
        phrases = self._locales.get(locale_key)
        if phrases is None:
            return None
        return phrases.get(text)

    def locales(self) -> list[str]:
        """List locale keys in sorted order."""
        return sorted(self._locales)

    def stats(self) -> dict[str, int]:
        """Number of phrases per locale."""
        return {key: len(self._locales[key]) for key in self.locales()}

    def __contains__(self, locale_key: object) -> bool:
        return locale_key in self._locales

    def __len__(self) -> int:
        return len(self._locales)

    def __iter__(self) -> Iterator[str]:
        return iter(self._locales)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Catalog):
            return NotImplemented
        return {k: dict(v) for k, v in self._locales.items()} == {
            k: dict(v) for k, v in other._locales.items()
        }

    def __repr__(self) -> str:
        return f"Catalog(locales={self.locales()!r})"
