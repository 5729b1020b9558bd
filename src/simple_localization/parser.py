"""Translation file parser.

A translation file holds one locale's phrases as ``source => translation``
pairs, in two forms that may be mixed freely:

    "Hello" => "Merhaba"

    #"This is a multiline text.

    It keeps its line breaks."#
    =>
    #"Bu bir çok satırlı yazı.

    Satır sonlarını korur."#

Phrases are taken verbatim from between their delimiters: no escape
sequences are interpreted, so ``\\n`` inside a phrase stays a backslash
followed by ``n``. Text that matches neither form is ignored.

Example:
    from simple_localization.parser import parse_translations

    phrases = parse_translations('"Hello" => "Merhaba"')
    phrases["Hello"]  # -> "Merhaba"
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterator, Mapping


class EntryKind(str, Enum):
    """Surface syntax an entry was written in."""

    SINGLE_LINE = "single_line"
    MULTI_LINE = "multi_line"


# "source" => "translation"; each capture stops at the next quote.
SINGLE_LINE_PATTERN = re.compile(r'"([^"]+)"\s*=>\s*"([^"]*)"')

# #"source"# => #"translation"#; captures may span lines but never cross "#.
MULTI_LINE_PATTERN = re.compile(r'#"((?:(?!"#).)+)"#\s*=>\s*#"((?:(?!"#).)*)"#', re.DOTALL)

_PATTERNS: tuple[tuple[EntryKind, re.Pattern[str]], ...] = (
    (EntryKind.SINGLE_LINE, SINGLE_LINE_PATTERN),
    (EntryKind.MULTI_LINE, MULTI_LINE_PATTERN),
)


@dataclass(frozen=True)
class TranslationEntry:
    """A single ``source => translation`` pair found in a resource.

    Attributes:
        source: Source-language phrase (never empty).
        translation: Translated phrase (may be empty).
        kind: Which syntax produced the entry.
        offset: Character offset of the entry in the resource text.
    """

    source: str
    translation: str
    kind: EntryKind
    offset: int = 0

    @property
    def is_multi_line(self) -> bool:
        return self.kind is EntryKind.MULTI_LINE


def iter_entries(text: str) -> Iterator[TranslationEntry]:
    """Yield every entry in a resource.

    All single-line entries come first, in document order, followed by all
    multi-line entries in document order. The two scans are independent.

    Args:
        text: Full content of one translation resource.

    Yields:
        TranslationEntry for each match.
    """
    for kind, pattern in _PATTERNS:
        for match in pattern.finditer(text):
            yield TranslationEntry(
                source=match.group(1),
                translation=match.group(2),
                kind=kind,
                offset=match.start(),
            )


def parse_translations(text: str) -> Mapping[str, str]:
    """Parse a resource into its phrase mapping.

    Entries are inserted in ``iter_entries`` order, so a phrase defined more
    than once keeps the last definition (multi-line entries are inserted
    after single-line ones).

    Args:
        text: Full content of one translation resource.

    Returns:
        Read-only mapping of source phrase to translated phrase. Empty when
        the resource contains no entries.
    """
    phrases: dict[str, str] = {}
    for entry in iter_entries(text):
        phrases[entry.source] = entry.translation
    return MappingProxyType(phrases)
