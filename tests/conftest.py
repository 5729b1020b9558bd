"""Shared fixtures for simple-localization tests."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from simple_localization.localizer import reset_localizer

TR_TR = '''"Hello" => "Merhaba"
"How are you?" => "Nasılsın?"
"This is a long text" => "Bu uzun bir yazı"

#"This is a multiline text.

You can write anything you want here.

Don't need to use \\n."#
=>
#"Bu bir çok satırlı yazı.

Buraya istediğin her şeyi yazabilirsin.

\\n kullanman gerekmez."#
'''

AR_QA = '"Hello" => "مرحبًا"\n'

EN_US = '"Hello" => "Hello"\n"Colour" => "Color"\n'

MULTI_LINE_SOURCE = """This is a multiline text.

You can write anything you want here.

Don't need to use \\n."""

MULTI_LINE_TRANSLATION = """Bu bir çok satırlı yazı.

Buraya istediğin her şeyi yazabilirsin.

\\n kullanman gerekmez."""


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Remove configuration variables and reset the process-wide localizer."""
    for key in list(os.environ):
        if key == "LOCALIZATION_DIR" or key.startswith("SIMPLE_LOCALIZATION_"):
            monkeypatch.delenv(key, raising=False)
    reset_localizer()
    yield
    reset_localizer()


@pytest.fixture
def resources() -> dict[str, str]:
    """In-memory translation resources."""
    return {"tr_TR": TR_TR, "ar_QA": AR_QA, "en_US": EN_US}


@pytest.fixture
def localization_dir(tmp_path: Path, resources: dict[str, str]) -> Path:
    """Directory holding one translation file per locale."""
    directory = tmp_path / "localization"
    directory.mkdir()
    for name, text in resources.items():
        (directory / name).write_text(text, encoding="utf-8")
    return directory


@pytest.fixture
def multi_line_source() -> str:
    """Source block of the multi-line ``tr_TR`` entry."""
    return MULTI_LINE_SOURCE


@pytest.fixture
def multi_line_translation() -> str:
    """Translated block of the multi-line ``tr_TR`` entry."""
    return MULTI_LINE_TRANSLATION
