"""System locale detection.

The system locale comes from a POSIX-style environment variable such as
``LANG=tr_TR.UTF-8``. The locale key is the part before the first ``.``.
"""

from __future__ import annotations

import os
from typing import Mapping

DEFAULT_LOCALE_VARIABLE = "LANG"


def read_locale_indicator(
    environ: Mapping[str, str] | None = None,
    variable: str = DEFAULT_LOCALE_VARIABLE,
) -> str | None:
    """Read the raw locale indicator from the environment.

    Args:
        environ: Environment mapping. Defaults to ``os.environ``.
        variable: Name of the variable to read.

    Returns:
        Raw value (e.g. ``"tr_TR.UTF-8"``) or None if the variable is unset.
    """
    if environ is None:
        environ = os.environ
    return environ.get(variable)


def parse_locale_indicator(raw: str) -> str | None:
    """Extract the locale key from a raw locale indicator.

    Example:
        parse_locale_indicator("tr_TR.UTF-8")  # "tr_TR"
        parse_locale_indicator("C")            # "C"
        parse_locale_indicator(".UTF-8")       # None

    Returns:
        Portion before the first ``.``, or None when that portion is empty.
    """
    locale_key = raw.split(".", 1)[0]
    return locale_key or None


def detect_locale(
    environ: Mapping[str, str] | None = None,
    variable: str = DEFAULT_LOCALE_VARIABLE,
) -> str | None:
    """Locale key of the running system, or None if it cannot be determined."""
    raw = read_locale_indicator(environ, variable)
    if raw is None:
        return None
    return parse_locale_indicator(raw)
