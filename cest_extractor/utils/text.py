"""Text normalization helpers used when matching headings."""

from __future__ import annotations

import re
import unicodedata

WHITESPACE_RUN = re.compile(r"\s{2,}")


def deburr(text: str) -> str:
    """Strip combining diacritical marks ("Autopeças" -> "Autopecas").

    Only decomposable letters are mapped; "ø", "ß" or "æ" are left as they are.
    """
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(char for char in decomposed if not unicodedata.combining(char))


def fold_heading(text: str) -> str:
    """Comparison key for headings: no diacritics, lower case."""
    return deburr(text).lower()


def collapse_whitespace(text: str) -> str:
    return WHITESPACE_RUN.sub(" ", text)
