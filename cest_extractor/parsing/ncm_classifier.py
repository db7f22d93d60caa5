"""Classify the lines of the NCM column.

The NCM cell of a row wraps over several lines and mixes exact codes
("8708.29.99"), bare headings ("87"), enumerations ("3926.30.00,"),
ranges ("8301.20 a 8301.60") and chapter references ("Capítulos 84 e 85").
Every rule is a named predicate so it can be tested on its own.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple

DOTTED_CODE = re.compile(r"\d+\.\d+(?:\.\d+)?")
BARE_INTEGER = re.compile(r"^\d+$")
TRAILING_DOT = re.compile(r"\d+\.$")
RANGE_OR_LIST = re.compile(r"\d+,|a \d{2}")
CHAPTER_PREFIX = re.compile(r"^Capítulos?")
ENDS_WITH_DIGITS = re.compile(r"\d+$")


class NcmLineKind(str, Enum):
    DOTTED_CODE = "dotted_code"
    BARE_INTEGER = "bare_integer"
    TRAILING_DOT = "trailing_dot"
    RANGE_OR_LIST = "range_or_list"
    BLANK = "blank"
    CHAPTER = "chapter"


def is_dotted_code(line: str) -> bool:
    return DOTTED_CODE.search(line) is not None


def is_bare_integer(line: str) -> bool:
    return BARE_INTEGER.search(line) is not None


def ends_with_number_dot(line: str) -> bool:
    return TRAILING_DOT.search(line) is not None


def is_range_or_list(line: str) -> bool:
    return RANGE_OR_LIST.search(line) is not None


def is_blank(line: str) -> bool:
    return line == ""


def is_chapter_reference(line: str) -> bool:
    return CHAPTER_PREFIX.search(line) is not None and ENDS_WITH_DIGITS.search(line) is not None


# Order matters: the first matching rule names the line.
RULES: Tuple[Tuple[NcmLineKind, Callable[[str], bool]], ...] = (
    (NcmLineKind.DOTTED_CODE, is_dotted_code),
    (NcmLineKind.BARE_INTEGER, is_bare_integer),
    (NcmLineKind.TRAILING_DOT, ends_with_number_dot),
    (NcmLineKind.RANGE_OR_LIST, is_range_or_list),
    (NcmLineKind.BLANK, is_blank),
    (NcmLineKind.CHAPTER, is_chapter_reference),
)


def classify_ncm_line(line: str) -> Optional[NcmLineKind]:
    """Return the kind of NCM line, or None when the line is not NCM-like."""
    for kind, predicate in RULES:
        if predicate(line):
            return kind
    return None


def is_ncm_line(line: str) -> bool:
    return classify_ncm_line(line) is not None


def normalize_ncms(ncms: Sequence[str]) -> List[str]:
    """Drop blank lines; a chapter reference collapses into one entry."""
    codes = [ncm for ncm in ncms if ncm]
    if codes and CHAPTER_PREFIX.match(codes[0]):
        return [" ".join(codes)]
    return codes
