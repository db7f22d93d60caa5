"""Tokenize a segment's text span into table rows.

The table text comes out of the PDF one cell fragment per line, with blank
fragments between cells. A row window looks like::

    0  <index or blank>
    1  ITEM
    2  <blank>
    3  CEST
    4… NCM lines (codes, blanks, ranges, chapter references)
    …  description lines, up to the next "N.N" item index

Rows overlap by one line: ``lines_consumed`` stops one line short of the
row's extent so the next window starts on the line that precedes its item.
"""

from __future__ import annotations

import logging
import re
from itertools import takewhile
from typing import List, Optional, Sequence

from cest_extractor.models.table import TableRow
from cest_extractor.parsing.ncm_classifier import is_ncm_line, normalize_ncms
from cest_extractor.utils.text import collapse_whitespace

logger = logging.getLogger(__name__)

HEADER_MARKER = "DESCRIÇÃO"
ROW_HEADER_WIDTH = 4
ITEM_OFFSET = 1
CEST_OFFSET = 3
MIN_ROW_LINES = 2
NEXT_ROW_INDEX = re.compile(r"(?:\d+\.\d+)+")


def skip_to_table_body(lines: Sequence[str]) -> List[str]:
    """Return the lines after the ``DESCRIÇÃO`` column header."""
    for index, line in enumerate(lines):
        if line.upper() == HEADER_MARKER:
            return list(lines[index + 1:])
    return []


def is_next_row_index(line: str) -> bool:
    return NEXT_ROW_INDEX.fullmatch(line) is not None


def normalize_description(lines: Sequence[str]) -> str:
    return collapse_whitespace(" ".join(line for line in lines if line))


def take_table_row(lines: Sequence[str]) -> Optional[TableRow]:
    """Read the row starting at ``lines[0]``; None when the table is over."""
    if len(lines) < MIN_ROW_LINES:
        return None

    window = list(lines)
    if window[0] == "" and window[1] == "":
        window = window[1:]
    # Without the full header there is no CEST cell to read. This also drops the
    # overlapping one- or two-line tail left after the last row, which would
    # otherwise come out as a row with no CEST.
    if len(window) < ROW_HEADER_WIDTH:
        return None

    ncms = list(takewhile(is_ncm_line, window[ROW_HEADER_WIDTH:]))
    description = list(
        takewhile(
            lambda line: not is_next_row_index(line),
            window[ROW_HEADER_WIDTH + len(ncms):],
        )
    )

    return TableRow(
        item=window[ITEM_OFFSET],
        cest=window[CEST_OFFSET],
        ncms=normalize_ncms(ncms),
        description=normalize_description(description),
        lines_consumed=ROW_HEADER_WIDTH + len(ncms) + len(description) - 1,
    )


def parse_segment(lines: Sequence[str]) -> List[TableRow]:
    """Parse every row in a segment span, in order."""
    body = skip_to_table_body(lines)
    rows: List[TableRow] = []
    offset = 0
    while offset < len(body):
        row = take_table_row(body[offset:])
        if row is None:
            break
        rows.append(row)
        offset += row.lines_consumed
    return rows
