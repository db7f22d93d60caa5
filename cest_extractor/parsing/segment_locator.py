"""Locate each segment's table inside the concatenated document lines.

The annex repeats every segment title as a heading right above its table.
Boundaries are derived in stages, each returning a new container:

    lines -> occurrences -> provisional spans -> trimmed spans -> spans by key

A span runs from the line after a heading up to the next heading found, minus
any trailing "Anexo ..." cross-reference lines that precede that heading.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, Iterable, List, Sequence

from cest_extractor.models.segment import SegmentOccurrence, SegmentSpan
from cest_extractor.utils.text import fold_heading

logger = logging.getLogger(__name__)

ANNEX_REFERENCE_PATTERN = re.compile(r"Anexo (IX|IV|V?I{0,3})")
TRAILING_WINDOW = 5


def find_occurrences(lines: Sequence[str], segments: Iterable[str]) -> List[SegmentOccurrence]:
    """Return heading matches, grouped by segment in the given order.

    A match on line 0 is ignored.
    """
    folded_lines = [fold_heading(line) for line in lines]
    occurrences: List[SegmentOccurrence] = []
    for segment in segments:
        key = fold_heading(segment)
        occurrences.extend(
            SegmentOccurrence(segment=segment, position=position)
            for position, folded in enumerate(folded_lines)
            if position and folded == key
        )
    return occurrences


def build_provisional_spans(
    occurrences: Sequence[SegmentOccurrence], total_lines: int
) -> List[SegmentSpan]:
    """One span per occurrence, ending where the next occurrence sits."""
    spans: List[SegmentSpan] = []
    for index, occurrence in enumerate(occurrences):
        if index + 1 < len(occurrences):
            end = occurrences[index + 1].position
        else:
            end = total_lines
        spans.append(
            SegmentSpan(
                segment=occurrence.segment,
                start=min(occurrence.position + 1, total_lines),
                end=end,
            )
        )
    return spans


def count_trailing_annex_lines(tail: Sequence[str]) -> int:
    """Count how many lines to cut from the end of a span.

    ``tail`` is walked backwards. At step ``i`` the ``i`` lines already
    walked are joined and tested for an annex reference; each hit counts.
    """
    window = list(reversed(tail[-TRAILING_WINDOW:]))
    count = 0
    for step in range(len(window)):
        if ANNEX_REFERENCE_PATTERN.search(" ".join(window[:step])):
            count += 1
    return count


def trim_spans(lines: Sequence[str], spans: Iterable[SegmentSpan]) -> List[SegmentSpan]:
    trimmed: List[SegmentSpan] = []
    for span in spans:
        skip = count_trailing_annex_lines(lines[span.start:span.end])
        if skip:
            logger.debug("Trimming %s annex lines from %r", skip, span.segment)
        trimmed.append(span.model_copy(update={"end": span.end - skip}))
    return trimmed


def collapse_spans(spans: Iterable[SegmentSpan]) -> Dict[str, SegmentSpan]:
    """Keep one span per segment; a later occurrence replaces an earlier one.

    Keys stay in the order they were first seen.
    """
    collapsed: Dict[str, SegmentSpan] = {}
    for span in spans:
        collapsed[span.segment] = span
    return collapsed


def locate_segments(lines: Sequence[str], segments: Iterable[str]) -> Dict[str, SegmentSpan]:
    """Map each located segment description to its line span."""
    occurrences = find_occurrences(lines, segments)
    provisional = build_provisional_spans(occurrences, len(lines))
    located = collapse_spans(trim_spans(lines, provisional))
    for span in located.values():
        logger.debug("Segment %r spans lines %s-%s", span.segment, span.start, span.end)
    return located
