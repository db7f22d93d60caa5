"""Parse the segment list printed on the first page of the annex."""

from __future__ import annotations

import logging
import re
from typing import Iterable, List, Optional

from cest_extractor.models.segment import SegmentSummaryEntry

logger = logging.getLogger(__name__)

SUMMARY_PATTERN = re.compile(r"^(\d{2})\.\s+([A-Z].[^\n]+)")


def parse_summary_line(line: str) -> Optional[SegmentSummaryEntry]:
    """Return the entry for a ``NN. Description`` line, or None."""
    match = SUMMARY_PATTERN.match(line)
    if not match:
        return None
    return SegmentSummaryEntry(index=match.group(1), description=match.group(2))


def parse_segments_summary(lines: Iterable[str]) -> List[SegmentSummaryEntry]:
    """Collect table of contents entries in page order."""
    entries: List[SegmentSummaryEntry] = []
    for line in lines:
        entry = parse_summary_line(line)
        if entry:
            entries.append(entry)
    logger.debug("Found %s summary entries", len(entries))
    return entries
