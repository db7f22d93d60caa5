"""Typed models shared across the application."""

from .segment import SegmentOccurrence, SegmentSpan, SegmentSummaryEntry
from .table import ExtractionResult, ParsedSegment, TableRow

__all__ = [
    "ExtractionResult",
    "ParsedSegment",
    "SegmentOccurrence",
    "SegmentSpan",
    "SegmentSummaryEntry",
    "TableRow",
]
