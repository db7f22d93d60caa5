"""Summary, segment boundary and table row parsing."""

from .ncm_classifier import NcmLineKind, classify_ncm_line, normalize_ncms
from .row_parser import ROW_HEADER_WIDTH, parse_segment, take_table_row
from .segment_locator import locate_segments
from .summary import parse_segments_summary

__all__ = [
    "NcmLineKind",
    "ROW_HEADER_WIDTH",
    "classify_ncm_line",
    "locate_segments",
    "normalize_ncms",
    "parse_segment",
    "parse_segments_summary",
    "take_table_row",
]
