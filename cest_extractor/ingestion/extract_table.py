"""Extract the CEST segment tables from the Annex I PDF and print them as JSON."""

from __future__ import annotations

import argparse
import json
import logging
from typing import Iterable, List, Optional

from cest_extractor.config import settings
from cest_extractor.errors import ExtractionError
from cest_extractor.ingestion.pages import FIRST_PAGE, fetch_pages, select_pages, to_lines
from cest_extractor.ingestion.text_source import PdfTextSource, TextSource
from cest_extractor.models.table import ExtractionResult, ParsedSegment
from cest_extractor.parsing.row_parser import parse_segment
from cest_extractor.parsing.segment_locator import locate_segments
from cest_extractor.parsing.summary import parse_segments_summary

logger = logging.getLogger(__name__)


def extract_table(
    source: TextSource,
    pages: Optional[Iterable[int]] = None,
    workers: Optional[int] = None,
) -> ExtractionResult:
    """Run summary parsing, segment location and row parsing over a document.

    ``pages`` limits the pages scanned besides page 1, which is always read
    first since its table of contents names the segments.
    """
    page_numbers = select_pages(source.page_count(), pages)

    first_page = source.page_text(FIRST_PAGE)
    summary = parse_segments_summary(first_page)
    if not summary:
        logger.warning("No segment summary found on page %s", FIRST_PAGE)

    remaining = fetch_pages(source, page_numbers[1:], workers)
    lines = to_lines([first_page, *remaining])

    spans = locate_segments(lines, [entry.description for entry in summary])
    missing = [entry.description for entry in summary if entry.description not in spans]
    if missing:
        logger.warning("Segments not found in body: %s", ", ".join(missing))

    segments: List[ParsedSegment] = []
    for span in spans.values():
        rows = parse_segment(span.select_lines(lines))
        logger.debug("Parsed %s rows for %r", len(rows), span.segment)
        segments.append(ParsedSegment(segment=span.segment, span=span, rows=rows))

    logger.info(
        "Parsed %s rows across %s segments from %s lines",
        sum(len(segment.rows) for segment in segments),
        len(segments),
        len(lines),
    )
    return ExtractionResult(summary=summary, segments=segments)


def serialize(result: ExtractionResult, indent: Optional[int] = None) -> str:
    """Pretty-printed JSON: one array of rows per located segment."""
    if indent is None:
        indent = settings.json_indent
    return json.dumps(result.to_output(), ensure_ascii=False, indent=indent)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cest-extract",
        description="Extract the CEST segment tables from the Annex I PDF.",
    )
    parser.add_argument(
        "--document",
        default=None,
        help=f"PDF to read (default: {settings.document_path}).",
    )
    parser.add_argument(
        "--page",
        type=int,
        action="append",
        default=None,
        metavar="N",
        help="Scan only this page besides page 1. Repeatable; default is every page.",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help=f"JSON indentation (default: {settings.json_indent}).",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=settings.log_level)
    document = args.document or settings.document_path
    try:
        source = PdfTextSource.from_path(document)
        result = extract_table(source, pages=args.page)
    except ExtractionError as exc:
        logger.error("%s", exc)
        raise SystemExit(1) from exc
    print(serialize(result, indent=args.indent))


if __name__ == "__main__":
    main()
