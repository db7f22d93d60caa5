"""Page selection and concurrent page fetching."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional, Sequence

from cest_extractor.config import settings
from cest_extractor.ingestion.text_source import TextSource

logger = logging.getLogger(__name__)

FIRST_PAGE = 1


def select_pages(page_count: int, requested: Optional[Iterable[int]] = None) -> List[int]:
    """Pages to scan: always page 1, then the requested ones in ascending order.

    Without a request every page of the document is scanned.
    """
    candidates = list(requested or []) or range(1, page_count + 1)
    return [FIRST_PAGE] + sorted({page for page in candidates if page != FIRST_PAGE})


def fetch_pages(
    source: TextSource,
    page_numbers: Sequence[int],
    workers: Optional[int] = None,
) -> List[List[str]]:
    """Fetch pages on a thread pool; results follow ``page_numbers`` order.

    ``PdfTextSource`` serializes its PyMuPDF calls, so for PDFs the workers
    overlap only in scheduling. The first failing page aborts the batch.
    """
    if not page_numbers:
        return []
    max_workers = min(workers or settings.page_fetch_workers, len(page_numbers))
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        pages = list(executor.map(source.page_text, page_numbers))
    logger.info("Fetched %s pages with %s workers", len(pages), max_workers)
    return pages


def to_lines(pages: Iterable[Sequence[str]]) -> List[str]:
    """Concatenate page fragments into one trimmed line sequence."""
    return [fragment.strip() for page in pages for fragment in page]
