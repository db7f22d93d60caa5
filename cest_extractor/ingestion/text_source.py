"""PyMuPDF-backed access to the text fragments of each PDF page."""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import List, Protocol

import fitz

from cest_extractor.errors import DocumentLoadError, PageFetchError

logger = logging.getLogger(__name__)

# MuPDF keeps global state; every fitz call in this process goes through this lock.
FITZ_LOCK = threading.Lock()


class TextSource(Protocol):
    """What the extraction pipeline needs from a document."""

    def page_count(self) -> int: ...

    def page_text(self, page_number: int) -> List[str]: ...


def load_document(path: Path) -> bytes:
    """Read the whole PDF into memory."""
    try:
        return path.read_bytes()
    except OSError as exc:
        raise DocumentLoadError(f"Cannot read {path}: {exc}") from exc


def iter_page_fragments(page: fitz.Page) -> List[str]:
    """Text spans of a page in content-stream order."""
    page_dict = page.get_text("dict", flags=fitz.TEXT_PRESERVE_WHITESPACE)
    fragments: List[str] = []
    for block in page_dict.get("blocks", []):
        if block.get("type") != 0:
            continue
        for line in block.get("lines", []):
            fragments.extend(span.get("text", "") for span in line.get("spans", []))
    return fragments


class PdfTextSource:
    """Serves page fragments from PDF bytes held in memory.

    Every call opens its own ``fitz.Document`` over the shared bytes while
    holding ``FITZ_LOCK``, so callers on other threads only wait their turn.
    """

    def __init__(self, data: bytes, name: str = "<memory>") -> None:
        self.data = data
        self.name = name
        with FITZ_LOCK, self._open() as doc:
            self._page_count = doc.page_count
        logger.info("Opened %s (%s pages)", name, self._page_count)

    @classmethod
    def from_path(cls, path: Path | str) -> "PdfTextSource":
        path = Path(path)
        return cls(load_document(path), name=str(path))

    def _open(self) -> fitz.Document:
        try:
            return fitz.open(stream=self.data, filetype="pdf")
        except (RuntimeError, ValueError) as exc:
            raise DocumentLoadError(f"Cannot open {self.name} as PDF: {exc}") from exc

    def page_count(self) -> int:
        return self._page_count

    def page_text(self, page_number: int) -> List[str]:
        if not 1 <= page_number <= self._page_count:
            raise PageFetchError(
                page_number, f"{self.name} has {self._page_count} pages"
            )
        with FITZ_LOCK, self._open() as doc:
            try:
                fragments = iter_page_fragments(doc[page_number - 1])
            except (RuntimeError, ValueError) as exc:
                raise PageFetchError(page_number, str(exc)) from exc
        logger.debug("Page %s: %s fragments", page_number, len(fragments))
        return fragments
