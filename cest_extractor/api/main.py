"""FastAPI application entry point."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from fastapi import Depends, FastAPI, HTTPException, Query

from cest_extractor.config import settings
from cest_extractor.errors import DocumentLoadError, PageFetchError
from cest_extractor.ingestion.extract_table import extract_table
from cest_extractor.ingestion.pages import FIRST_PAGE
from cest_extractor.ingestion.text_source import PdfTextSource, TextSource
from cest_extractor.models.segment import SegmentSummaryEntry
from cest_extractor.parsing.summary import parse_segments_summary

logger = logging.getLogger(__name__)

app = FastAPI(
    title="CEST Extractor",
    description="Segment tables of the CEST Annex I",
    version="0.1.0",
)


def get_source() -> TextSource:
    """Open the configured document for one request."""
    try:
        return PdfTextSource.from_path(settings.document_path)
    except DocumentLoadError as exc:
        logger.error("Document load failed: %s", exc)
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@app.get("/health")
def health() -> dict[str, str]:
    """Simple readiness probe."""
    return {"status": "ok"}


@app.get("/summary", response_model=List[SegmentSummaryEntry])
def summary(source: TextSource = Depends(get_source)) -> List[SegmentSummaryEntry]:
    """Segments listed in the document's table of contents."""
    try:
        return parse_segments_summary(source.page_text(FIRST_PAGE))
    except PageFetchError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@app.get("/segments")
def segments(
    page: Optional[List[int]] = Query(default=None),
    source: TextSource = Depends(get_source),
) -> List[List[Dict[str, Any]]]:
    """Parsed rows, one array per located segment."""
    try:
        result = extract_table(source, pages=page)
    except PageFetchError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except DocumentLoadError as exc:
        logger.error("Document load failed: %s", exc)
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return result.to_output()
