"""Table row models produced by the row parser."""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field

from .segment import SegmentSpan, SegmentSummaryEntry


class TableRow(BaseModel):
    """A single item row of a segment table."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    item: str
    cest: str
    ncms: List[str] = Field(default_factory=list)
    description: str = ""
    lines_consumed: int = Field(alias="linesConsumed")

    def to_output(self) -> Dict[str, Any]:
        """Serializable form without the parser bookkeeping."""
        return self.model_dump(exclude={"lines_consumed"})


class ParsedSegment(BaseModel):
    """Rows parsed from one located segment."""

    segment: str
    span: SegmentSpan
    rows: List[TableRow] = Field(default_factory=list)


class ExtractionResult(BaseModel):
    """Everything one extraction run produces."""

    summary: List[SegmentSummaryEntry] = Field(default_factory=list)
    segments: List[ParsedSegment] = Field(default_factory=list)

    def to_output(self) -> List[List[Dict[str, Any]]]:
        return [[row.to_output() for row in segment.rows] for segment in self.segments]
