"""Segment-level models: table of contents entries and body spans."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SegmentSummaryEntry(BaseModel):
    """One entry of the table of contents on the first page."""

    model_config = ConfigDict(frozen=True)

    index: str
    description: str


class SegmentOccurrence(BaseModel):
    """A body line whose text equals a segment description."""

    model_config = ConfigDict(frozen=True)

    segment: str
    position: int


class SegmentSpan(BaseModel):
    """Half-open line range ``[start, end)`` holding a segment's table."""

    model_config = ConfigDict(frozen=True)

    segment: str
    start: int = Field(ge=0)
    end: int

    def select_lines(self, lines: list[str]) -> list[str]:
        return lines[self.start:self.end]
