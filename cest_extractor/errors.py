"""Exceptions raised while reading the source document."""


class ExtractionError(Exception):
    """Base exception for extraction failures."""
    pass


class DocumentLoadError(ExtractionError):
    """The PDF could not be read or opened."""
    pass


class PageFetchError(ExtractionError):
    """A page could not be fetched from the document."""

    def __init__(self, page_number: int, reason: str):
        super().__init__(f"Unable to read page {page_number}: {reason}")
        self.page_number = page_number
