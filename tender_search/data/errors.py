"""
Error taxonomy for the fetch → parse → query pipeline.
"""
from __future__ import annotations


class TenderSearchError(Exception):
    """Base class for every error the pipeline raises."""


class FetchError(TenderSearchError):
    """The feed could not be retrieved (transport failure or non-2xx status)."""


class ParseError(TenderSearchError):
    """The feed text could not be parsed into a header row plus data rows."""


class InvalidSortField(TenderSearchError):
    """Sort was requested on a field outside the sortable subset."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Field is not sortable: {field}")
