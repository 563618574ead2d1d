"""
Field enumeration and caller-owned query state.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from tender_search.config import FIELD_LABELS, SORTABLE_FIELDS
from tender_search.data.errors import InvalidSortField


class LogicalField(str, Enum):
    """The 13 canonical tender columns. Member order is the column order."""
    TITLE = "title"
    ATTACHMENT = "attachment"
    CONTRACTING_ENTITY_NAME = "contractingEntityName"
    PUBLICATION_DATE = "publicationDate"
    TENDER_CLOSING_DATE = "tenderClosingDate"
    EXPECTED_CONTRACT_START_DATE = "expectedContractStartDate"
    CONTACT_INFO_NAME = "contactInfoName"
    CONTACT_INFO_EMAIL = "contactInfoEmail"
    CONTACT_INFO_PHONE = "contactInfoPhone"
    REFERENCE_NUMBER = "referenceNumber"
    SOLICITATION_NUMBER = "solicitationNumber"
    UNSPSC = "unspsc"
    UNSPSC_DESCRIPTION = "unspscDescription"

    @property
    def label(self) -> str:
        return FIELD_LABELS[self.value]

    @property
    def sortable(self) -> bool:
        return self.value in SORTABLE_FIELDS


LOGICAL_FIELDS: list[LogicalField] = list(LogicalField)


class SortDirection(str, Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"

    @property
    def arrow(self) -> str:
        return "▲" if self is SortDirection.ASCENDING else "▼"


def sortable_field(name: str | LogicalField) -> LogicalField:
    """Resolve *name* to a sortable LogicalField or raise InvalidSortField."""
    try:
        field = LogicalField(name)
    except ValueError:
        raise InvalidSortField(str(name)) from None
    if not field.sortable:
        raise InvalidSortField(field.value)
    return field


@dataclass(frozen=True)
class SortSpec:
    """Sort column + direction. Only sortable fields are accepted."""
    field: LogicalField
    direction: SortDirection = SortDirection.ASCENDING

    def __post_init__(self) -> None:
        object.__setattr__(self, "field", sortable_field(self.field))
        object.__setattr__(self, "direction", SortDirection(self.direction))

    @property
    def ascending(self) -> bool:
        return self.direction is SortDirection.ASCENDING

    @property
    def label(self) -> str:
        return f"{self.field.label} {self.direction.arrow}"


@dataclass(frozen=True)
class QueryState:
    """Search text + optional sort. Immutable; every change returns a new state."""
    search: str = ""
    sort: Optional[SortSpec] = None

    def with_search(self, text: str) -> "QueryState":
        return replace(self, search=text or "")

    def clear_search(self) -> "QueryState":
        return replace(self, search="")

    def toggle_sort(self, field: str | LogicalField) -> "QueryState":
        """Click-a-column semantics.

        Same field while ascending flips to descending; anything else
        (a new field, or the same field while descending) sorts ascending.
        Raises InvalidSortField without producing a new state when the
        field cannot be sorted.
        """
        field = sortable_field(field)
        direction = SortDirection.ASCENDING
        if (
            self.sort is not None
            and self.sort.field is field
            and self.sort.direction is SortDirection.ASCENDING
        ):
            direction = SortDirection.DESCENDING
        return replace(self, sort=SortSpec(field, direction))

    @property
    def label(self) -> str:
        """Human-readable description of the query."""
        parts = []
        if self.search.strip():
            parts.append(f'search "{self.search.strip()}"')
        if self.sort is not None:
            parts.append(f"sorted by {self.sort.label}")
        return ", ".join(parts) if parts else "All tenders"
