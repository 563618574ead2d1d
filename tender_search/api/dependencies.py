"""
FastAPI dependencies — TenderStore singleton, refresh debouncer, query parsing.
"""
from __future__ import annotations

from typing import Optional

from fastapi import HTTPException, Query

from tender_search.data.errors import InvalidSortField
from tender_search.data.schemas import QueryState, SortDirection, SortSpec
from tender_search.data.store import TenderStore
from tender_search.debounce import Debouncer

# ---------------------------------------------------------------------------
# Global singletons (set during startup)
# ---------------------------------------------------------------------------
_store: TenderStore | None = None
_refresher: Debouncer | None = None


def set_store(store: TenderStore | None, refresher: Debouncer | None = None) -> None:
    global _store, _refresher
    _store = store
    _refresher = refresher


def get_store() -> TenderStore:
    if _store is None:
        raise HTTPException(503, "Server not initialized yet")
    return _store


def get_refresher() -> Debouncer:
    if _refresher is None:
        raise HTTPException(503, "Server not initialized yet")
    return _refresher


# ---------------------------------------------------------------------------
# Query parsing from query params
# ---------------------------------------------------------------------------

def parse_query(
    search: str = Query("", description="Case-insensitive substring matched against every field"),
    sort: Optional[str] = Query(None, description="title|contractingEntityName|publicationDate"),
    direction: Optional[str] = Query(None, description="ascending|descending"),
) -> QueryState:
    """Parse search/sort query parameters into a QueryState."""
    if sort is None:
        if direction is not None:
            raise HTTPException(400, "direction requires sort")
        return QueryState(search=search)

    try:
        sd = SortDirection(direction or SortDirection.ASCENDING.value)
    except ValueError:
        raise HTTPException(400, f"Invalid direction: {direction}")

    try:
        spec = SortSpec(sort, sd)
    except InvalidSortField as exc:
        raise HTTPException(400, str(exc))

    return QueryState(search=search, sort=spec)
