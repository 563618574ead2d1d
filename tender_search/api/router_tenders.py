"""
Tender listing: search + sort over the current Table.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from tender_search.data.normalize import table_to_records
from tender_search.data.query import apply_query
from tender_search.data.schemas import QueryState
from tender_search.data.store import TenderStore
from tender_search.api.dependencies import get_store, parse_query
from tender_search.api.response_models import QueryEcho, TendersResponse
from tender_search.presenters import attachment_links, email_link

router = APIRouter(prefix="/api", tags=["tenders"])


def _row_payload(record: dict) -> dict:
    row = dict(record)
    row["attachment_links"] = attachment_links(record.get("attachment", ""))
    row["email_link"] = email_link(record.get("contactInfoEmail", ""))
    return row


@router.get("/tenders", response_model=TendersResponse)
def list_tenders(
    state: QueryState = Depends(parse_query),
    limit: int = Query(100, ge=1, le=5000),
    offset: int = Query(0, ge=0),
    store: TenderStore = Depends(get_store),
):
    table = store.table  # one snapshot: a refresh may swap it mid-request
    view = apply_query(table, state)
    page = view.iloc[offset:offset + limit]
    return TendersResponse(
        total=len(table),
        matched=len(view),
        offset=offset,
        count=len(page),
        query=QueryEcho(
            search=state.search,
            sort=state.sort.field.value if state.sort else None,
            direction=state.sort.direction.value if state.sort else None,
            label=state.label,
        ),
        rows=[_row_payload(r) for r in table_to_records(page)],
        last_refreshed=store.last_refreshed.isoformat() if store.last_refreshed else None,
        error=store.last_error,
    )
