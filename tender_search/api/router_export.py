"""
Download endpoints: the current View as CSV or as a styled workbook.
"""
from __future__ import annotations

import io

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from tender_search.config import EXPORT_CSV_FILENAME, EXPORT_XLSX_FILENAME
from tender_search.data.export import export_csv_bytes
from tender_search.data.schemas import QueryState
from tender_search.data.store import TenderStore
from tender_search.api.dependencies import get_store, parse_query
from tender_search.excel import write_view_workbook

router = APIRouter(prefix="/api", tags=["export"])

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _attachment(filename: str) -> dict:
    return {"Content-Disposition": f'attachment; filename="{filename}"'}


@router.get("/export.csv")
def export_view_csv(
    state: QueryState = Depends(parse_query),
    store: TenderStore = Depends(get_store),
):
    view = store.view(state)
    return Response(
        content=export_csv_bytes(view),
        media_type="text/csv; charset=utf-8",
        headers=_attachment(EXPORT_CSV_FILENAME),
    )


@router.get("/export.xlsx")
def export_view_xlsx(
    state: QueryState = Depends(parse_query),
    store: TenderStore = Depends(get_store),
):
    view = store.view(state)
    buf = io.BytesIO()
    write_view_workbook(view, buf, state, refreshed=store.refreshed_label())
    return Response(
        content=buf.getvalue(),
        media_type=XLSX_MEDIA_TYPE,
        headers=_attachment(EXPORT_XLSX_FILENAME),
    )
