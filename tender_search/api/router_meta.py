"""
Meta endpoints: health, field list, refresh.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from tender_search.data.schemas import LOGICAL_FIELDS
from tender_search.data.store import TenderStore
from tender_search.debounce import Debouncer
from tender_search.api.dependencies import get_store, get_refresher
from tender_search.api.response_models import (
    HealthResponse, FieldInfo, FieldsResponse, RefreshResponse,
)

router = APIRouter(prefix="/api", tags=["meta"])


@router.get("/health", response_model=HealthResponse)
def health(store: TenderStore = Depends(get_store)):
    return HealthResponse(
        status="ok" if store.last_error is None else "degraded",
        rows=store.row_count(),
        loaded=store.is_loaded,
        last_refreshed=store.last_refreshed.isoformat() if store.last_refreshed else None,
        error=store.last_error,
    )


@router.get("/fields", response_model=FieldsResponse)
def list_fields():
    return FieldsResponse(fields=[
        FieldInfo(name=f.value, label=f.label, sortable=f.sortable) for f in LOGICAL_FIELDS
    ])


@router.post("/refresh", response_model=RefreshResponse)
def refresh(refresher: Debouncer = Depends(get_refresher)):
    """Re-fetch the feed in the background.

    Returns immediately; bursts of requests collapse into one fetch.
    """
    refresher.trigger()
    return RefreshResponse(
        status="refreshing",
        message="Refresh scheduled. Check /api/health for the new row count.",
    )
