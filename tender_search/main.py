"""
Tender Search — FastAPI app factory with startup feed fetch.
"""
from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tender_search.config import REFRESH_DEBOUNCE_SECONDS
from tender_search.data.store import TenderStore
from tender_search.debounce import Debouncer
from tender_search.api.dependencies import set_store
from tender_search.api.router_meta import router as meta_router
from tender_search.api.router_tenders import router as tenders_router
from tender_search.api.router_export import router as export_router


def create_app(store: TenderStore | None = None) -> FastAPI:
    """Build the API. Pass *store* to serve a pre-configured TenderStore."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Fetch the feed at startup; a failure leaves an empty Table and an error."""
        tender_store = store or TenderStore()
        print(f"  Feed: {tender_store.url}")
        if not tender_store.is_loaded:
            tender_store.refresh()

        refresher = Debouncer(tender_store.refresh, REFRESH_DEBOUNCE_SECONDS)
        set_store(tender_store, refresher)

        if tender_store.is_loaded:
            print(f"\nTender Search ready — {tender_store.row_count():,} tenders\n")
        else:
            print(f"\nTender Search started without data — {tender_store.last_error}\n")
        yield
        refresher.cancel()
        set_store(None)

    app = FastAPI(
        title="Tender Search API",
        description="Search, sort and export Government of Canada open tender notices",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    app.include_router(meta_router)
    app.include_router(tenders_router)
    app.include_router(export_router)
    return app


app = create_app()
