"""
TenderStore — holds the current Table and the refresh bookkeeping around it.

Fetched once at startup, refreshed on demand, queried on every request.
Only the newest refresh may install its Table: a slower fetch that finishes
after a newer one has started is discarded.
"""
from __future__ import annotations

import datetime as dt
import logging
import threading
from pathlib import Path
from typing import Callable, Optional

import pandas as pd

from tender_search.config import FEED_URL, FETCH_TIMEOUT
from tender_search.data.errors import FetchError, ParseError
from tender_search.data.loader import fetch_table, load_table_file
from tender_search.data.normalize import empty_table
from tender_search.data.query import apply_query
from tender_search.data.schemas import QueryState

logger = logging.getLogger(__name__)

TableSource = Callable[[], pd.DataFrame]


class TenderStore:
    """In-memory tender Table with generation-checked refreshes."""

    def __init__(
        self,
        url: str = FEED_URL,
        timeout: float = FETCH_TIMEOUT,
        source: Optional[TableSource] = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self._source = source or (lambda: fetch_table(self.url, self.timeout))
        self._table: pd.DataFrame = empty_table()
        self.last_refreshed: Optional[dt.datetime] = None
        self.last_error: Optional[str] = None
        self._generation = 0
        self._installed_generation = 0
        self._lock = threading.Lock()

    @classmethod
    def from_file(cls, filepath: Path) -> "TenderStore":
        """A store whose refreshes re-read a local CSV file."""
        return cls(url=str(filepath), source=lambda: load_table_file(Path(filepath)))

    # ------------------------------------------------------------------
    # Refresh lifecycle
    # ------------------------------------------------------------------

    def begin_refresh(self) -> int:
        """Start a refresh and return its generation number."""
        with self._lock:
            self._generation += 1
            return self._generation

    def install(self, generation: int, table: pd.DataFrame) -> bool:
        """Install *table* unless a newer refresh has started since *generation*."""
        with self._lock:
            if generation != self._generation:
                logger.info(
                    "Discarding stale refresh #%d (latest is #%d)", generation, self._generation
                )
                return False
            self._table = table
            self._installed_generation = generation
            self.last_refreshed = dt.datetime.now()
            self.last_error = None
            return True

    def fail(self, generation: int, error: Exception) -> bool:
        """Record a failed refresh. The current Table is left untouched."""
        with self._lock:
            if generation != self._generation:
                return False
            self.last_error = f"Could not fetch CSV: {error}"
            return True

    def refresh(self) -> bool:
        """Fetch, parse and install a new Table. Returns True when installed."""
        generation = self.begin_refresh()
        print(f"Refreshing tenders from {self.url} ...")
        try:
            table = self._source()
        except (FetchError, ParseError) as exc:
            self.fail(generation, exc)
            print(f"  {self.last_error or exc}")
            return False
        except Exception as exc:
            logger.exception("Refresh #%d failed unexpectedly", generation)
            self.fail(generation, exc)
            return False

        installed = self.install(generation, table)
        if installed:
            print(f"  Loaded {len(table):,} tenders")
        return installed

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def table(self) -> pd.DataFrame:
        return self._table

    @property
    def is_loaded(self) -> bool:
        return self._installed_generation > 0

    @property
    def generation(self) -> int:
        return self._generation

    def row_count(self) -> int:
        return len(self._table)

    def view(self, state: QueryState | None = None) -> pd.DataFrame:
        """Sorted + filtered rows for *state*."""
        return apply_query(self._table, state)

    def refreshed_label(self) -> str:
        if self.last_refreshed is None:
            return "never"
        return f"{self.last_refreshed:%Y-%m-%d %H:%M:%S}"
