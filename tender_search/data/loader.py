"""
Feed retrieval and CSV parsing: URL or file → raw frame → Table.
"""
from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Optional

import httpx
import pandas as pd

from tender_search.config import FEED_URL, FETCH_TIMEOUT
from tender_search.data.errors import FetchError, ParseError
from tender_search.data.normalize import resolve_headers, project_table

logger = logging.getLogger(__name__)

_BOM = "\ufeff"

_REQUEST_HEADERS = {
    "User-Agent": "tender-search/1.0 (+https://canadabuys.canada.ca/en)",
    "Accept": "text/csv,text/plain;q=0.9,*/*;q=0.5",
}


# ---------------------------------------------------------------------------
# Fetch
# ---------------------------------------------------------------------------

def fetch_csv_text(
    url: str = FEED_URL,
    timeout: float = FETCH_TIMEOUT,
    client: Optional[httpx.Client] = None,
) -> str:
    """GET the feed and return its body as text.

    Raises FetchError on transport failure or any non-2xx status.
    """
    own_client = client is None
    if own_client:
        client = httpx.Client(timeout=timeout, follow_redirects=True, headers=_REQUEST_HEADERS)
    try:
        logger.info("Fetching tender feed: %s", url)
        response = client.get(url)
    except httpx.HTTPError as exc:
        raise FetchError(str(exc) or exc.__class__.__name__) from exc
    finally:
        if own_client:
            client.close()

    if not response.is_success:
        raise FetchError(f"HTTP error! status: {response.status_code}")

    # Feed is published as UTF-8, usually with a BOM
    text = response.content.decode("utf-8-sig", errors="replace")
    logger.info("Fetched %s bytes from %s", f"{len(response.content):,}", url)
    return text


# ---------------------------------------------------------------------------
# Parse
# ---------------------------------------------------------------------------

def _read_frame(text: str, **kwargs) -> pd.DataFrame:
    return pd.read_csv(
        io.StringIO(text),
        dtype=str,
        na_filter=False,
        skip_blank_lines=True,
        index_col=False,
        **kwargs,
    )


def parse_csv_text(text: str) -> pd.DataFrame:
    """Parse CSV text with a header row into a raw frame of strings.

    Every value is kept as text; empty cells stay ``""``. Rows with more
    cells than the header keep their leading cells and drop the rest.
    Raises ParseError when no header row can be read.
    """
    if text.startswith(_BOM):
        text = text[len(_BOM):]
    if not text.strip():
        raise ParseError("No header row found in CSV text")
    try:
        try:
            return _read_frame(text)
        except pd.errors.ParserError as exc:
            # With usecols set, the tokenizer accepts rows wider than the header
            width = len(_read_frame(text, nrows=0).columns)
            raw = _read_frame(text, usecols=list(range(width)))
            logger.warning("Dropped cells beyond the %d header columns (%s)", width, exc)
            return raw
    except (pd.errors.ParserError, pd.errors.EmptyDataError) as exc:
        raise ParseError(str(exc)) from exc


def load_table(text: str) -> pd.DataFrame:
    """Full pipeline for one fetch: parse, resolve headers, project rows."""
    raw = parse_csv_text(text)
    mapping = resolve_headers(raw.columns)
    missing = [field.value for field, source in mapping.items() if source is None]
    if missing:
        logger.warning("Feed has no column for: %s", ", ".join(missing))
    return project_table(raw, mapping)


def load_table_file(filepath: Path) -> pd.DataFrame:
    """Load a Table from a local CSV file (UTF-8, BOM optional)."""
    try:
        text = Path(filepath).read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as exc:
        raise ParseError(f"{filepath}: not valid UTF-8 ({exc})") from exc
    except OSError as exc:
        raise FetchError(f"{filepath}: {exc.strerror or exc}") from exc
    return load_table(text)


def fetch_table(
    url: str = FEED_URL,
    timeout: float = FETCH_TIMEOUT,
    client: Optional[httpx.Client] = None,
) -> pd.DataFrame:
    """Fetch the feed and return its Table."""
    return load_table(fetch_csv_text(url, timeout, client))
