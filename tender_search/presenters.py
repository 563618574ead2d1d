"""
Display helpers shared by the API and the workbook export.

Records keep every value as an opaque string; anything derived for display
(links, truncation) is computed here at render time.
"""
from __future__ import annotations

from tender_search.config import ATTACHMENT_URL_PREFIX


def attachment_links(value: str) -> list[str]:
    """URLs in a comma-separated attachment value; non-URL tokens are dropped."""
    if not value:
        return []
    tokens = (t.strip() for t in value.split(","))
    return [t for t in tokens if t.startswith(ATTACHMENT_URL_PREFIX)]


def email_link(value: str) -> str | None:
    return f"mailto:{value}" if value and "@" in value else None


def truncate(value: str, width: int) -> str:
    """Single-line, width-limited text for terminal tables."""
    text = " ".join((value or "").split())
    if len(text) <= width:
        return text
    return text[: max(width - 1, 0)] + "…"
