"""
Query engine — sort then filter a Table into the View.

Pure functions over pandas frames; the input Table is never modified.
"""
from __future__ import annotations

from typing import Optional

import numpy as np
import pandas as pd

from tender_search.data.schemas import LOGICAL_FIELDS, QueryState, SortSpec


def normalize_search(text: Optional[str]) -> str:
    """Trimmed, lower-cased search term. ``str.lower`` is Unicode-aware."""
    return (text or "").strip().lower()


def sort_table(table: pd.DataFrame, sort: Optional[SortSpec]) -> pd.DataFrame:
    """Stable sort by one field's string value.

    Ties keep their Table order in both directions; ``""`` sorts before any
    non-empty value when ascending.
    """
    if sort is None:
        return table.copy()
    return table.sort_values(
        by=sort.field.value,
        ascending=sort.ascending,
        kind="stable",
    )


def filter_table(table: pd.DataFrame, search: Optional[str]) -> pd.DataFrame:
    """Keep rows where any field contains the search term (case-insensitive)."""
    term = normalize_search(search)
    if not term or table.empty:
        return table.copy()

    mask = np.zeros(len(table), dtype=bool)
    for field in LOGICAL_FIELDS:
        col = table[field.value].astype(str).str.lower()
        mask |= col.str.contains(term, regex=False).to_numpy(dtype=bool)
    return table[mask]


def apply_query(table: pd.DataFrame, state: QueryState | None = None) -> pd.DataFrame:
    """Produce the View: sort first, then filter, preserving sort order."""
    state = state or QueryState()
    return filter_table(sort_table(table, state.sort), state.search)
