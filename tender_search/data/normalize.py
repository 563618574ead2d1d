"""
Header resolution and row projection: raw feed columns → the 13 logical fields.
"""
from __future__ import annotations

from typing import Iterable, Mapping, Optional

import pandas as pd

from tender_search.config import HEADER_SUFFIX_DELIMITERS
from tender_search.data.schemas import LogicalField, LOGICAL_FIELDS

HeaderMapping = dict[LogicalField, Optional[str]]
Record = dict[str, str]


# ---------------------------------------------------------------------------
# Header resolution
# ---------------------------------------------------------------------------

def normalize_header(raw: str) -> str:
    """Strip language/version suffixes: ``"title-en"`` and ``"title.1"`` → ``"title"``."""
    key = str(raw)
    for delim in HEADER_SUFFIX_DELIMITERS:
        key = key.split(delim, 1)[0]
    return key.strip()


def resolve_headers(headers: Iterable[str]) -> HeaderMapping:
    """Map each logical field to the first raw header that normalizes to it.

    Later headers with the same normalized form are ignored. Matching is
    exact on the normalized form (no case folding).
    """
    first_seen: dict[str, str] = {}
    for raw in headers:
        first_seen.setdefault(normalize_header(raw), raw)
    return {field: first_seen.get(field.value) for field in LOGICAL_FIELDS}


# ---------------------------------------------------------------------------
# Row projection
# ---------------------------------------------------------------------------

def _clean(value) -> str:
    if value is None:
        return ""
    if not isinstance(value, str) and pd.isna(value):
        return ""
    return str(value)


def project_row(row: Mapping[str, object], mapping: HeaderMapping) -> Record:
    """Build one Record: every logical field present, missing values as ``""``."""
    record: Record = {}
    for field in LOGICAL_FIELDS:
        raw = mapping.get(field)
        record[field.value] = _clean(row.get(raw)) if raw is not None else ""
    return record


def empty_table() -> pd.DataFrame:
    """A Table with the canonical columns and no rows."""
    return pd.DataFrame({field.value: pd.Series([], dtype=object) for field in LOGICAL_FIELDS})


def project_table(raw: pd.DataFrame, mapping: HeaderMapping) -> pd.DataFrame:
    """Vectorised project_row over a whole raw frame."""
    index = pd.RangeIndex(len(raw))
    columns = {}
    for field in LOGICAL_FIELDS:
        source = mapping.get(field)
        if source is not None and source in raw.columns:
            col = raw[source]
            if isinstance(col, pd.DataFrame):
                # duplicate labels in the raw frame: keep the first
                col = col.iloc[:, 0]
            columns[field.value] = pd.Series(
                [_clean(v) for v in col.tolist()], index=index, dtype=object
            )
        else:
            columns[field.value] = pd.Series([""] * len(raw), index=index, dtype=object)
    return pd.DataFrame(columns, index=index)


def table_to_records(table: pd.DataFrame) -> list[Record]:
    """Materialise a Table/View as a list of plain dicts in row order."""
    return table[[f.value for f in LOGICAL_FIELDS]].to_dict("records")
