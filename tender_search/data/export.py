"""
CSV export of a View.

The dialect is deliberately minimal and must stay byte-compatible with
earlier exports: the label line is bare, every data value is quoted with
``"`` doubled, and nothing else is escaped.
"""
from __future__ import annotations

from typing import Iterable, Mapping, Union

import pandas as pd

from tender_search.data.schemas import LOGICAL_FIELDS


def header_line() -> str:
    return ",".join(field.label for field in LOGICAL_FIELDS)


def _quote(value) -> str:
    text = "" if value is None else str(value)
    return '"' + text.replace('"', '""') + '"'


def record_line(record: Mapping[str, object]) -> str:
    return ",".join(_quote(record.get(field.value) or "") for field in LOGICAL_FIELDS)


def export_csv(view: Union[pd.DataFrame, Iterable[Mapping[str, object]]]) -> str:
    """Serialise records to CSV text, lines joined by ``\\n``, no trailing newline."""
    if isinstance(view, pd.DataFrame):
        records = view.to_dict("records")
    else:
        records = view
    lines = [header_line()]
    lines.extend(record_line(rec) for rec in records)
    return "\n".join(lines)


def export_csv_bytes(view) -> bytes:
    """UTF-8 bytes of export_csv, ready for a download response."""
    return export_csv(view).encode("utf-8")
