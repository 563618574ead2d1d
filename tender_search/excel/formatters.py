"""
Reusable Excel cell/row formatting helpers.
"""
from __future__ import annotations

from typing import Sequence

from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from tender_search.excel.styles import (
    HEADER_FONT, HEADER_FILL, HEADER_BORDER,
    DATA_FONT, LINK_FONT,
    THIN_BORDER, ALTERNATE_FILL,
    CENTER, LEFT, WRAP,
)


def worksheet_text(value: str) -> str:
    """Drop control characters that worksheets cannot hold."""
    return ILLEGAL_CHARACTERS_RE.sub("", value)


# ---------------------------------------------------------------------------
# Header row
# ---------------------------------------------------------------------------

def write_header_row(ws: Worksheet, row_num: int, labels: Sequence[str]) -> None:
    """Write *labels* across *row_num* with header styling."""
    for col_num, label in enumerate(labels, 1):
        cell = ws.cell(row=row_num, column=col_num, value=label)
        cell.font, cell.fill, cell.border = HEADER_FONT, HEADER_FILL, HEADER_BORDER
        cell.alignment = CENTER


# ---------------------------------------------------------------------------
# Data cell
# ---------------------------------------------------------------------------

def format_data_cell(
    ws: Worksheet,
    row_num: int,
    col_num: int,
    value: str,
    wrap: bool = False,
    link: str | None = None,
) -> None:
    """Write and format a single text cell, optionally as a hyperlink.

    Values are always stored as strings, so a title such as ``=1+1`` is
    shown as written rather than evaluated.
    """
    cell = ws.cell(row=row_num, column=col_num)
    cell.value = worksheet_text(value)
    cell.data_type = "s"
    cell.font = LINK_FONT if link else DATA_FONT
    cell.border = THIN_BORDER
    cell.alignment = WRAP if wrap else LEFT
    if link:
        cell.hyperlink = worksheet_text(link)
    if row_num % 2 == 0:
        cell.fill = ALTERNATE_FILL


# ---------------------------------------------------------------------------
# Auto column width
# ---------------------------------------------------------------------------

def auto_column_width(ws: Worksheet, min_row: int = 1, min_width: int = 10, max_width: int = 55) -> None:
    """Fit column widths to the longest line in each column (from *min_row* down)."""
    for column in ws.iter_cols(min_row=min_row):
        max_length = 0
        column_letter = get_column_letter(column[0].column)
        for cell in column:
            if cell.value:
                longest = max(len(line) for line in str(cell.value).splitlines() or [""])
                max_length = max(max_length, longest)
        adjusted = min(max(max_length + 2, min_width), max_width)
        ws.column_dimensions[column_letter].width = adjusted
