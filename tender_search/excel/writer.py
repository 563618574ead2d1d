"""
ExcelWriter — builder for the styled tender workbook, plus the one-call
write_view_workbook() used by the API and CLI exports.
"""
from __future__ import annotations

import datetime as dt
from pathlib import Path
from typing import BinaryIO, Union

import pandas as pd
from openpyxl import Workbook
from openpyxl.worksheet.worksheet import Worksheet

from tender_search.data.normalize import table_to_records
from tender_search.data.schemas import LogicalField, LOGICAL_FIELDS, QueryState
from tender_search.excel.styles import TITLE_FONT, SUBTITLE_FONT
from tender_search.excel.formatters import write_header_row, format_data_cell, auto_column_width, worksheet_text
from tender_search.presenters import attachment_links, email_link

_WRAPPED_FIELDS = {LogicalField.TITLE, LogicalField.ATTACHMENT, LogicalField.UNSPSC_DESCRIPTION}


class ExcelWriter:
    """Builds the tender workbook one block at a time."""

    def __init__(self) -> None:
        self.wb = Workbook()
        self._fresh = True

    def add_sheet(self, title: str) -> Worksheet:
        """Rename the blank default sheet on first use, append after that."""
        if not self._fresh:
            return self.wb.create_sheet(title=title)
        self._fresh = False
        self.wb.active.title = title
        return self.wb.active

    def write_title(self, ws: Worksheet, title: str, subtitle: str, width: int = len(LOGICAL_FIELDS)) -> int:
        """Banner rows merged across *width* columns; returns the first free row after a spacer."""
        banner = [(title, TITLE_FONT), (worksheet_text(subtitle), SUBTITLE_FONT)]
        for row, (text, font) in enumerate(banner, 1):
            ws.cell(row=row, column=1, value=text).font = font
            ws.merge_cells(start_row=row, start_column=1, end_row=row, end_column=width)
        return len(banner) + 2

    def write_records(self, ws: Worksheet, start_row: int, records: list[dict]) -> int:
        """Label header + one row per record, canonical column order.

        The first attachment URL, when present, becomes the cell hyperlink.
        Returns the row after the last record.
        """
        write_header_row(ws, start_row, [field.label for field in LOGICAL_FIELDS])

        row = start_row + 1
        for record in records:
            for col_num, field in enumerate(LOGICAL_FIELDS, 1):
                value = record.get(field.value, "")
                link = None
                if field is LogicalField.ATTACHMENT:
                    links = attachment_links(value)
                    link = links[0] if links else None
                elif field is LogicalField.CONTACT_INFO_EMAIL:
                    link = email_link(value)
                format_data_cell(ws, row, col_num, value, wrap=field in _WRAPPED_FIELDS, link=link)
            row += 1

        auto_column_width(ws, min_row=start_row)
        ws.freeze_panes = f"A{start_row + 1}"
        return row

    def save(self, target: Union[str, Path, BinaryIO]) -> Union[Path, BinaryIO]:
        """Save the workbook to a path or a binary buffer."""
        if isinstance(target, (str, Path)):
            target = Path(target)
            target.parent.mkdir(parents=True, exist_ok=True)
        self.wb.save(target)
        return target


def write_view_workbook(
    view: pd.DataFrame,
    target: Union[str, Path, BinaryIO],
    state: QueryState | None = None,
    refreshed: str = "",
) -> Union[Path, BinaryIO]:
    """Write a View as a one-sheet workbook."""
    state = state or QueryState()
    writer = ExcelWriter()
    ws = writer.add_sheet("Tenders")
    subtitle = f"{len(view):,} tenders  |  {state.label}"
    if refreshed:
        subtitle += f"  |  Last refreshed: {refreshed}"
    subtitle += f"  |  Exported {dt.datetime.now():%Y-%m-%d %H:%M}"
    start = writer.write_title(ws, "Open Tender Notices", subtitle)
    writer.write_records(ws, start, table_to_records(view))
    return writer.save(target)
