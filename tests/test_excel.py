"""Tests for the workbook export."""

import io

from openpyxl import load_workbook

from tender_search.data.schemas import LOGICAL_FIELDS, QueryState
from tender_search.excel import write_view_workbook


def _sheet(buf):
    buf.seek(0)
    return load_workbook(buf)["Tenders"]


def test_workbook_layout(feed_table):
    buf = io.BytesIO()
    write_view_workbook(feed_table, buf, QueryState(search="snow"), refreshed="2024-01-05 10:00:00")
    ws = _sheet(buf)

    assert ws["A1"].value == "Open Tender Notices"
    assert "3 tenders" in ws["A2"].value
    assert 'search "snow"' in ws["A2"].value
    assert "2024-01-05 10:00:00" in ws["A2"].value

    header = [ws.cell(row=4, column=i).value for i in range(1, 14)]
    assert header == [f.label for f in LOGICAL_FIELDS]
    assert ws.freeze_panes == "A5"


def test_workbook_rows_and_links(feed_table):
    buf = io.BytesIO()
    write_view_workbook(feed_table, buf)
    ws = _sheet(buf)

    assert [ws.cell(row=r, column=1).value for r in (5, 6, 7)] == [
        "Snow Removal", "Bridge Inspection", "Accounting Software",
    ]
    attachment = ws.cell(row=5, column=2)
    assert attachment.value == "https://a.example/1.pdf, notes.txt"
    assert attachment.hyperlink.target == "https://a.example/1.pdf"
    assert ws.cell(row=5, column=8).hyperlink.target == "mailto:ann@example.gc.ca"
    # no attachment, no link
    assert ws.cell(row=6, column=2).hyperlink is None


def test_workbook_to_path(tmp_path, table_factory):
    out = write_view_workbook(table_factory([]), tmp_path / "out" / "tenders.xlsx")
    assert out.exists()
    ws = load_workbook(out)["Tenders"]
    assert ws.cell(row=4, column=1).value == "Title"
    assert ws.cell(row=5, column=1).value is None


def test_workbook_strips_control_characters(table_factory):
    """Characters worksheets cannot hold are dropped instead of failing the export."""
    buf = io.BytesIO()
    table = table_factory([{"title": "Snow\x0bRemoval", "contractingEntityName": "Public\x01Works"}])
    write_view_workbook(table, buf, QueryState(search="snow\x0b"))
    ws = _sheet(buf)

    assert ws.cell(row=5, column=1).value == "SnowRemoval"
    assert ws.cell(row=5, column=3).value == "PublicWorks"


def test_workbook_keeps_formula_like_text(table_factory):
    """A value starting with '=' is stored as text, not evaluated."""
    buf = io.BytesIO()
    write_view_workbook(table_factory([{"title": "=1+1", "referenceNumber": '=HYPERLINK("x")'}]), buf)
    ws = _sheet(buf)

    title = ws.cell(row=5, column=1)
    assert title.data_type == "s"
    assert title.value == "=1+1"
    assert ws.cell(row=5, column=10).data_type == "s"
