"""Tests for display helpers."""

import pytest

from tender_search.presenters import attachment_links, email_link, truncate


@pytest.mark.parametrize(
    "value, expected",
    [
        ("", []),
        ("https://a.example/1.pdf", ["https://a.example/1.pdf"]),
        ("https://a.example/1.pdf, notes.txt ,http://b.example/2", ["https://a.example/1.pdf", "http://b.example/2"]),
        ("ftp://x, file.doc", []),
    ],
)
def test_attachment_links(value, expected):
    assert attachment_links(value) == expected


def test_email_link():
    assert email_link("ann@example.gc.ca") == "mailto:ann@example.gc.ca"
    assert email_link("n/a") is None
    assert email_link("") is None


def test_truncate():
    assert truncate("short", 10) == "short"
    assert truncate("multi\nline  text", 20) == "multi line text"
    assert truncate("abcdefghij", 5) == "abcd…"
