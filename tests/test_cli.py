"""CLI tests using a local feed file."""

import pytest

from tender_search.cli import main
from tender_search.data.export import header_line


@pytest.fixture
def feed_file(tmp_path, feed_text):
    path = tmp_path / "feed.csv"
    path.write_text(feed_text, encoding="utf-8")
    return path


def test_search_prints_matches(feed_file, capsys):
    main(["search", "--file", str(feed_file), "--search", "public works", "--sort", "title"])
    out = capsys.readouterr().out
    assert "2 of 3 tenders match" in out
    assert out.index("Accounting Software") < out.index("Snow Removal")
    assert "Bridge Inspection" not in out


def test_search_repeated_sort_flips_direction(feed_file, capsys):
    main(["search", "--file", str(feed_file), "--sort", "title", "--sort", "title"])
    out = capsys.readouterr().out
    assert "Title ▼" in out
    assert out.index("Snow Removal") < out.index("Accounting Software")


def test_search_limit(feed_file, capsys):
    main(["search", "--file", str(feed_file), "--limit", "1"])
    out = capsys.readouterr().out
    assert "2 more" in out


def test_export_csv(feed_file, tmp_path):
    out = tmp_path / "results.csv"
    main(["export", "--file", str(feed_file), "--search", "bridge", "--output", str(out)])
    lines = out.read_text(encoding="utf-8").split("\n")
    assert lines[0] == header_line()
    assert len(lines) == 2
    assert lines[1].startswith('"Bridge Inspection",')


def test_export_xlsx(feed_file, tmp_path):
    out = tmp_path / "results.xlsx"
    main(["export", "--file", str(feed_file), "--xlsx", "--output", str(out)])
    assert out.read_bytes()[:2] == b"PK"


def test_unsortable_field_exits_2(feed_file, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["search", "--file", str(feed_file), "--sort", "unspsc"])
    assert exc.value.code == 2
    assert "not sortable" in capsys.readouterr().err


def test_missing_file_exits_1(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["search", "--file", str(tmp_path / "missing.csv")])
    assert exc.value.code == 1
    assert "Could not fetch CSV" in capsys.readouterr().err


def test_fields(capsys):
    main(["fields"])
    out = capsys.readouterr().out
    assert "contractingEntityName" in out
    assert "Contracting Entity" in out
