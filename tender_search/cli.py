#!/usr/bin/env python3
"""
Tender Search CLI — search, sort and export the open tender feed, or run the API.

USAGE:
  python -m tender_search.cli search --search "snow"                 # Keyword search
  python -m tender_search.cli search --sort publicationDate           # Oldest first
  python -m tender_search.cli search --sort title --sort title        # Second --sort flips to descending
  python -m tender_search.cli search --file tenders.csv --limit 50    # Local copy of the feed

  python -m tender_search.cli export --search "IT services"           # filtered_results.csv
  python -m tender_search.cli export --xlsx --output tenders.xlsx     # Styled workbook

  python -m tender_search.cli fields                                  # Field names + labels
  python -m tender_search.cli serve --port 8000                       # Start API server
"""
from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from tender_search.config import FEED_URL, FETCH_TIMEOUT, EXPORT_CSV_FILENAME, EXPORT_XLSX_FILENAME
from tender_search.data.errors import FetchError, ParseError, InvalidSortField
from tender_search.data.export import export_csv
from tender_search.data.loader import fetch_table, load_table_file
from tender_search.data.normalize import table_to_records
from tender_search.data.query import apply_query
from tender_search.data.schemas import LOGICAL_FIELDS, QueryState
from tender_search.presenters import truncate

EXIT_FETCH_FAILED = 1
EXIT_BAD_QUERY = 2


def _build_state(args) -> QueryState:
    """Fold --search and each --sort (click semantics) into a QueryState."""
    state = QueryState(search=getattr(args, "search", "") or "")
    for name in getattr(args, "sort", None) or []:
        state = state.toggle_sort(name)
    return state


def _load(args):
    """Table from --file, or fetched from --url / the configured feed."""
    if getattr(args, "file", None):
        return load_table_file(Path(args.file))
    return fetch_table(args.url or FEED_URL, args.timeout)


def _prepare(args):
    """(state, table) or exit with the matching status after printing why."""
    try:
        state = _build_state(args)
    except InvalidSortField as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(EXIT_BAD_QUERY)
    try:
        table = _load(args)
    except (FetchError, ParseError) as exc:
        print(f"Error: Could not fetch CSV: {exc}", file=sys.stderr)
        sys.exit(EXIT_FETCH_FAILED)
    return state, table


def cmd_search(args):
    """Print the matching tenders as a plain-text table."""
    state, table = _prepare(args)
    view = apply_query(table, state)

    print("\n" + "=" * 100)
    print(f"  OPEN TENDERS — {state.label}")
    print(f"  {len(view):,} of {len(table):,} tenders match")
    print("=" * 100)

    rows = table_to_records(view.head(args.limit)) if args.limit else table_to_records(view)
    print(f"\n{'Published':<12}{'Closing':<12}{'Contracting Entity':<32}Title")
    print("-" * 100)
    for rec in rows:
        print(
            f"{truncate(rec['publicationDate'], 10):<12}"
            f"{truncate(rec['tenderClosingDate'], 10):<12}"
            f"{truncate(rec['contractingEntityName'], 30):<32}"
            f"{truncate(rec['title'], 44)}"
        )
    if args.limit and len(view) > args.limit:
        print(f"\n  ... {len(view) - args.limit:,} more (raise --limit or use export)")
    print()


def cmd_export(args):
    """Write the matching tenders to CSV (or .xlsx with --xlsx)."""
    state, table = _prepare(args)
    view = apply_query(table, state)

    default_name = EXPORT_XLSX_FILENAME if args.xlsx else EXPORT_CSV_FILENAME
    out = Path(args.output or default_name)
    out.parent.mkdir(parents=True, exist_ok=True)

    if args.xlsx:
        from tender_search.excel import write_view_workbook
        write_view_workbook(view, out, state)
    else:
        out.write_text(export_csv(view), encoding="utf-8")

    print(f"  Exported {len(view):,} tenders ({state.label}) to {out}")


def cmd_fields(args):
    """List logical fields in canonical order."""
    print(f"\n{'Field':<28}{'Label':<22}Sortable")
    print("-" * 58)
    for field in LOGICAL_FIELDS:
        print(f"{field.value:<28}{field.label:<22}{'yes' if field.sortable else ''}")
    print()


def cmd_serve(args):
    """Start the API server."""
    import uvicorn
    print(f"\nStarting Tender Search API on port {args.port}...")
    uvicorn.run("tender_search.main:app", host="0.0.0.0", port=args.port, reload=args.reload,
                timeout_keep_alive=65)


def _add_source_args(p: argparse.ArgumentParser) -> None:
    src = p.add_mutually_exclusive_group()
    src.add_argument("--file", help="Read a local CSV instead of fetching the feed")
    src.add_argument("--url", help=f"Feed URL (default: {FEED_URL})")
    p.add_argument("--timeout", type=float, default=FETCH_TIMEOUT, help="Fetch timeout in seconds")
    p.add_argument("--search", default="", help="Case-insensitive keyword matched against every field")
    p.add_argument("--sort", action="append", metavar="FIELD",
                   help="title | contractingEntityName | publicationDate (repeat to flip direction)")


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(
        description="Tender Search — Government of Canada open tender notices",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command")

    # search subcommand
    search_parser = subparsers.add_parser("search", help="Search and sort tenders")
    _add_source_args(search_parser)
    search_parser.add_argument("--limit", type=int, default=25, help="Rows to print (0 = all)")
    search_parser.set_defaults(func=cmd_search)

    # export subcommand
    export_parser = subparsers.add_parser("export", help="Export matching tenders")
    _add_source_args(export_parser)
    export_parser.add_argument("--output", help="Output path")
    export_parser.add_argument("--xlsx", action="store_true", help="Write a styled Excel workbook")
    export_parser.set_defaults(func=cmd_export)

    # fields subcommand
    fields_parser = subparsers.add_parser("fields", help="List logical fields")
    fields_parser.set_defaults(func=cmd_fields)

    # serve subcommand
    serve_parser = subparsers.add_parser("serve", help="Start API server")
    serve_parser.add_argument("--port", type=int, default=int(os.environ.get("PORT", "8000")), help="Port (default 8000)")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    serve_parser.set_defaults(func=cmd_serve)

    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return

    args.func(args)


if __name__ == "__main__":
    main()
