"""Feed loading, header normalization, and in-memory query engine."""
from .errors import TenderSearchError, FetchError, ParseError, InvalidSortField
from .schemas import LogicalField, LOGICAL_FIELDS, SortDirection, SortSpec, QueryState
from .normalize import normalize_header, resolve_headers, project_row, project_table, table_to_records
from .loader import fetch_csv_text, parse_csv_text, load_table, load_table_file
from .query import sort_table, filter_table, apply_query
from .export import export_csv
from .store import TenderStore
