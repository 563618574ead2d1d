"""Excel styling, formatting, and writing utilities."""
from .formatters import write_header_row, format_data_cell, auto_column_width, worksheet_text
from .writer import ExcelWriter, write_view_workbook
