"""cleantable ingestion -- delimiter inference, CSV and XLSX reading, file loading."""

from .csv_loader import looks_like_csv, read_csv_table
from .loader import DEFAULT_MAX_FILE_BYTES, load_file
from .table_parser import (
    infer_table,
    normalize_cell,
    parse_rows,
    score_candidates,
    score_table,
    split_line,
    split_lines,
)
from .xlsx_reader import read_xlsx_table

__all__ = [
    "infer_table",
    "normalize_cell",
    "parse_rows",
    "score_candidates",
    "score_table",
    "split_line",
    "split_lines",
    "looks_like_csv",
    "read_csv_table",
    "read_xlsx_table",
    "load_file",
    "DEFAULT_MAX_FILE_BYTES",
]
