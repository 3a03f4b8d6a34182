"""Table cleaning -- cell normalization, empty row and column removal."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from ._types import CleaningOptions, Table
from .ingestion.table_parser import normalize_cell

logger = logging.getLogger(__name__)


def row_has_value(row: Sequence[Optional[str]]) -> bool:
    """True when any cell is non-blank after trimming."""
    return any((c or "").strip() != "" for c in row)


def remove_empty_rows(table: Table) -> Table:
    return [row for row in table if row_has_value(row)]


def remove_empty_columns(table: Table) -> Table:
    """Drop every column index that is blank in all rows.

    Width is the longest row; shorter rows count as blank past their end and
    come back filled with ``""`` up to the surviving width.
    """
    if not table:
        return table

    max_cols = max(len(row) for row in table)
    keep = [False] * max_cols
    for row in table:
        for j, value in enumerate(row):
            if (value or "").strip() != "":
                keep[j] = True

    kept = [j for j in range(max_cols) if keep[j]]
    return [[row[j] if j < len(row) else "" for j in kept] for row in table]


def clean_table(table: Table, options: Optional[CleaningOptions] = None) -> Table:
    """Normalize cells, then drop empty rows, then drop empty columns.

    Column emptiness is judged on the table left after row removal. The input
    table is not modified.

    Args:
        table: Raw table, rows may be ragged.
        options: Cleaning switches (defaults: all enabled).

    Returns:
        A new cleaned table.
    """
    opts = options or CleaningOptions()

    out: Table = [[normalize_cell(c, opts.collapse_spaces) for c in row] for row in table]

    if opts.remove_empty_rows:
        before = len(out)
        out = remove_empty_rows(out)
        logger.debug("Removed %d empty rows", before - len(out))

    if opts.remove_empty_columns:
        out = remove_empty_columns(out)

    return out
