"""Spreadsheet reading via openpyxl.

Only the first worksheet is read. Every row of the sheet's used range is
returned, blank rows included, with each value converted to display text.
"""
from __future__ import annotations

import logging
from datetime import date, datetime, time
from pathlib import Path
from typing import Any, Tuple

from .._types import FileLoadError, Table

logger = logging.getLogger(__name__)


def _cell_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, datetime):
        if value.time() == time(0, 0):
            return value.date().isoformat()
        return value.isoformat(sep=" ")
    if isinstance(value, (date, time)):
        return value.isoformat()
    return str(value)


def read_xlsx_table(file_path: str | Path) -> Tuple[Table, str]:
    """Read the first worksheet of a workbook as a raw table.

    Args:
        file_path: Path to an ``.xlsx`` workbook.

    Returns:
        Tuple of (raw table, sheet name).

    Raises:
        ImportError: If openpyxl is not installed.
        FileLoadError: If the workbook cannot be opened or has no sheets.
    """
    try:
        import openpyxl
    except ImportError:
        raise ImportError(
            "openpyxl not installed. Run: pip install 'cleantable[xlsx]'"
        )

    try:
        wb = openpyxl.load_workbook(file_path, data_only=True)
    except Exception as exc:
        logger.warning("Failed to open workbook %s: %s", file_path, exc)
        raise FileLoadError(
            "Could not read XLSX. Try saving as CSV and dropping that instead."
        ) from exc

    try:
        if not wb.sheetnames:
            raise FileLoadError("Could not find a sheet in this XLSX.")

        sheet_name = wb.sheetnames[0]
        ws = wb[sheet_name]

        table: Table = [
            [_cell_text(v) for v in row]
            for row in ws.iter_rows(
                min_row=ws.min_row, max_row=ws.max_row,
                min_col=ws.min_column, max_col=ws.max_column,
                values_only=True,
            )
        ]
    finally:
        wb.close()

    # A sheet with no cells still reports a 1x1 range.
    if table == [[""]]:
        table = []

    logger.debug("Read %d rows from sheet %s", len(table), sheet_name)
    return table, sheet_name
