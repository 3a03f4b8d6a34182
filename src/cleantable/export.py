"""Table export -- TSV, Markdown, CSV and XLSX."""

from __future__ import annotations

import csv
import io
import logging
import re
from pathlib import Path
from typing import Optional, Sequence

from ._types import Table

logger = logging.getLogger(__name__)

_NEWLINE_RE = re.compile(r"\r?\n")


def serialize_tsv(table: Table) -> str:
    """Tab-join cells and newline-join rows. Cells are not escaped."""
    return "\n".join("\t".join(row) for row in table)


def _escape_markdown_cell(cell: Optional[str]) -> str:
    return _NEWLINE_RE.sub(" ", cell or "").replace("|", "\\|")


def _markdown_line(cells: Sequence[str]) -> str:
    return f"| {' | '.join(cells)} |"


def serialize_markdown(table: Table) -> str:
    """Render a Markdown table using the first row as header.

    Rows are padded to the widest row. Newlines inside cells become spaces
    and pipes are backslash-escaped.
    """
    if not table:
        return ""

    max_cols = max(len(row) for row in table)
    padded = [
        [_escape_markdown_cell(row[i] if i < len(row) else "") for i in range(max_cols)]
        for row in table
    ]

    header, body = padded[0], padded[1:]
    lines = [_markdown_line(header), _markdown_line(["---"] * len(header))]
    lines.extend(_markdown_line(row) for row in body)
    return "\n".join(lines)


def serialize_csv(table: Table) -> str:
    """Comma-separated output with minimal quoting and CRLF record ends."""
    output = io.StringIO()
    writer = csv.writer(output, lineterminator="\r\n")
    writer.writerows(table)
    return output.getvalue().removesuffix("\r\n")


def write_xlsx(table: Table, output_path: str | Path, sheet_name: str = "Table") -> str:
    """Write the table to a single-sheet workbook.

    Every cell is stored as text. Control characters a worksheet cannot
    hold are dropped.

    Returns:
        The path written to.

    Raises:
        ImportError: If openpyxl is not installed.
    """
    try:
        from openpyxl import Workbook
        from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
    except ImportError:
        raise ImportError(
            "openpyxl not installed. Run: pip install 'cleantable[xlsx]'"
        )

    wb = Workbook()
    ws = wb.active
    ws.title = sheet_name
    for r, row in enumerate(table, 1):
        for c, value in enumerate(row, 1):
            text = ILLEGAL_CHARACTERS_RE.sub("", value or "")
            cell = ws.cell(row=r, column=c, value=text)
            # Text that starts with "=" is not a formula.
            cell.data_type = "s"

    out = Path(output_path)
    wb.save(out)
    logger.info("Wrote %d rows to %s", len(table), out)
    return str(out)


def export_table(table: Table, fmt: str, exclude_header: bool = False) -> str:
    """Serialize a table to one of ``tsv``, ``markdown`` or ``csv``.

    Args:
        table: Cleaned table.
        fmt: Output format.
        exclude_header: Drop the first row before serializing.

    Raises:
        ValueError: If the format is unknown.
    """
    rows = table[1:] if exclude_header and table else table

    if fmt == "tsv":
        return serialize_tsv(rows)
    elif fmt == "markdown":
        return serialize_markdown(rows)
    elif fmt == "csv":
        return serialize_csv(rows)
    else:
        raise ValueError(f"Unknown format: {fmt}")
