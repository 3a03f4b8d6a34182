"""Comma-delimited text detection and reading."""

from __future__ import annotations

import csv
import io
import logging
from typing import Sequence

from .._types import Table

logger = logging.getLogger(__name__)


def looks_like_csv(lines: Sequence[str]) -> bool:
    """True when the lines contain commas and no pipe or semicolon."""
    return (
        len(lines) > 0
        and any("," in line for line in lines)
        and not any("|" in line or ";" in line for line in lines)
    )


def read_csv_table(text: str) -> Table:
    """Parse comma-delimited text into a raw table.

    Quoted fields may contain commas, quotes and newlines. Blank records are
    skipped; rows keep their own width. The field size limit is raised to
    the length of the text so a single long field still parses.
    """
    text = text or ""
    if len(text) >= csv.field_size_limit():
        csv.field_size_limit(len(text) + 1)

    reader = csv.reader(io.StringIO(text, newline=""), delimiter=",")
    table: Table = []
    for record in reader:
        if not record:
            continue
        table.append(["" if value is None else str(value) for value in record])

    logger.debug("Read %d CSV records", len(table))
    return table
