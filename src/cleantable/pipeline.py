"""Conversion pipeline -- raw input to a cleaned table.

Each call recomputes everything from its arguments; nothing is cached.
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Optional

from ._types import CleaningOptions, ConversionResult, Strategy, Table, custom_label
from .cleaner import clean_table
from .ingestion import (
    infer_table,
    load_file,
    looks_like_csv,
    parse_rows,
    read_csv_table,
    split_lines,
)

logger = logging.getLogger(__name__)


def convert_table(
    raw_table: Table,
    options: Optional[CleaningOptions] = None,
    strategy: str = Strategy.XLSX.value,
    source: Optional[str] = None,
) -> ConversionResult:
    """Clean a table that was already split into cells (e.g. a spreadsheet)."""
    return ConversionResult(
        table=clean_table(raw_table, options),
        strategy=strategy,
        source=source,
    )


def convert_text(
    text: str,
    delimiter: str = "",
    options: Optional[CleaningOptions] = None,
    source: Optional[str] = None,
) -> ConversionResult:
    """Turn pasted or loaded text into a cleaned table.

    An explicit delimiter wins. Otherwise comma-only text is read as CSV and
    anything else goes through delimiter inference.

    Args:
        text: Raw input text.
        delimiter: Literal delimiter override; empty means auto-detect.
        options: Cleaning switches.
        source: Optional label of where the text came from.

    Returns:
        ConversionResult with the cleaned table and strategy label.
    """
    opts = options or CleaningOptions()
    lines = split_lines(text)

    if delimiter:
        raw = parse_rows(lines, delimiter, opts.collapse_spaces)
        strategy = custom_label(delimiter)
    else:
        raw, strategy = None, ""
        if looks_like_csv(lines):
            try:
                raw = read_csv_table((text or "").replace("\r\n", "\n"))
                strategy = Strategy.CSV.value
            except csv.Error as exc:
                logger.warning("CSV parse failed, inferring delimiter instead: %s", exc)
        if raw is None:
            raw, strategy = infer_table(lines, collapse_spaces=opts.collapse_spaces)

    logger.debug("Parsed %d raw rows with strategy %s", len(raw), strategy)
    return convert_table(raw, opts, strategy=strategy, source=source)


def convert_file(
    file_path: str | Path,
    delimiter: str = "",
    options: Optional[CleaningOptions] = None,
    max_bytes: Optional[int] = None,
) -> ConversionResult:
    """Load a ``.txt``, ``.csv`` or ``.xlsx`` file and convert it.

    The delimiter override only applies to text files.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        FileLoadError: If the loader rejects the file.
    """
    loaded = load_file(file_path, max_bytes=max_bytes)

    if loaded.kind == "xlsx":
        return convert_table(loaded.table or [], options, source=loaded.meta)

    return convert_text(loaded.text or "", delimiter, options, source=loaded.meta)
