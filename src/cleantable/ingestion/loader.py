"""File loading -- .txt/.csv as text, .xlsx as a raw table."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from .._types import FileLoadError, LoadedSource
from .xlsx_reader import read_xlsx_table

logger = logging.getLogger(__name__)

DEFAULT_MAX_FILE_BYTES = 10 * 1024 * 1024

_TEXT_EXTENSIONS = {".csv", ".txt"}
_SHEET_EXTENSIONS = {".xlsx"}


def _max_bytes(max_bytes: Optional[int]) -> int:
    if max_bytes is not None:
        return max_bytes
    raw = os.getenv("CLEANTABLE_MAX_FILE_BYTES", "")
    try:
        return int(raw) if raw else DEFAULT_MAX_FILE_BYTES
    except ValueError:
        logger.warning("Ignoring invalid CLEANTABLE_MAX_FILE_BYTES=%r", raw)
        return DEFAULT_MAX_FILE_BYTES


def load_file(
    file_path: str | Path,
    max_bytes: Optional[int] = None,
) -> LoadedSource:
    """Load a text or spreadsheet file for conversion.

    Args:
        file_path: Path to a ``.csv``, ``.txt`` or ``.xlsx`` file.
        max_bytes: Size ceiling. Defaults to ``CLEANTABLE_MAX_FILE_BYTES``
            or 10 MB.

    Returns:
        LoadedSource with ``text`` set for text files, ``table`` and
        ``sheet_name`` for workbooks.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        FileLoadError: If the file is too large, has an unsupported
            extension, or cannot be read.
    """
    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(f"File not found: {file_path}")

    ext = path.suffix.lower()
    limit = _max_bytes(max_bytes)

    if ext in _SHEET_EXTENSIONS:
        if path.stat().st_size > limit:
            raise FileLoadError(
                "XLSX file too large. Please use a smaller file or export a "
                "smaller CSV from Excel."
            )
        table, sheet_name = read_xlsx_table(path)
        logger.info("Loaded %s (sheet %s, %d rows)", path.name, sheet_name, len(table))
        return LoadedSource(
            file=str(path),
            kind="xlsx",
            table=table,
            sheet_name=sheet_name,
            meta=f"XLSX: {path.name} • Sheet: {sheet_name}",
        )

    if ext not in _TEXT_EXTENSIONS:
        raise FileLoadError("Unsupported file type. Please use .csv, .txt, or .xlsx.")

    if path.stat().st_size > limit:
        raise FileLoadError("File too large. Please use a smaller file.")

    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise FileLoadError("Could not read file.") from exc

    logger.info("Loaded %s (%d characters)", path.name, len(text))
    return LoadedSource(file=str(path), kind="text", text=text, meta=f"Loaded: {path.name}")
