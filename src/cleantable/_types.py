"""Shared types for the cleantable library.

Tables are plain ``List[List[str]]``; options and results are Pydantic models.
"""

from __future__ import annotations

import math
import os
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

Row = List[str]
Table = List[Row]


class Strategy(str, Enum):
    """How a raw table was produced from the input."""

    TABS = "tabs"
    PIPE = "pipe"
    SEMICOLON = "semicolon"
    SPACES = "spaces"
    CSV = "csv"
    XLSX = "xlsx"


def custom_label(delimiter: str) -> str:
    """Strategy label for a caller-supplied delimiter."""
    return f"custom({delimiter})"


class FileLoadError(ValueError):
    """A file could not be turned into text or a raw table."""


_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name, "").strip().lower()
    if raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    return default


class CleaningOptions(BaseModel):
    """Switches for the table cleaner. Defaults match the interactive tool."""
    collapse_spaces: bool = True
    remove_empty_rows: bool = True
    remove_empty_columns: bool = True

    @classmethod
    def from_env(cls) -> "CleaningOptions":
        """Build options from ``CLEANTABLE_*`` environment variables."""
        return cls(
            collapse_spaces=_env_flag("CLEANTABLE_COLLAPSE_SPACES", True),
            remove_empty_rows=_env_flag("CLEANTABLE_REMOVE_EMPTY_ROWS", True),
            remove_empty_columns=_env_flag("CLEANTABLE_REMOVE_EMPTY_COLUMNS", True),
        )


class CandidateScore(BaseModel):
    """Consistency score of one delimiter candidate."""
    strategy: Strategy
    score: float = math.inf
    row_count: int = 0
    mode_columns: Optional[int] = None

    @property
    def usable(self) -> bool:
        return not math.isinf(self.score)


class LoadedSource(BaseModel):
    """Contents of a file accepted by the loader."""
    file: str
    kind: str = "text"
    text: Optional[str] = None
    table: Optional[Table] = None
    sheet_name: Optional[str] = None
    meta: str = ""


class ConversionResult(BaseModel):
    """A cleaned table and the strategy that produced it."""
    table: Table = Field(default_factory=list)
    strategy: str = Strategy.SPACES.value
    source: Optional[str] = None

    @property
    def has_table(self) -> bool:
        """True when at least one row was split into more than one cell."""
        return len(self.table) > 0 and any(len(row) > 1 for row in self.table)

    @property
    def row_count(self) -> int:
        return len(self.table)

    @property
    def column_count(self) -> int:
        return max((len(row) for row in self.table), default=0)

    def export_rows(self, exclude_header: bool = False) -> Table:
        """Rows to hand to an exporter, optionally without the first row."""
        if exclude_header and self.table:
            return self.table[1:]
        return self.table
