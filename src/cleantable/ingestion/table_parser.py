"""Table inference from raw text lines.

Each line is split into cells and several delimiter candidates are scored by
how consistent the resulting row widths are. The most consistent parse wins.
"""

from __future__ import annotations

import logging
import math
import re
from typing import List, Optional, Sequence, Tuple

from .._types import CandidateScore, Strategy, Table, custom_label

logger = logging.getLogger(__name__)

_SPACE_RUN_RE = re.compile(r" {2,}")
_WHITESPACE_RE = re.compile(r"\s+")

# Evaluation order doubles as the tie-break order.
_CANDIDATES: List[Tuple[Strategy, Optional[str]]] = [
    (Strategy.TABS, "\t"),
    (Strategy.PIPE, "|"),
    (Strategy.SEMICOLON, ";"),
    (Strategy.SPACES, None),
]

# Weight of a row whose width differs from the mode, per row.
_MISMATCH_WEIGHT = 10


def split_lines(text: str) -> List[str]:
    """Split text into lines, dropping zero-length ones."""
    normalized = (text or "").replace("\r\n", "\n")
    return [line for line in normalized.split("\n") if len(line) > 0]


def split_line(line: Optional[str], delimiter: Optional[str] = None) -> List[str]:
    """Split one line into cells.

    With a delimiter the line is split on that literal string. Without one the
    first delimiter present in the line is used: tab, semicolon, pipe, and
    finally runs of two or more spaces.
    """
    src = line or ""
    if delimiter:
        return src.split(delimiter)

    if "\t" in src:
        return src.split("\t")
    if ";" in src:
        return src.split(";")
    if "|" in src:
        return src.split("|")

    return _SPACE_RUN_RE.split(src)


def normalize_cell(cell: Optional[object], collapse_spaces: bool) -> str:
    """Stringify a cell; optionally trim it and collapse whitespace runs."""
    s = "" if cell is None else str(cell)
    if not collapse_spaces:
        return s
    return _WHITESPACE_RE.sub(" ", s.strip())


def parse_rows(
    lines: Sequence[str],
    delimiter: Optional[str],
    collapse_spaces: bool,
) -> Table:
    """Split every line with :func:`split_line` and normalize the cells."""
    return [
        [normalize_cell(c, collapse_spaces) for c in split_line(line, delimiter)]
        for line in lines
    ]


def _mode_width(widths: Sequence[int]) -> Tuple[int, int]:
    """Most frequent width and its frequency; ties go to the first width seen."""
    counts: dict = {}
    for n in widths:
        counts[n] = counts.get(n, 0) + 1

    mode, best = 0, 0
    for width, freq in counts.items():
        if freq > best:
            mode, best = width, freq
    return mode, best


def score_table(table: Table) -> float:
    """Consistency score of a raw table. Lower is better, ``inf`` is unusable.

    ``10 * (rows off the mode width) + sum(|width - mode|)``.
    """
    widths = [len(row) for row in table if len(row) > 0]
    if not widths or max(widths) <= 1:
        return math.inf

    mode, freq = _mode_width(widths)
    inconsistent = len(widths) - freq
    ragged = sum(abs(n - mode) for n in widths)
    return float(inconsistent * _MISMATCH_WEIGHT + ragged)


def _evaluate(
    lines: Sequence[str], collapse_spaces: bool
) -> List[Tuple[CandidateScore, Table]]:
    results = []
    for strategy, delim in _CANDIDATES:
        parsed = parse_rows(lines, delim, collapse_spaces)
        score = score_table(parsed)
        widths = [len(row) for row in parsed if row]
        results.append((
            CandidateScore(
                strategy=strategy,
                score=score,
                row_count=len(parsed),
                mode_columns=_mode_width(widths)[0] if widths else None,
            ),
            parsed,
        ))
        logger.debug("Candidate %s scored %s", strategy.value, score)
    return results


def score_candidates(
    lines: Sequence[str], collapse_spaces: bool = True
) -> List[CandidateScore]:
    """Score every delimiter candidate, in evaluation order."""
    return [candidate for candidate, _ in _evaluate(lines, collapse_spaces)]


def infer_table(
    lines: Sequence[str],
    delimiter: str = "",
    collapse_spaces: bool = True,
) -> Tuple[Table, str]:
    """Split lines into the most plausible table.

    Args:
        lines: Input lines, without line terminators.
        delimiter: If non-empty, split every line on this literal string and
            skip detection.
        collapse_spaces: Trim cells and collapse internal whitespace.

    Returns:
        Tuple of (raw table, strategy label).
    """
    if delimiter:
        return parse_rows(lines, delimiter, collapse_spaces), custom_label(delimiter)

    evaluated = _evaluate(lines, collapse_spaces)

    best: Optional[Tuple[CandidateScore, Table]] = None
    for candidate, parsed in evaluated:
        if best is None or candidate.score < best[0].score:
            best = (candidate, parsed)

    # Nothing split: hand back the whitespace fallback so the caller sees
    # single-cell rows.
    if best is None or not best[0].usable:
        best = evaluated[-1]

    candidate, table = best
    logger.debug(
        "Detected %s over %d lines (score %s)",
        candidate.strategy.value, len(lines), candidate.score,
    )
    return table, candidate.strategy.value
