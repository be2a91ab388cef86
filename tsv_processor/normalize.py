"""
Forward transform: denormalized TSV -> one row per value combination.

Responsibilities:
- charset pre-check over the whole input
- column count enforcement (upper bound + consistency with the first row)
- per-cell length and value-count limits
- Cartesian expansion of colon-separated cells
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from .errors import cell_too_long, column_count_mismatch, too_many_columns, too_many_values
from .expand import cartesian_product
from .models import TransformError, TransformResult
from .rules import (
    FIELD_DELIMITER,
    MAX_CELL_LENGTH,
    MAX_COLUMNS,
    MAX_VALUES_PER_CELL,
    VALUE_DELIMITER,
)
from .textio import is_blank, join_lines, split_lines
from .validate import find_charset_violation

log = logging.getLogger(__name__)


def split_row(line: str) -> List[str]:
    """Split on tab. Trailing empty cells are kept."""
    return line.split(FIELD_DELIMITER)


def split_values(cell: str) -> List[str]:
    """Split a cell on ":". Empty values are kept, so "a:" -> ["a", ""]."""
    return cell.split(VALUE_DELIMITER)


def check_row_shape(line_num: int, cells: List[str], expected_columns: Optional[int]) -> Optional[TransformError]:
    if len(cells) > MAX_COLUMNS:
        return too_many_columns(line_num, len(cells), MAX_COLUMNS)
    if expected_columns is not None and len(cells) != expected_columns:
        return column_count_mismatch(line_num, expected_columns, len(cells))
    return None


def split_cells(line_num: int, cells: List[str]) -> tuple[List[List[str]], Optional[TransformError]]:
    """Split every cell into its values, stopping at the first cell over a limit."""
    split: List[List[str]] = []
    for column, cell in enumerate(cells, start=1):
        if len(cell) > MAX_CELL_LENGTH:
            return split, cell_too_long(line_num, column, len(cell), MAX_CELL_LENGTH)
        values = split_values(cell)
        if len(values) > MAX_VALUES_PER_CELL:
            return split, too_many_values(line_num, column, len(values), MAX_VALUES_PER_CELL)
        split.append(values)
    return split, None


def normalize_lines(lines: Iterable[str]) -> TransformResult:
    """
    Expand every non-blank line into its value combinations.

    The charset check is not applied here; `normalize` runs it first.
    Output is buffered, so a failing run never yields partial output.
    """
    out: List[str] = []
    expected_columns: Optional[int] = None
    lines_read = 0

    for line_num, line in enumerate(lines, start=1):
        lines_read = line_num
        if is_blank(line):
            continue

        cells = split_row(line)
        error = check_row_shape(line_num, cells, expected_columns)
        if error is not None:
            return TransformResult(error=error, lines_read=lines_read)
        if expected_columns is None:
            expected_columns = len(cells)

        values, error = split_cells(line_num, cells)
        if error is not None:
            return TransformResult(error=error, lines_read=lines_read)

        for combo in cartesian_product(values):
            out.append(FIELD_DELIMITER.join(combo))

    log.debug("normalized %d lines into %d rows (%s columns)", lines_read, len(out), expected_columns)
    return TransformResult(output=join_lines(out), lines_read=lines_read, lines_written=len(out))


def normalize(text: str) -> TransformResult:
    lines = split_lines(text)
    error = find_charset_violation(lines)
    if error is not None:
        return TransformResult(error=error)
    return normalize_lines(lines)
