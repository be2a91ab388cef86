"""
Inverse transform: normalized key/value TSV -> one row per key.

Values sharing a key are colon-joined in the order they were read.
Keys keep their first-appearance order.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List

from .errors import (
    invalid_column_count,
    key_too_long,
    too_many_rows,
    too_many_values_for_key,
    value_too_long,
)
from .models import TransformResult
from .rules import (
    FIELD_DELIMITER,
    GROUP_COLUMNS,
    MAX_GROUP_ROWS,
    MAX_KEY_LENGTH,
    MAX_VALUE_LENGTH,
    MAX_VALUES_PER_KEY,
    VALUE_DELIMITER,
)
from .textio import is_blank, join_lines, split_lines
from .validate import find_charset_violation

log = logging.getLogger(__name__)


def render_groups(groups: Dict[str, List[str]]) -> List[str]:
    return [f"{key}{FIELD_DELIMITER}{VALUE_DELIMITER.join(values)}" for key, values in groups.items()]


def group_lines(lines: Iterable[str]) -> TransformResult:
    """
    Collapse key/value lines into one line per key.

    Blank lines are skipped but still count toward the row limit.
    The charset check is not applied here; `group` runs it first.
    """
    groups: Dict[str, List[str]] = {}
    lines_read = 0

    for line_num, line in enumerate(lines, start=1):
        lines_read = line_num
        if line_num > MAX_GROUP_ROWS:
            return TransformResult(error=too_many_rows(line_num, MAX_GROUP_ROWS), lines_read=lines_read)
        if is_blank(line):
            continue

        cols = line.split(FIELD_DELIMITER)
        if len(cols) != GROUP_COLUMNS:
            return TransformResult(
                error=invalid_column_count(line_num, len(cols), GROUP_COLUMNS), lines_read=lines_read
            )

        key, value = cols
        if len(key) > MAX_KEY_LENGTH:
            return TransformResult(error=key_too_long(line_num, len(key), MAX_KEY_LENGTH), lines_read=lines_read)
        if len(value) > MAX_VALUE_LENGTH:
            return TransformResult(
                error=value_too_long(line_num, len(value), MAX_VALUE_LENGTH), lines_read=lines_read
            )

        values = groups.setdefault(key, [])
        values.append(value)
        if len(values) > MAX_VALUES_PER_KEY:
            return TransformResult(
                error=too_many_values_for_key(key, len(values), MAX_VALUES_PER_KEY), lines_read=lines_read
            )

    out = render_groups(groups)
    log.debug("grouped %d lines into %d keys", lines_read, len(out))
    return TransformResult(output=join_lines(out), lines_read=lines_read, lines_written=len(out))


def group(text: str) -> TransformResult:
    lines = split_lines(text)
    error = find_charset_violation(lines)
    if error is not None:
        return TransformResult(error=error)
    return group_lines(lines)
