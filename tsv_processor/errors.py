"""Error taxonomy for the transform pipelines.

Errors are returned as `TransformError` values, not raised. Every factory
below builds one kind with its identifying location and a readable message.
"""

from __future__ import annotations

from enum import Enum

from .models import TransformError


class ErrorKind(str, Enum):
    CHARSET_VIOLATION = "CharsetViolation"
    TOO_MANY_COLUMNS = "TooManyColumns"
    COLUMN_COUNT_MISMATCH = "ColumnCountMismatch"
    CELL_TOO_LONG = "CellTooLong"
    TOO_MANY_VALUES = "TooManyValues"
    INVALID_COLUMN_COUNT = "InvalidColumnCount"
    KEY_TOO_LONG = "KeyTooLong"
    VALUE_TOO_LONG = "ValueTooLong"
    TOO_MANY_VALUES_FOR_KEY = "TooManyValuesForKey"
    TOO_MANY_ROWS = "TooManyRows"


def charset_violation(line: int, char: str) -> TransformError:
    code_point = f"U+{ord(char):04X}"
    return TransformError(
        kind=ErrorKind.CHARSET_VIOLATION.value,
        message=f"non-printable character on line {line}: {char!r} ({code_point})",
        line=line,
        char=char,
        code_point=code_point,
    )


def too_many_columns(line: int, actual: int, limit: int) -> TransformError:
    return TransformError(
        kind=ErrorKind.TOO_MANY_COLUMNS.value,
        message=f"line {line}: {actual} columns, at most {limit} allowed",
        line=line,
        expected=limit,
        actual=actual,
    )


def column_count_mismatch(line: int, expected: int, actual: int) -> TransformError:
    return TransformError(
        kind=ErrorKind.COLUMN_COUNT_MISMATCH.value,
        message=f"line {line}: expected {expected} columns, got {actual}",
        line=line,
        expected=expected,
        actual=actual,
    )


def cell_too_long(line: int, column: int, length: int, limit: int) -> TransformError:
    return TransformError(
        kind=ErrorKind.CELL_TOO_LONG.value,
        message=f"line {line}, column {column}: cell is {length} characters, at most {limit} allowed",
        line=line,
        column=column,
        expected=limit,
        actual=length,
    )


def too_many_values(line: int, column: int, count: int, limit: int) -> TransformError:
    return TransformError(
        kind=ErrorKind.TOO_MANY_VALUES.value,
        message=f"line {line}, column {column}: {count} values, at most {limit} allowed",
        line=line,
        column=column,
        expected=limit,
        actual=count,
    )


def invalid_column_count(line: int, actual: int, expected: int) -> TransformError:
    return TransformError(
        kind=ErrorKind.INVALID_COLUMN_COUNT.value,
        message=f"line {line}: expected {expected} columns (key, value), got {actual}",
        line=line,
        expected=expected,
        actual=actual,
    )


def key_too_long(line: int, length: int, limit: int) -> TransformError:
    return TransformError(
        kind=ErrorKind.KEY_TOO_LONG.value,
        message=f"line {line}: key is {length} characters, at most {limit} allowed",
        line=line,
        expected=limit,
        actual=length,
    )


def value_too_long(line: int, length: int, limit: int) -> TransformError:
    return TransformError(
        kind=ErrorKind.VALUE_TOO_LONG.value,
        message=f"line {line}: value is {length} characters, at most {limit} allowed",
        line=line,
        expected=limit,
        actual=length,
    )


def too_many_values_for_key(key: str, count: int, limit: int) -> TransformError:
    return TransformError(
        kind=ErrorKind.TOO_MANY_VALUES_FOR_KEY.value,
        message=f"key {key!r}: {count} values, at most {limit} allowed",
        key=key,
        expected=limit,
        actual=count,
    )


def too_many_rows(line: int, limit: int) -> TransformError:
    return TransformError(
        kind=ErrorKind.TOO_MANY_ROWS.value,
        message=f"line {line}: input exceeds {limit} rows",
        line=line,
        expected=limit,
    )
