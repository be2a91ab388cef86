"""Character-set check run over the whole input before either pipeline starts."""

from __future__ import annotations

from typing import Iterable, Optional

from .errors import charset_violation
from .models import TransformError
from .rules import FIELD_DELIMITER, PRINTABLE_MAX, PRINTABLE_MIN


def is_permitted(ch: str) -> bool:
    return ch == FIELD_DELIMITER or PRINTABLE_MIN <= ord(ch) <= PRINTABLE_MAX


def find_charset_violation(lines: Iterable[str]) -> Optional[TransformError]:
    """Return the first disallowed character as a CharsetViolation, or None.

    Line numbers are 1-based and count blank lines.
    """
    for line_num, line in enumerate(lines, start=1):
        for ch in line:
            if not is_permitted(ch):
                return charset_violation(line_num, ch)
    return None
