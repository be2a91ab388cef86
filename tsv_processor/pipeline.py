"""Mode dispatch shared by the CLI and the HTTP service."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Dict

from .group import group
from .models import TransformResult
from .normalize import normalize
from .textio import decode_bytes

log = logging.getLogger(__name__)


class Mode(str, Enum):
    NORMALIZE = "normalize"
    GROUP = "group"


_TRANSFORMS: Dict[Mode, Callable[[str], TransformResult]] = {
    Mode.NORMALIZE: normalize,
    Mode.GROUP: group,
}


def transform(mode: Mode, text: str) -> TransformResult:
    return _TRANSFORMS[Mode(mode)](text)


def process_bytes(mode: Mode, raw: bytes) -> tuple[TransformResult, Dict[str, Any]]:
    """Decode raw input and run the selected transform on it."""
    mode = Mode(mode)
    text, decoding = decode_bytes(raw)
    log.info("%s: %d bytes, decoded as %s", mode.value, len(raw), decoding["decode_used"])

    result = transform(mode, text)
    if result.ok:
        log.info("%s: %d lines read, %d lines written", mode.value, result.lines_read, result.lines_written)
    else:
        log.warning("%s failed: %s: %s", mode.value, result.error.kind, result.error.message)
    return result, decoding
