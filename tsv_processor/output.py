"""Output file naming and atomic commit."""

from __future__ import annotations

import os
import tempfile
from contextlib import suppress
from datetime import datetime
from pathlib import Path
from typing import Optional


def output_filename(now: Optional[datetime] = None) -> str:
    now = now or datetime.now()
    return f"{now:%Y%m%d%H%M}processed.tsv"


def commit_output(path: Path, text: str) -> Path:
    """
    Write `text` to `path` atomically.

    The data goes to a temporary file in the same directory first and is moved
    into place only once fully written; on failure no file is left at `path`
    and the temporary file is removed.
    """
    path = Path(path)
    fd, tmp = tempfile.mkstemp(prefix=".tsv-", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="ascii", newline="") as fh:
            fh.write(text)
        os.replace(tmp, path)
    except BaseException:
        with suppress(FileNotFoundError):
            os.unlink(tmp)
        raise
    return path
