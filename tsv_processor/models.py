from __future__ import annotations

from typing import Any, Dict, Optional
from pydantic import BaseModel, Field


class TransformError(BaseModel):
    kind: str
    message: str
    line: Optional[int] = Field(default=None, examples=[3])
    column: Optional[int] = None
    key: Optional[str] = None
    expected: Optional[int] = None
    actual: Optional[int] = None
    char: Optional[str] = None
    code_point: Optional[str] = Field(default=None, examples=["U+3042"])


class TransformResult(BaseModel):
    """Outcome of one run: either `output` or `error` is set, never both."""

    output: Optional[str] = None
    error: Optional[TransformError] = None
    lines_read: int = 0
    lines_written: int = 0

    @property
    def ok(self) -> bool:
        return self.error is None


class OutputTsv(BaseModel):
    sha256: str
    content: str
    lines: int = 0


class TransformReport(BaseModel):
    mode: str
    lines_read: int = 0
    lines_written: int = 0
    decoding: Dict[str, Any] = Field(default_factory=dict)


class TransformResponse(BaseModel):
    output: OutputTsv
    report: TransformReport


class HealthResponse(BaseModel):
    ok: bool = True
