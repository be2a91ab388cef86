"""
Text input/output helpers shared by both pipelines.

Responsibilities:
- decoding of raw input bytes (encoding guess reported on failure)
- newline normalization
- line splitting / joining
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List

from charset_normalizer import from_bytes


def decode_bytes(raw: bytes) -> tuple[str, Dict[str, Any]]:
    """
    Decode input bytes to text.

    Rules:
    - Strict UTF-8 first; a leading BOM is dropped (utf-8-sig).
    - If that fails, record charset-normalizer's best guess in the report and
      decode as UTF-8 with replacement characters: each undecodable byte becomes
      U+FFFD where it stands, and the charset check reports that.
    """
    detected = None
    decode_fallback = False
    decode_used = "utf-8-sig" if raw.startswith(b"\xef\xbb\xbf") else "utf-8"

    try:
        text = raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        match = from_bytes(raw).best()
        if match is not None:
            detected = match.encoding
        text = raw.decode("utf-8-sig", errors="replace")
        decode_fallback = True

    newlines = {
        "crlf": text.count("\r\n"),
        "cr": text.count("\r") - text.count("\r\n"),
        "lf": text.count("\n") - text.count("\r\n"),
    }

    report = {
        "detected": detected,
        "decode_used": decode_used,
        "decode_fallback": decode_fallback,
        "newlines": newlines,
    }
    return text, report


def split_lines(text: str) -> List[str]:
    """Split text into lines on LF, CRLF or CR.

    A final line terminator does not produce an extra empty line.
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def join_lines(lines: Iterable[str]) -> str:
    return "".join(line + "\n" for line in lines)


def is_blank(line: str) -> bool:
    return not line.strip()
