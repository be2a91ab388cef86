"""Command-line interface for tsv_processor.

- reads the input file as bytes (encoding detected, see textio)
- runs `normalize` or `group`
- commits the output to <output-dir>/<yyyyMMddHHmm>processed.tsv, or --output

Exit codes: 0 ok, 1 transform error (nothing written), 2 I/O error.
"""

from __future__ import annotations
import argparse
import logging
import sys
from pathlib import Path

from . import settings
from .output import commit_output, output_filename
from .pipeline import Mode, process_bytes
from .setup_logging import setup_logging

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="tsv-processor", description="Normalize or group tab-separated data.")
    p.add_argument("mode", choices=[m.value for m in Mode],
                   help="normalize: expand colon-separated cells; group: collapse key/value rows")
    p.add_argument("path", help="Input TSV file")
    p.add_argument("--output-dir", type=Path, default=settings.OUTPUT_DIR,
                   help="Directory for the timestamped output file (default: $TSV_OUTPUT_DIR or .)")
    p.add_argument("--output", type=Path, default=None, help="Explicit output path (overrides --output-dir)")
    p.add_argument("--log-level", default=settings.LOG_LEVEL, help="Logging level (default: $TSV_LOG_LEVEL or INFO)")
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        raw = Path(args.path).read_bytes()
    except OSError as ex:
        sys.stderr.write(f"error: cannot read {args.path}: {ex}\n")
        return 2

    result, _ = process_bytes(Mode(args.mode), raw)
    if not result.ok:
        sys.stderr.write(f"error: {result.error.kind}: {result.error.message}\n")
        return 1

    out_path = args.output or args.output_dir / output_filename()
    try:
        commit_output(out_path, result.output)
    except OSError as ex:
        sys.stderr.write(f"error: cannot write {out_path}: {ex}\n")
        return 2

    log.info("wrote %s", out_path)
    sys.stdout.write(f"{out_path}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
