"""
Line Trimmer – command-line interface
=====================================

Usage
-----
::

    python -m line_trimmer.cli [SOURCE] [OPTIONS]

Options
-------
--output, -o       Output file path (default: stdout).
--keep-indent      Do not re-indent lines to the least indent; only strip.
--keep-leading     Keep the blank lines before the first non-blank line.
--keep-trailing    Keep the blank lines after the last non-blank line.
--verbose, -v      Enable DEBUG logging.

Examples
--------
::

    python -m line_trimmer.cli snippet.txt
    python -m line_trimmer.cli snippet.txt -o clean.txt
    pbpaste | python -m line_trimmer.cli --keep-leading
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .pipeline.line_trimmer import LineTrimmer

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="line-trimmer",
        description="Line Trimmer – strip, re-indent and vertically trim text",
    )
    p.add_argument(
        "source",
        nargs="?",
        default="-",
        help="File to trim (default: read stdin)",
    )
    p.add_argument(
        "--output", "-o",
        default="-",
        metavar="FILE",
        help="Output file (default: stdout)",
    )
    p.add_argument(
        "--keep-indent",
        action="store_true",
        help="Strip every line fully instead of re-indenting to the least indent",
    )
    p.add_argument(
        "--keep-leading",
        action="store_true",
        help="Keep leading blank lines",
    )
    p.add_argument(
        "--keep-trailing",
        action="store_true",
        help="Keep trailing blank lines",
    )
    p.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )
    return p


def _read_source(source: str) -> str:
    # A lone "\r" stays in the text; only "\n" separates lines
    if source == "-":
        raw = sys.stdin.buffer.read()
    else:
        raw = Path(source).read_bytes()
    return raw.decode("utf-8", errors="replace")


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    trimmer = LineTrimmer(
        trim_left_to_least_indent=not args.keep_indent,
        trim_vertical_start=not args.keep_leading,
        trim_vertical_end=not args.keep_trailing,
    )

    try:
        text = _read_source(args.source)
    except OSError as exc:
        print(f"error: cannot read {args.source}: {exc}", file=sys.stderr)
        return 2

    logger.debug("Read %d character(s) from %s", len(text), args.source)
    output_text = trimmer.trim(text)

    if args.output == "-":
        if output_text:
            print(output_text)
        return 0

    try:
        Path(args.output).write_text(
            output_text + "\n" if output_text else "", encoding="utf-8"
        )
    except OSError as exc:
        print(f"error: cannot write {args.output}: {exc}", file=sys.stderr)
        return 2

    print(f"Output written to {args.output}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
