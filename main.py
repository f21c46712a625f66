#!/usr/bin/env python3
"""
Stock plan statement to CSV.

Extracts RSU releases, share sales and ESPP purchases from a brokerage
statement PDF (via pdftotext) and writes them as CSV.

Usage:
  python main.py <pdf-file> [output-file.csv]
  python main.py <pdf-file> --separate [output-prefix]
"""
import argparse
import logging
import sys
import os

_here = os.path.dirname(os.path.abspath(__file__))
if _here not in sys.path:
    sys.path.insert(0, _here)

from pathlib import Path
from dotenv import load_dotenv
load_dotenv(Path(_here) / ".env")

from stockplan import StatementDateError, parse, render
from stockplan.config import DEFAULT_OUTPUT_PREFIX, LOG_LEVEL
from stockplan.clients import PdfToTextClient, TextExtractionError, strip_zero_width
from stockplan.data.output import write_combined, write_separate
from stockplan.render import COMBINED, SEPARATE
from stockplan.summary import summarize


def _load_text(path: str, is_text: bool) -> str:
    if is_text:
        p = Path(path)
        if not p.is_file():
            raise TextExtractionError(f"File not found: {p}")
        try:
            return strip_zero_width(p.read_text(encoding="utf-8"))
        except UnicodeDecodeError as e:
            raise TextExtractionError(f"{p} is not UTF-8 text: {e}") from e
    return PdfToTextClient().extract_text(path)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Convert a stock plan statement into CSV (releases, sales, ESPP purchases)."
    )
    parser.add_argument("input", help="Statement PDF (or plain text with --text)")
    parser.add_argument(
        "output",
        nargs="?",
        default=None,
        help="Combined CSV path (default: print to stdout)",
    )
    parser.add_argument(
        "--separate",
        nargs="?",
        const=DEFAULT_OUTPUT_PREFIX,
        default=None,
        metavar="PREFIX",
        help=f"Write <PREFIX>_releases.csv, <PREFIX>_sales.csv, <PREFIX>_espp_purchases.csv (default prefix: {DEFAULT_OUTPUT_PREFIX})",
    )
    parser.add_argument(
        "--text",
        action="store_true",
        help="Input is already-extracted plain text; skip pdftotext",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print per-type record counts and quantities to stderr",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        text = _load_text(args.input, args.text)
        data = parse(text)
        if args.separate is not None:
            tables = render(data, SEPARATE)
        else:
            combined = render(data, COMBINED)
        summary = summarize(data) if args.summary else None
    except (TextExtractionError, StatementDateError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # Everything is parsed and rendered before anything is written
    try:
        if args.separate is not None:
            written = write_separate(args.separate, tables)
        elif args.output:
            written = [write_combined(args.output, combined)]
        else:
            written = []
            print(combined)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    for path in written:
        print(f"Created: {path}")

    if summary is not None:
        print("\nSummary:", file=sys.stderr)
        if summary.empty:
            print("  (No records)", file=sys.stderr)
        else:
            print(summary.to_string(index=False), file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
