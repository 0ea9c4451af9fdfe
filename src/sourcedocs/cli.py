"""Render documentation records to Markdown.

Usage:
    sourcedocs records.json [--output api.md] [--strict]

The input is a JSON list of documentation records, one object per symbol.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .comment import debug_info, render_comment
from .config import Config
from .errors import RecordError, SourceDocsError
from .generators import render_symbols
from .models import DocRecord
from .validators import summarize

log = logging.getLogger(__name__)


def load_records(path: Path) -> list[DocRecord]:
    """Load a JSON list of record objects from ``path``.

    Raises:
        RecordError: If the file is unreadable or not a list of objects.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise RecordError(f"Cannot read records from {path}: {e}") from e

    if not isinstance(data, list):
        raise RecordError(f"{path}: expected a JSON list of records")
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise RecordError(f"{path}: record {index} is not an object")
    return data


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sourcedocs", description="Render documentation records as Markdown."
    )
    parser.add_argument("records", type=Path, help="JSON file of records")
    parser.add_argument(
        "-o", "--output", type=Path, help="Write Markdown here instead of stdout"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 if any symbol is undocumented",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Render records and report coverage. Returns the exit status."""
    args = _parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = Config.from_env()

    try:
        records = load_records(args.records)
    except SourceDocsError as e:
        print(f"✗ {e}", file=sys.stderr)
        return 1

    # Render each comment once; coverage reuses them
    comments = [render_comment(record) for record in records]
    markdown = render_symbols(records, config, comments=comments)
    if args.output:
        args.output.write_text(markdown + "\n", encoding="utf-8")
        log.info("Wrote %d symbols to %s", len(records), args.output)
    else:
        print(markdown)

    coverage, missing = summarize(
        debug_info(record, config, comment)
        for record, comment in zip(records, comments)
    )
    print(f"Coverage: {coverage:.0%} of {len(records)} symbols", file=sys.stderr)

    if args.strict and missing:
        for name in missing:
            print(f"  ✗ {name}: undocumented", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
