"""Command line lookup over the SQL reference catalog."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from sqlref.catalog.errors import LoadError
from sqlref.catalog.render import render_all
from sqlref.catalog.schemas import Entry
from sqlref.catalog.store import load
from sqlref.config import LOG_LEVELS, get_settings

logger = logging.getLogger("sqlref.cli")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="sqlref",
        description="Look up SQL clauses, joins, constraints and operators.",
    )
    p.add_argument(
        "term",
        nargs="?",
        default=None,
        help="Entry name or category label (exact match). Omit to print the whole catalog.",
    )
    p.add_argument("--source", type=Path, default=None, help="Catalog JSON file (default: bundled guide)")
    p.add_argument("--json", action="store_true", help="Print entries as a JSON array")
    p.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Logging level (default from SQLREF_LOG_LEVEL)",
    )
    return p


def _format(entries: List[Entry], as_json: bool) -> str:
    if as_json:
        return json.dumps([e.model_dump() for e in entries], ensure_ascii=False, indent=2)
    return render_all(entries)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()

    logging.basicConfig(
        level=args.log_level or settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        catalog = load(args.source if args.source is not None else settings.catalog_path)
    except LoadError as e:
        print(f"error: failed to load catalog: {e}", file=sys.stderr)
        return 1

    if args.term is None:
        entries = catalog.list()
    else:
        entries = catalog.lookup(args.term)
        if not entries:
            logger.debug("No match for %r", args.term)
            print(f"no entry found for {args.term!r}")
            return 0

    print(_format(entries, args.json))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
