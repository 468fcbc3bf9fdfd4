#!/usr/bin/env python3
"""Print an INSERT statement filling the `student` table with random rows.

Usage: random_insert.py ROWS
"""
from __future__ import annotations

import logging
import re
import sys
from typing import Optional

from config_loader import get_log_level
from sql_emitter import write_statement
from student_rows import generate_rows

logger = logging.getLogger(__name__)

_LEADING_INT_RE = re.compile(r"^\s*([+-]?[0-9]+)")


def parse_row_count(text: Optional[str]) -> Optional[int]:
    """Base-10 prefix parse: '12abc' -> 12, '3.9' -> 3, 'abc' -> None."""
    if text is None:
        return None
    m = _LEADING_INT_RE.match(text)
    if not m:
        return None
    return int(m.group(1))


def setup_logging() -> None:
    logging.basicConfig(
        level=get_log_level(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )


def main(argv: Optional[list[str]] = None) -> int:
    """Only the first argument is read, never as an option; the rest are ignored."""
    if argv is None:
        argv = sys.argv[1:]
    text = argv[0] if argv else None

    setup_logging()

    count = parse_row_count(text)
    if count is None:
        logger.warning("Row count %r is not a number; emitting zero rows", text)
        count = 0
    logger.info("Generating %d rows", max(count, 0))

    write_statement(generate_rows(count), sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
