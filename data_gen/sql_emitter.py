"""
SQL Emitter - renders student rows as one multi-row INSERT statement

The statement is streamed through a Jinja2 template so rows are written
as they are generated instead of being collected first.
"""
from __future__ import annotations

import logging
from typing import Iterable, Iterator, TextIO

from jinja2 import Environment

from student_rows import StudentRow

logger = logging.getLogger(__name__)

HEADER = "insert into student values"
TERMINATOR = ";"

# Rows are joined by ",\n"; the block is followed by a newline and the
# terminator line, so zero rows leave an empty line between header and ";".
STATEMENT_TEMPLATE = (
    HEADER + "\n"
    "{% for row in rows %}{{ row | sql_tuple }}"
    "{% if not loop.last %},\n{% endif %}{% endfor %}\n"
    + TERMINATOR + "\n"
)


def escape_sql(s) -> str:
    """Quote a value as a SQL string literal"""
    return "'" + str(s).replace("'", "''") + "'"


def format_score(value: float) -> str:
    """
    Shortest round-trip text of a non-negative float in JavaScript number style

    Integral values drop the fraction (2.0 -> "2"), exponent notation is
    used only below 1e-6 and without zero padding (1.5e-07 -> "1.5e-7").
    """
    if value.is_integer():
        return str(int(value))
    text = repr(value)
    if "e" not in text:
        return text
    mantissa, exp = text.split("e")
    exp = int(exp)
    if exp < -6:
        return f"{mantissa}e{exp}"
    return "0." + "0" * (-exp - 1) + mantissa.replace(".", "")


def format_row(row: StudentRow) -> str:
    """Render a row as ('<id>','<name>',<age>,'<sex>',<score>)"""
    return "(" + ",".join([
        escape_sql(row.id),
        escape_sql(row.name),
        str(row.age),
        escape_sql(row.sex),
        format_score(row.score),
    ]) + ")"


_env = Environment(keep_trailing_newline=True, autoescape=False)
_env.filters["sql_tuple"] = format_row
_template = _env.from_string(STATEMENT_TEMPLATE)


def iter_statement(rows: Iterable[StudentRow]) -> Iterator[str]:
    """Yield the INSERT statement in chunks, consuming rows lazily."""
    return _template.generate(rows=rows)


def render_statement(rows: Iterable[StudentRow]) -> str:
    return "".join(iter_statement(rows))


def write_statement(rows: Iterable[StudentRow], out: TextIO) -> int:
    """
    Stream the INSERT statement for `rows` to `out`

    Args:
        rows: Rows to emit, in order
        out: Writable text stream

    Returns:
        Number of rows written
    """
    written = 0

    def counted():
        nonlocal written
        for row in rows:
            written += 1
            yield row

    for chunk in iter_statement(counted()):
        out.write(chunk)
    out.flush()
    logger.info("Wrote INSERT statement with %d rows", written)
    return written
