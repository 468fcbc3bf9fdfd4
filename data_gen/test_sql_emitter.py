"""Tests for INSERT statement rendering."""

import io
import random
import re

import pytest

from sql_emitter import (
    HEADER, TERMINATOR, escape_sql, format_row, format_score, iter_statement,
    render_statement, write_statement,
)
from student_rows import StudentRow, generate_rows

ROW_RE = re.compile(
    r"^\('(\d+)','([A-Za-z0-9]{8})',(\d+),'([MF])',(\d+(?:\.\d+)?(?:e-\d+)?)\)$"
)


def split_statement(sql: str):
    """Return (header, row lines, terminator) from a rendered statement."""
    lines = sql.split("\n")
    assert lines[-1] == ""
    return lines[0], lines[1:-2], lines[-2]


class TestFormatRow:
    def test_literal_layout(self):
        row = StudentRow(id=3, name="AbC12xyZ", age=17, sex="F", score=3.25)
        assert format_row(row) == "('3','AbC12xyZ',17,'F',3.25)"

    def test_score_keeps_full_precision(self):
        score = 0.1 + 0.2
        row = StudentRow(id=0, name="AAAAAAAA", age=0, sex="M", score=score)
        assert format_row(row).endswith(",0.30000000000000004)")

    def test_integral_score_has_no_fraction(self):
        row = StudentRow(id=0, name="AAAAAAAA", age=0, sex="M", score=0.0)
        assert format_row(row) == "('0','AAAAAAAA',0,'M',0)"

    @pytest.mark.parametrize("value,text", [
        (0.0, "0"),
        (2.0, "2"),
        (3.25, "3.25"),
        (0.0001, "0.0001"),
        (1e-05, "0.00001"),
        (9.5e-05, "0.000095"),
        (1e-06, "0.000001"),
        (1.5e-06, "0.0000015"),
        (1e-07, "1e-7"),
        (1.5e-07, "1.5e-7"),
        (2.5e-10, "2.5e-10"),
    ])
    def test_format_score_number_text(self, value, text):
        assert format_score(value) == text

    def test_escape_sql_doubles_quotes(self):
        assert escape_sql("O'Neil") == "'O''Neil'"
        assert escape_sql(5) == "'5'"


class TestRenderStatement:
    def test_zero_rows(self):
        assert render_statement([]) == "insert into student values\n\n;\n"

    def test_two_rows_structure(self):
        sql = render_statement(generate_rows(2, random.Random(4)))
        header, rows, terminator = split_statement(sql)
        assert header == HEADER
        assert terminator == TERMINATOR
        assert len(rows) == 2
        assert rows[0].endswith("),")
        assert rows[1].endswith(")")
        for i, line in enumerate(rows):
            m = ROW_RE.match(line.rstrip(","))
            assert m, line
            assert m.group(1) == str(i)
            assert 0 <= int(m.group(3)) <= 39
            assert 0.0 <= float(m.group(5)) < 5.0

    def test_no_trailing_comma_on_last_row(self):
        sql = render_statement(generate_rows(5, random.Random(8)))
        assert "),\n;" not in sql
        assert sql.endswith(")\n;\n")

    def test_row_count_matches(self):
        for n in (1, 3, 40):
            _, rows, _ = split_statement(render_statement(generate_rows(n, random.Random(n))))
            assert len(rows) == n

    def test_same_seed_same_statement(self):
        a = render_statement(generate_rows(20, random.Random(42)))
        b = render_statement(generate_rows(20, random.Random(42)))
        assert a == b


class TestStreaming:
    def test_iter_statement_consumes_rows_lazily(self):
        consumed = []

        def rows():
            for row in generate_rows(3, random.Random(0)):
                consumed.append(row.id)
                yield row

        chunks = iter_statement(rows())
        first = next(chunks)
        assert first.startswith(HEADER)
        assert len(consumed) < 3

    def test_write_statement_returns_row_count(self):
        out = io.StringIO()
        n = write_statement(generate_rows(7, random.Random(2)), out)
        assert n == 7
        _, rows, _ = split_statement(out.getvalue())
        assert len(rows) == 7

    def test_write_statement_zero_rows(self):
        out = io.StringIO()
        assert write_statement([], out) == 0
        assert out.getvalue() == "insert into student values\n\n;\n"
