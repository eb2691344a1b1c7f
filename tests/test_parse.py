from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tracecov.errors import MalformedTraceRecordError
from tracecov.model.types import NOT_APPLICABLE, ExecutionCount
from tracecov.traces.parse import parse_trace_file, parse_trace_lines, parse_trace_record

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("        - def f():", NOT_APPLICABLE),
        ("        -", NOT_APPLICABLE),
        ("        3     a()", ExecutionCount(3)),
        ("        0     b()", ExecutionCount(0)),
        ("123456789 x = 1", ExecutionCount(123456789)),
        ("   12    ", ExecutionCount(12)),
    ],
)
def test_parse_trace_record(line: str, expected: object) -> None:
    assert parse_trace_record(line) == expected


@pytest.mark.parametrize(
    "line",
    [
        "   12ab- rest of the line",
        "       -5 x",
        "    1 2   ",
        "         ",
        "abc",
        "",
    ],
)
def test_parse_trace_record_rejects_malformed_field(line: str) -> None:
    with pytest.raises(MalformedTraceRecordError):
        parse_trace_record(line)


def test_dash_in_last_column_wins_over_digits() -> None:
    assert parse_trace_record("   12ab--") == NOT_APPLICABLE


def test_malformed_record_reports_location(tmp_path: Path) -> None:
    trace = tmp_path / "mod.py.cov"
    trace.write_text("        - def f():\n   12ab- rest\n", encoding="utf-8")

    with pytest.raises(MalformedTraceRecordError) as excinfo:
        parse_trace_file(trace)

    assert excinfo.value.path == trace
    assert excinfo.value.lineno == 2
    assert "mod.py.cov:2" in str(excinfo.value)


def test_parse_trace_file_ignores_text_after_field(write_trace: Callable[..., Path]) -> None:
    source = "def f():\n    return 1\n\n# 42 is not a count\n"
    trace = write_trace("mod.py.cov", [None, 7, None, None], source=source)

    assert parse_trace_file(trace) == (NOT_APPLICABLE, ExecutionCount(7), NOT_APPLICABLE, NOT_APPLICABLE)


def test_parse_trace_file_keeps_one_entry_per_line(tmp_path: Path) -> None:
    trace = tmp_path / "mod.py.cov"
    # form feed and unicode line separators in the echoed source must not split records
    trace.write_text("        1 x = '\f'\n        - y = '\u2028'\n        2", encoding="utf-8")

    assert parse_trace_file(trace) == (ExecutionCount(1), NOT_APPLICABLE, ExecutionCount(2))


def test_parse_empty_trace_file(tmp_path: Path) -> None:
    trace = tmp_path / "mod.py.cov"
    trace.write_text("", encoding="utf-8")
    assert parse_trace_file(trace) == ()


def test_parse_trace_lines_numbers_records_from_one() -> None:
    with pytest.raises(MalformedTraceRecordError) as excinfo:
        parse_trace_lines(["        1", "        -", "bad"])
    assert excinfo.value.lineno == 3
