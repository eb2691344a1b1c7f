"""Parsing of fixed-width trace files.

Every line of a trace file describes the source line with the same number.
Columns 1-9 hold the count field: a ``-`` in column 9 marks a line that
cannot be executed, otherwise the field is a right-aligned non-negative
integer. Anything after column 9 is ignored.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from tracecov.errors import MalformedTraceRecordError
from tracecov.model.types import NOT_APPLICABLE, ExecutionCount

if TYPE_CHECKING:
    from pathlib import Path

    from tracecov.model.types import CoverageVector, LineCount

FIELD_WIDTH = 9
NA_MARKER = "-"

_COUNT_RE = re.compile(r"\s*[0-9]+\s*")


def parse_trace_record(line: str, *, path: Path | None = None, lineno: int | None = None) -> LineCount:
    """Parse the count field at the start of one trace record."""
    field = line[:FIELD_WIDTH]
    if len(field) < FIELD_WIDTH:
        raise MalformedTraceRecordError(line, path=path, lineno=lineno)
    if field[-1] == NA_MARKER:
        return NOT_APPLICABLE
    if not _COUNT_RE.fullmatch(field):
        raise MalformedTraceRecordError(line, path=path, lineno=lineno)
    return ExecutionCount(int(field))


def parse_trace_lines(lines: list[str], *, path: Path | None = None) -> CoverageVector:
    return tuple(parse_trace_record(line, path=path, lineno=i) for i, line in enumerate(lines, start=1))


def parse_trace_file(path: Path) -> CoverageVector:
    """Return the coverage vector recorded in the trace file at *path*."""
    # The tail of each record may echo arbitrary source text; only the count field matters.
    text = path.read_text(encoding="utf-8", errors="replace")
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return parse_trace_lines(lines, path=path)


__all__ = [
    "FIELD_WIDTH",
    "NA_MARKER",
    "parse_trace_file",
    "parse_trace_lines",
    "parse_trace_record",
]
