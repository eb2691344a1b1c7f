"""Centralised exception hierarchy for tracecov."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class TracecovError(Exception):
    """Base class for all custom tracecov exceptions."""


class ConfigError(TracecovError):
    """The ``[tool.tracecov]`` configuration holds an invalid value."""


class TraceDataError(TracecovError):
    """Base class for errors that make the coverage of one source file unusable."""


class MalformedTraceRecordError(TraceDataError):
    """A trace record's count field is neither a dash marker nor a non-negative integer."""

    def __init__(self, record: str, *, path: Path | None = None, lineno: int | None = None) -> None:
        where = ""
        if path is not None:
            where = f"{path}:{lineno}: " if lineno is not None else f"{path}: "
        super().__init__(f"{where}malformed trace record {record[:9]!r}")
        self.record = record
        self.path = path
        self.lineno = lineno


class UnparsableSourceError(TraceDataError):
    """The static analyzer could not parse any part of a source file."""

    def __init__(self, msg: str, *, filename: Path | str | None = None) -> None:
        super().__init__(f"{filename}: {msg}" if filename is not None else msg)
        self.filename = filename


class StaleCoverageDataError(TraceDataError):
    """Trace data no longer lines up with the current source text."""

    def __init__(self, line: int, length: int, *, filename: Path | str | None = None) -> None:
        prefix = f"{filename}: " if filename is not None else ""
        super().__init__(
            f"{prefix}coverage data and source disagree at line {line} (only {length} lines available); "
            "the source might have changed since the trace files were written"
        )
        self.line = line
        self.length = length
        self.filename = filename


__all__ = [
    "ConfigError",
    "MalformedTraceRecordError",
    "StaleCoverageDataError",
    "TraceDataError",
    "TracecovError",
    "UnparsableSourceError",
]
