from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from tracecov.model.types import CoverageVector

FULL_COVERAGE = 100


@dataclass(frozen=True, slots=True)
class FileCoverage:
    """Coverage of one source file.

    ``coverage`` holds one entry per line of ``source`` once reconciliation
    has finished.
    """

    filename: Path
    source: str
    coverage: CoverageVector


@dataclass(frozen=True, slots=True)
class TraceFile:
    """A trace file found on disk for ``source_filename``."""

    path: Path
    source_filename: str
    pid: int | None = None


@dataclass(frozen=True, slots=True)
class CoverageSummary:
    covered: int = 0
    total: int = 0

    @property
    def missed(self) -> int:
        return self.total - self.covered

    @property
    def percent(self) -> float | None:
        if not self.total:
            return None
        return FULL_COVERAGE * self.covered / self.total

    def __add__(self, other: CoverageSummary) -> CoverageSummary:
        return CoverageSummary(covered=self.covered + other.covered, total=self.total + other.total)


@dataclass(frozen=True, slots=True)
class MallocInfo:
    """Bytes allocated by one source line, as recorded in the allocation trace at ``filename``."""

    bytes: int
    filename: Path
    line: int


__all__ = ["FULL_COVERAGE", "CoverageSummary", "FileCoverage", "MallocInfo", "TraceFile"]
