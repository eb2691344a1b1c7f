"""Summaries and cross-shard merging of finished coverage records."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from tracecov.engine.reconcile import align_to_source
from tracecov.files import count_lines
from tracecov.model.records import CoverageSummary, FileCoverage
from tracecov.model.types import is_covered, is_executable
from tracecov.traces.merge import merge_coverage_counts

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path


def _summarize(fc: FileCoverage) -> CoverageSummary:
    return CoverageSummary(
        covered=sum(1 for c in fc.coverage if is_covered(c)),
        total=sum(1 for c in fc.coverage if is_executable(c)),
    )


def get_summary(fcs: FileCoverage | Iterable[FileCoverage]) -> CoverageSummary:
    """Return covered and total executable lines of one record or many."""
    if isinstance(fcs, FileCoverage):
        return _summarize(fcs)
    total = CoverageSummary()
    for fc in fcs:
        total += _summarize(fc)
    return total


def merge_file_coverage(a: FileCoverage, b: FileCoverage) -> FileCoverage:
    """Merge two records of the same file, e.g. produced by different CI shards."""
    if a.filename != b.filename:
        msg = f"cannot merge coverage of {a.filename} with coverage of {b.filename}"
        raise ValueError(msg)
    merged = merge_coverage_counts(a.coverage, b.coverage)
    return replace(a, coverage=align_to_source(merged, count_lines(a.source), filename=a.filename))


def merge_reports(*reports: Iterable[FileCoverage]) -> list[FileCoverage]:
    """Merge several lists of records by file name, keeping first-seen order."""
    by_name: dict[Path, FileCoverage] = {}
    for report in reports:
        for fc in report:
            seen = by_name.get(fc.filename)
            by_name[fc.filename] = fc if seen is None else merge_file_coverage(seen, fc)
    return list(by_name.values())


__all__ = ["get_summary", "merge_file_coverage", "merge_reports"]
