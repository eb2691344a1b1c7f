from tracecov.model.records import CoverageSummary, FileCoverage, MallocInfo, TraceFile
from tracecov.model.types import (
    NOT_APPLICABLE,
    CoverageVector,
    ExecutionCount,
    LineCount,
    LineRange,
    NotApplicable,
    is_covered,
    is_executable,
    not_applicable_vector,
)

__all__ = [
    "NOT_APPLICABLE",
    "CoverageSummary",
    "CoverageVector",
    "ExecutionCount",
    "FileCoverage",
    "LineCount",
    "LineRange",
    "MallocInfo",
    "NotApplicable",
    "TraceFile",
    "is_covered",
    "is_executable",
    "not_applicable_vector",
]
