from tracecov._meta import __version__, logger
from tracecov.engine import (
    amend_coverage_from_src,
    analyze_malloc,
    clean_file,
    clean_folder,
    get_summary,
    merge_file_coverage,
    merge_reports,
    process_cov,
    process_file,
    process_folder,
)
from tracecov.errors import (
    ConfigError,
    MalformedTraceRecordError,
    StaleCoverageDataError,
    TraceDataError,
    TracecovError,
    UnparsableSourceError,
)
from tracecov.model import (
    NOT_APPLICABLE,
    CoverageSummary,
    CoverageVector,
    ExecutionCount,
    FileCoverage,
    LineCount,
    MallocInfo,
    NotApplicable,
    TraceFile,
)
from tracecov.render import render_json, render_lcov, write_lcov
from tracecov.source import PythonSourceClassifier, SourceAnalyzer, StaticLineOracle
from tracecov.traces import (
    find_malloc_files,
    find_trace_files,
    is_trace_file,
    merge_coverage_counts,
    parse_trace_file,
)

__all__ = [
    "NOT_APPLICABLE",
    "ConfigError",
    "CoverageSummary",
    "CoverageVector",
    "ExecutionCount",
    "FileCoverage",
    "LineCount",
    "MalformedTraceRecordError",
    "MallocInfo",
    "NotApplicable",
    "PythonSourceClassifier",
    "SourceAnalyzer",
    "StaleCoverageDataError",
    "StaticLineOracle",
    "TraceDataError",
    "TraceFile",
    "TracecovError",
    "UnparsableSourceError",
    "__version__",
    "amend_coverage_from_src",
    "analyze_malloc",
    "clean_file",
    "clean_folder",
    "find_malloc_files",
    "find_trace_files",
    "get_summary",
    "is_trace_file",
    "logger",
    "merge_coverage_counts",
    "merge_file_coverage",
    "merge_reports",
    "parse_trace_file",
    "process_cov",
    "process_file",
    "process_folder",
    "render_json",
    "render_lcov",
    "write_lcov",
]
