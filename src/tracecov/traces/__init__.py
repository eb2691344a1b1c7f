from tracecov.traces.discover import (
    DEFAULT_SOURCE_SUFFIX,
    MALLOC_TRACE_SUFFIX,
    find_malloc_files,
    find_trace_files,
    is_malloc_file,
    is_trace_file,
    match_trace_file,
)
from tracecov.traces.merge import merge_all, merge_coverage_counts, merge_line_counts
from tracecov.traces.parse import parse_trace_file, parse_trace_lines, parse_trace_record

__all__ = [
    "DEFAULT_SOURCE_SUFFIX",
    "MALLOC_TRACE_SUFFIX",
    "find_malloc_files",
    "find_trace_files",
    "is_malloc_file",
    "is_trace_file",
    "match_trace_file",
    "merge_all",
    "merge_coverage_counts",
    "merge_line_counts",
    "parse_trace_file",
    "parse_trace_lines",
    "parse_trace_record",
]
