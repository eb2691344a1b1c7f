from tracecov.engine.clean import clean_file, clean_folder
from tracecov.engine.malloc import analyze_malloc, analyze_malloc_files
from tracecov.engine.reconcile import (
    align_to_source,
    amend_coverage_from_src,
    process_cov,
    process_file,
    process_folder,
)
from tracecov.engine.summary import get_summary, merge_file_coverage, merge_reports

__all__ = [
    "align_to_source",
    "analyze_malloc",
    "analyze_malloc_files",
    "amend_coverage_from_src",
    "clean_file",
    "clean_folder",
    "get_summary",
    "merge_file_coverage",
    "merge_reports",
    "process_cov",
    "process_file",
    "process_folder",
]
