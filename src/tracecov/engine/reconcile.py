"""Reconcile raw trace files with the current source text.

The pipeline for one source file is: discover its trace files, parse and
merge them, fall back to an all not-applicable vector when there are none,
then promote executable lines the runtime did not record to a count of
zero.
"""

from __future__ import annotations

import errno
import os
from pathlib import Path
from typing import TYPE_CHECKING

from tracecov._meta import logger
from tracecov.errors import StaleCoverageDataError, TraceDataError
from tracecov.files import count_lines, read_source
from tracecov.model.records import FileCoverage
from tracecov.model.types import ExecutionCount, NotApplicable, not_applicable_vector
from tracecov.source.classify import PythonSourceClassifier
from tracecov.traces.discover import DEFAULT_SOURCE_SUFFIX, find_trace_files
from tracecov.traces.merge import merge_all
from tracecov.traces.parse import parse_trace_file

if TYPE_CHECKING:
    from tracecov.model.types import CoverageVector
    from tracecov.source.classify import SourceAnalyzer


def process_cov(filename: str | Path, folder: str | Path) -> CoverageVector:
    """Return the merged coverage vector of all trace files for *filename* in *folder*.

    When no trace file exists the source is assumed never to have run and
    every line is reported as not applicable.
    """
    traces = find_trace_files(filename, folder)
    if not traces:
        logger.info("trace file(s) for %s do not exist; assuming file has no coverage", filename)
        return not_applicable_vector(count_lines(read_source(Path(filename))))
    return merge_all(parse_trace_file(trace.path) for trace in traces)


def amend_coverage_from_src(
    coverage: CoverageVector,
    source: str,
    analyzer: SourceAnalyzer | None = None,
    *,
    filename: str | Path | None = None,
) -> CoverageVector:
    """Promote not-applicable entries on executable lines to a count of zero.

    Raises :class:`StaleCoverageDataError` before touching anything if an
    executable line lies past the end of *coverage*.
    """
    analyzer = analyzer or PythonSourceClassifier()
    label = str(filename) if filename is not None else "<unknown>"
    lines = sorted(ln for ln in analyzer.executable_lines(source, label) if ln >= 1)
    if lines and lines[-1] > len(coverage):
        raise StaleCoverageDataError(lines[-1], len(coverage), filename=filename)

    amended = list(coverage)
    for ln in lines:
        if isinstance(amended[ln - 1], NotApplicable):
            amended[ln - 1] = ExecutionCount(0)
    return tuple(amended)


def align_to_source(
    coverage: CoverageVector,
    n_lines: int,
    *,
    filename: str | Path | None = None,
) -> CoverageVector:
    """Return *coverage* with exactly *n_lines* entries.

    Missing entries are padded as not applicable. Surplus entries may only
    be not applicable; a recorded execution past the end of the source means
    the trace is stale.
    """
    if len(coverage) <= n_lines:
        return coverage + not_applicable_vector(n_lines - len(coverage))

    for offset, count in enumerate(coverage[n_lines:], start=1):
        if isinstance(count, ExecutionCount):
            raise StaleCoverageDataError(n_lines + offset, n_lines, filename=filename)
    logger.debug("%s: dropping %d surplus trace entries", filename, len(coverage) - n_lines)
    return coverage[:n_lines]


def process_file(
    filename: str | Path,
    folder: str | Path | None = None,
    *,
    analyzer: SourceAnalyzer | None = None,
) -> FileCoverage:
    """Build the :class:`FileCoverage` of one source file.

    Trace files are looked up in *folder*, which defaults to the directory
    containing *filename*.
    """
    path = Path(filename)
    folder = path.parent if folder is None else Path(folder)
    logger.info("detecting coverage for %s", path)

    source = read_source(path)
    coverage = process_cov(path, folder)
    coverage = amend_coverage_from_src(coverage, source, analyzer, filename=path)
    coverage = align_to_source(coverage, count_lines(source), filename=path)
    return FileCoverage(filename=path, source=source, coverage=coverage)


def process_folder(
    folder: str | Path = "src",
    *,
    suffix: str = DEFAULT_SOURCE_SUFFIX,
    analyzer: SourceAnalyzer | None = None,
    skip_errors: bool = False,
) -> list[FileCoverage]:
    """Collect coverage for every *suffix* file under *folder*, recursing into subfolders.

    With *skip_errors* a file whose trace data is unusable is logged and left
    out instead of aborting the whole run.
    """
    folder = Path(folder)
    if not folder.is_dir():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(folder))
    logger.info("searching %s for %s files", folder, suffix)

    analyzer = analyzer or PythonSourceClassifier()
    results: list[FileCoverage] = []
    for entry in sorted(folder.iterdir()):
        if entry.is_dir():
            results.extend(process_folder(entry, suffix=suffix, analyzer=analyzer, skip_errors=skip_errors))
        elif entry.is_file() and entry.name.endswith(suffix):
            try:
                results.append(process_file(entry, folder, analyzer=analyzer))
            except TraceDataError as exc:
                if not skip_errors:
                    raise
                logger.warning("skipping %s: %s", entry, exc)
        else:
            logger.debug("skipping %s, not a %s file", entry.name, suffix)
    return results


__all__ = [
    "align_to_source",
    "amend_coverage_from_src",
    "process_cov",
    "process_file",
    "process_folder",
]
