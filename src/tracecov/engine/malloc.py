"""Summaries of per-line memory allocation traces.

Allocation traces share the fixed-width layout of coverage traces, except
that the count field holds the number of bytes a line allocated.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from tracecov._meta import logger
from tracecov.model.records import MallocInfo
from tracecov.model.types import ExecutionCount
from tracecov.traces.discover import find_malloc_files
from tracecov.traces.parse import parse_trace_file

if TYPE_CHECKING:
    from collections.abc import Iterable


def analyze_malloc_files(files: Iterable[str | Path]) -> list[MallocInfo]:
    """Return one :class:`MallocInfo` per recorded line of *files*, sorted by bytes ascending."""
    infos: list[MallocInfo] = []
    for file in files:
        path = Path(file)
        for line, count in enumerate(parse_trace_file(path), start=1):
            if isinstance(count, ExecutionCount):
                infos.append(MallocInfo(bytes=count.hits, filename=path, line=line))
    return sorted(infos, key=lambda info: info.bytes)


def analyze_malloc(folders: str | Path | Iterable[str | Path]) -> list[MallocInfo]:
    """Collect allocation records from every ``.mem`` file under *folders*.

    The largest allocations come last.
    """
    if isinstance(folders, (str, Path)):
        folders = [folders]
    files = find_malloc_files(folders)
    logger.info("analyzing %d allocation trace file(s)", len(files))
    return analyze_malloc_files(files)


__all__ = ["analyze_malloc", "analyze_malloc_files"]
