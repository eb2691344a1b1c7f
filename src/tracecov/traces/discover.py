from __future__ import annotations

import re
from pathlib import Path
from typing import TYPE_CHECKING

from tracecov._meta import logger
from tracecov.model.records import TraceFile

if TYPE_CHECKING:
    from collections.abc import Iterable

DEFAULT_SOURCE_SUFFIX = ".py"
MALLOC_TRACE_SUFFIX = ".mem"

# Remainder after the source file name: optional ".<pid>" then ".cov".
_TRACE_TAIL_RE = re.compile(r"(?:\.(?P<pid>[0-9]+))?\.cov")


def _trace_name_re(suffix: str) -> re.Pattern[str]:
    return re.compile(re.escape(suffix) + r"(?:\.[0-9]+)?\.cov$")


def is_trace_file(name: str, suffix: str = DEFAULT_SOURCE_SUFFIX) -> bool:
    """Return ``True`` if *name* looks like a trace file for any ``suffix`` source."""
    return _trace_name_re(suffix).search(name) is not None


def match_trace_file(name: str, source_name: str) -> TraceFile | None:
    """Return a :class:`TraceFile` if *name* is a trace file of *source_name*.

    Both arguments are bare file names; the returned ``path`` is ``name``
    and callers anchor it to a folder.
    """
    if not name.startswith(source_name):
        return None
    m = _TRACE_TAIL_RE.fullmatch(name[len(source_name) :])
    if m is None:
        return None
    pid = m.group("pid")
    return TraceFile(path=Path(name), source_filename=source_name, pid=int(pid) if pid else None)


def find_trace_files(filename: str | Path, folder: str | Path) -> list[TraceFile]:
    """Return the trace files in *folder* that belong to source *filename*.

    Only direct children of *folder* are considered; the result is sorted by
    path so that callers see a stable order.
    """
    source_name = Path(filename).name
    folder = Path(folder)
    found: list[TraceFile] = []
    for entry in sorted(folder.iterdir()):
        if not entry.is_file():
            continue
        trace = match_trace_file(entry.name, source_name)
        if trace is not None:
            found.append(TraceFile(path=entry, source_filename=str(filename), pid=trace.pid))
    logger.debug("found %d trace file(s) for %s in %s", len(found), source_name, folder)
    return found


def is_malloc_file(name: str) -> bool:
    """Return ``True`` if *name* is a per-line allocation trace (``*.mem``)."""
    return name.endswith(MALLOC_TRACE_SUFFIX)


def find_malloc_files(folders: Iterable[str | Path]) -> list[Path]:
    """Return the allocation trace files under each of *folders*, recursing into subfolders."""
    found: list[Path] = []
    for folder in folders:
        for entry in sorted(Path(folder).iterdir()):
            if entry.is_dir():
                found.extend(find_malloc_files([entry]))
            elif entry.is_file() and is_malloc_file(entry.name):
                found.append(entry)
    return found


__all__ = [
    "DEFAULT_SOURCE_SUFFIX",
    "MALLOC_TRACE_SUFFIX",
    "find_malloc_files",
    "find_trace_files",
    "is_malloc_file",
    "is_trace_file",
    "match_trace_file",
]
