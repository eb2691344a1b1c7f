from __future__ import annotations

from pathlib import Path

from tracecov._meta import logger
from tracecov.traces.discover import DEFAULT_SOURCE_SUFFIX, find_trace_files, is_trace_file


def _remove(path: Path, *, dry_run: bool) -> None:
    if dry_run:
        logger.info("would remove %s", path)
        return
    logger.info("removing %s", path)
    path.unlink()


def clean_folder(
    folder: str | Path,
    *,
    suffix: str = DEFAULT_SOURCE_SUFFIX,
    dry_run: bool = False,
) -> list[Path]:
    """Delete every trace file in *folder* and its subfolders.

    Unlike :func:`~tracecov.engine.reconcile.process_folder` there is no
    default folder, so callers always name what gets deleted. Returns the
    removed paths.
    """
    removed: list[Path] = []
    for entry in sorted(Path(folder).iterdir()):
        if entry.is_file() and is_trace_file(entry.name, suffix):
            _remove(entry, dry_run=dry_run)
            removed.append(entry)
        elif entry.is_dir():
            removed.extend(clean_folder(entry, suffix=suffix, dry_run=dry_run))
    return removed


def clean_file(filename: str | Path, *, dry_run: bool = False) -> list[Path]:
    """Delete the trace files of one source file.

    Only siblings of *filename* are considered.
    """
    path = Path(filename)
    removed: list[Path] = []
    for trace in find_trace_files(path, path.parent):
        _remove(trace.path, dry_run=dry_run)
        removed.append(trace.path)
    return removed


__all__ = ["clean_file", "clean_folder"]
