"""LCOV tracefile output.

Each file becomes one record::

    SF:<path>
    DA:<line>,<hits>
    LH:<lines hit>
    LF:<lines found>
    end_of_record
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tracecov.engine.summary import get_summary
from tracecov.files import display_path
from tracecov.model.types import ExecutionCount

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from tracecov.model.records import FileCoverage


def _lcov_record(fc: FileCoverage, base: Path | None) -> list[str]:
    out = [f"SF:{display_path(fc.filename, base)}"]
    out.extend(
        f"DA:{lineno},{count.hits}"
        for lineno, count in enumerate(fc.coverage, start=1)
        if isinstance(count, ExecutionCount)
    )
    summary = get_summary(fc)
    out.extend([f"LH:{summary.covered}", f"LF:{summary.total}", "end_of_record"])
    return out


def render_lcov(fcs: Iterable[FileCoverage], *, base: Path | None = None) -> str:
    lines: list[str] = []
    for fc in fcs:
        lines.extend(_lcov_record(fc, base))
    return "\n".join(lines) + "\n" if lines else ""


def write_lcov(destination: Path, fcs: Iterable[FileCoverage], *, base: Path | None = None) -> None:
    """Write an LCOV tracefile for *fcs* to *destination*."""
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(render_lcov(fcs, base=base), encoding="utf-8")


__all__ = ["render_lcov", "write_lcov"]
