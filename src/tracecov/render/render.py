from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from tracecov.render.human import render_human
from tracecov.render.json import render_json
from tracecov.render.lcov import render_lcov

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from tracecov.model.records import FileCoverage


class OutputFormat(StrEnum):
    """Supported output formats."""

    HUMAN = "human"
    JSON = "json"
    LCOV = "lcov"


FORMATS: tuple[str, ...] = tuple(f.value for f in OutputFormat)


@dataclass(frozen=True, slots=True)
class RenderOptions:
    """Options that affect presentation only."""

    color: bool = True
    base: Path | None = None


def render(fcs: Iterable[FileCoverage], *, fmt: str, options: RenderOptions | None = None) -> str:
    """Render coverage records to text in one of :data:`FORMATS`."""
    options = options or RenderOptions()
    f = (fmt or "").strip().lower()

    if f == OutputFormat.HUMAN:
        return render_human(fcs, color=options.color, base=options.base)
    if f == OutputFormat.JSON:
        return render_json(fcs, base=options.base)
    if f == OutputFormat.LCOV:
        return render_lcov(fcs, base=options.base)
    msg = f"Unsupported format: {fmt!r}. Expected one of: {', '.join(FORMATS)}."
    raise ValueError(msg)


__all__ = ["FORMATS", "OutputFormat", "RenderOptions", "render"]
