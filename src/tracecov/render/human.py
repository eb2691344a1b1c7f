from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING

from more_itertools import consecutive_groups
from rich import box
from rich.console import Console
from rich.table import Table

from tracecov.engine.summary import get_summary
from tracecov.files import display_path
from tracecov.model.types import ExecutionCount

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from pathlib import Path

    from tracecov.model.records import FileCoverage
    from tracecov.model.types import LineRange


def _style_percent(pct: float | None, green: float, yellow: float) -> str:
    if pct is None:
        return "n/a"
    v = round(pct)
    if v >= green:
        return f"[green]{v}%[/green]"
    if v >= yellow:
        return f"[yellow]{v}%[/yellow]"
    return f"[red]{v}%[/red]"


def _style_miss(n: int) -> str:
    return f"[red]{n}[/red]" if n else f"[green]{n}[/green]"


def missed_ranges(fc: FileCoverage) -> list[LineRange]:
    """Return inclusive ranges of executable lines that never ran."""
    missed = [
        lineno
        for lineno, count in enumerate(fc.coverage, start=1)
        if isinstance(count, ExecutionCount) and count.hits == 0
    ]
    ranges: list[LineRange] = []
    for group in consecutive_groups(missed):
        lines = list(group)
        ranges.append((lines[0], lines[-1]))
    return ranges


def format_ranges(ranges: Sequence[LineRange]) -> str:
    return ", ".join(str(a) if a == b else f"{a}-{b}" for a, b in ranges)


def render_human(
    fcs: Iterable[FileCoverage],
    *,
    color: bool = True,
    base: Path | None = None,
    green: float = 90.0,
    yellow: float = 75.0,
) -> str:
    """Render a Rich coverage table with one row per file and a totals row."""
    fcs = list(fcs)
    table = Table(title="Coverage Report", box=box.SIMPLE_HEAVY, header_style="bold", expand=True)

    table.add_column("File", overflow="fold")
    table.add_column("Lines", justify="right")
    table.add_column("Hit", justify="right")
    table.add_column("Miss", justify="right")
    table.add_column("Cov.", justify="right")
    table.add_column("Missed lines", overflow="fold")

    for fc in fcs:
        s = get_summary(fc)
        table.add_row(
            display_path(fc.filename, base),
            str(s.total),
            str(s.covered),
            _style_miss(s.missed),
            _style_percent(s.percent, green, yellow),
            format_ranges(missed_ranges(fc)),
        )

    table.add_section()

    t = get_summary(fcs)
    table.add_row(
        "[bold]Overall[/bold]",
        f"[bold]{t.total}[/bold]",
        f"[bold]{t.covered}[/bold]",
        f"[bold]{t.missed}[/bold]",
        f"[bold]{_style_percent(t.percent, green, yellow)}[/bold]",
        "",
    )

    buf = StringIO()
    console = Console(file=buf, force_terminal=color, no_color=not color, width=120)
    console.print()
    console.print(table)
    console.print()
    return buf.getvalue().rstrip()


__all__ = ["format_ranges", "missed_ranges", "render_human"]
