from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

import pytest
from click.testing import CliRunner

TraceSpec = Sequence[int | None]


def format_trace(counts: TraceSpec, source_lines: Sequence[str] = ()) -> str:
    """Return trace-file text: a 9-wide count field (``-`` for n/a) then the source line."""
    out: list[str] = []
    for i, count in enumerate(counts):
        field = f"{'-' if count is None else count:>9}"
        code = source_lines[i] if i < len(source_lines) else ""
        out.append(f"{field} {code}")
    return "".join(f"{line}\n" for line in out)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Click CLI runner for invoking the command-line interface."""
    return CliRunner()


@pytest.fixture
def write_source(tmp_path: Path) -> Callable[..., Path]:
    def write(name: str, text: str, *, folder: Path | None = None) -> Path:
        path = (folder or tmp_path) / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return write


@pytest.fixture
def write_trace(tmp_path: Path) -> Callable[..., Path]:
    def write(name: str, counts: TraceSpec, *, folder: Path | None = None, source: str = "") -> Path:
        path = (folder or tmp_path) / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(format_trace(counts, source.splitlines()), encoding="utf-8")
        return path

    return write
