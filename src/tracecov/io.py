from __future__ import annotations

import sys
from pathlib import Path

import click.utils as click_utils


def write_output(text: str, destination: Path | None) -> None:
    """Write output to stdout or a file (PATH or '-' for stdout)."""
    if destination is None or destination == Path("-"):
        print(text)
        return
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(text, encoding="utf-8")


def color_allowed(output: Path | None) -> bool:
    """Return whether ANSI color suits the destination by default."""
    if output not in {None, Path("-")}:
        return False
    stdout = sys.stdout
    try:
        is_tty = bool(getattr(stdout, "isatty", lambda: False)())
    except OSError:
        return False
    return is_tty and not click_utils.should_strip_ansi(stdout)


__all__ = ["color_allowed", "write_output"]
