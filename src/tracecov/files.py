"""Common file and text utilities for tracecov."""

from __future__ import annotations

import tokenize
from typing import TYPE_CHECKING

from tracecov.errors import UnparsableSourceError

if TYPE_CHECKING:
    from pathlib import Path


def read_source(path: Path) -> str:
    """Return the text of *path* decoded the way Python decodes source files.

    The encoding comes from a byte-order mark or a ``coding`` declaration and
    defaults to UTF-8. Newlines are kept exactly as stored so that line
    numbers computed from the text agree with the line numbers the runtime
    recorded.
    """
    try:
        with path.open("rb") as f:
            encoding, _ = tokenize.detect_encoding(f.readline)
        with path.open(encoding=encoding, newline="") as f:
            return f.read()
    except (SyntaxError, UnicodeDecodeError) as exc:
        msg = f"cannot decode source: {exc}"
        raise UnparsableSourceError(msg, filename=path) from exc


def count_lines(text: str) -> int:
    """Return the number of lines in *text*.

    A final line without a terminating newline still counts; an empty text
    has no lines.
    """
    if not text:
        return 0
    n = text.count("\n")
    return n if text.endswith("\n") else n + 1


def display_path(path: Path, base: Path | None = None) -> str:
    """Return *path* as a posix string relative to *base* when it lies inside it."""
    if base is not None:
        try:
            return path.resolve().relative_to(base.resolve()).as_posix()
        except ValueError:
            pass
    return path.as_posix()


__all__ = ["count_lines", "display_path", "read_source"]
