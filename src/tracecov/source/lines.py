from __future__ import annotations

from bisect import bisect_right


class LineIndex:
    """Map character offsets in a text to 1-based line numbers.

    The table is computed from the raw text only, so it stays valid however
    the text is later sliced up for parsing.
    """

    __slots__ = ("_starts", "_length")

    def __init__(self, text: str) -> None:
        starts = [0]
        pos = text.find("\n")
        while pos != -1:
            starts.append(pos + 1)
            pos = text.find("\n", pos + 1)
        if starts[-1] == len(text) and len(starts) > 1:
            # a trailing newline does not open another line
            starts.pop()
        self._starts = starts
        self._length = len(text)

    def __len__(self) -> int:
        return len(self._starts) if self._length else 0

    def line_of(self, offset: int) -> int:
        """Return the line containing character *offset*."""
        if not 0 <= offset <= self._length:
            msg = f"offset {offset} outside text of length {self._length}"
            raise IndexError(msg)
        return bisect_right(self._starts, offset)

    def offset_of(self, line: int) -> int:
        """Return the offset at which *line* starts."""
        if not 1 <= line <= len(self._starts):
            msg = f"line {line} outside 1..{len(self._starts)}"
            raise IndexError(msg)
        return self._starts[line - 1]


__all__ = ["LineIndex"]
