"""Shared line-count types and aliases used across tracecov."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

# ---------------------------------------------------------------------------
# Line counts
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class NotApplicable:
    """A line for which an execution count is meaningless (blank, comment, declaration)."""

    def __repr__(self) -> str:
        return "NotApplicable"


@dataclass(frozen=True, slots=True, order=True)
class ExecutionCount:
    """An instrumented line that ran ``hits`` times (``0`` means coverable but missed)."""

    hits: int

    def __post_init__(self) -> None:
        if self.hits < 0:
            msg = f"execution count must be non-negative, got {self.hits}"
            raise ValueError(msg)


NOT_APPLICABLE = NotApplicable()

LineCount: TypeAlias = NotApplicable | ExecutionCount
"""Either :class:`NotApplicable` or an :class:`ExecutionCount`."""

CoverageVector: TypeAlias = tuple[LineCount, ...]
"""One :data:`LineCount` per source line; index ``0`` holds line ``1``."""

LineRange: TypeAlias = tuple[int, int]
"""Inclusive ``(start, end)`` pair of line numbers."""


def is_executable(count: LineCount) -> bool:
    return isinstance(count, ExecutionCount)


def is_covered(count: LineCount) -> bool:
    return isinstance(count, ExecutionCount) and count.hits > 0


def not_applicable_vector(length: int) -> CoverageVector:
    """Return a vector of ``length`` not-applicable entries."""
    return (NOT_APPLICABLE,) * length


__all__ = [
    "NOT_APPLICABLE",
    "CoverageVector",
    "ExecutionCount",
    "LineCount",
    "LineRange",
    "NotApplicable",
    "is_covered",
    "is_executable",
    "not_applicable_vector",
]
