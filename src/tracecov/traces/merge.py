from __future__ import annotations

from functools import reduce
from itertools import zip_longest
from typing import TYPE_CHECKING

from tracecov.model.types import NOT_APPLICABLE, ExecutionCount, NotApplicable

if TYPE_CHECKING:
    from collections.abc import Iterable

    from tracecov.model.types import CoverageVector, LineCount


def merge_line_counts(a: LineCount, b: LineCount) -> LineCount:
    """Combine two counts for the same line; not-applicable is the identity."""
    if isinstance(a, NotApplicable):
        return b
    if isinstance(b, NotApplicable):
        return a
    return ExecutionCount(max(a.hits, b.hits))


def merge_coverage_counts(a: CoverageVector, b: CoverageVector) -> CoverageVector:
    """Take the pairwise maximum of two coverage vectors.

    The shorter vector is treated as not-applicable past its end, so the
    result is as long as the longer input.
    """
    return tuple(merge_line_counts(x, y) for x, y in zip_longest(a, b, fillvalue=NOT_APPLICABLE))


def merge_all(vectors: Iterable[CoverageVector]) -> CoverageVector:
    """Fold any number of vectors, in any order, into one."""
    return reduce(merge_coverage_counts, vectors, ())


__all__ = ["merge_all", "merge_coverage_counts", "merge_line_counts"]
