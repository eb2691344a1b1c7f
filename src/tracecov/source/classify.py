"""Static detection of executable source lines.

Some runtimes omit trace records for lines that sit inside a function body
but never ran. The analyzers in this module recover those lines from the
source text so they can be reported as missed instead of not applicable.
"""

from __future__ import annotations

import ast
import io
import re
import tokenize
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from tracecov._meta import logger
from tracecov.errors import UnparsableSourceError
from tracecov.source.lines import LineIndex

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence

# Non-indented lines that continue the preceding top-level statement.
_CONTINUATION_RE = re.compile(r"(?:else|elif|except|finally)\b|[)\]}]")

_LAYOUT_TOKENS = frozenset(
    {tokenize.NL, tokenize.COMMENT, tokenize.INDENT, tokenize.DEDENT, tokenize.ENDMARKER}
)


class SourceAnalyzer(Protocol):
    """Anything able to report the executable lines of a source text."""

    def executable_lines(self, source: str, filename: str = "<unknown>") -> frozenset[int]: ...


@dataclass(frozen=True, slots=True)
class StaticLineOracle:
    """Analyzer that reports a fixed set of line numbers whatever the source."""

    lines: frozenset[int]

    def __init__(self, lines: Iterable[int] = ()) -> None:
        object.__setattr__(self, "lines", frozenset(lines))

    def executable_lines(self, source: str, filename: str = "<unknown>") -> frozenset[int]:  # noqa: ARG002
        return self.lines


def _is_docstring(stmt: ast.stmt) -> bool:
    return (
        isinstance(stmt, ast.Expr)
        and isinstance(stmt.value, ast.Constant)
        and isinstance(stmt.value.value, str)
    )


class _BodyLineCollector(ast.NodeVisitor):
    """Collect the first line of every statement nested in a callable body."""

    def __init__(self) -> None:
        self.lines: set[int] = set()
        self._depth = 0

    def visit(self, node: ast.AST) -> None:
        if self._depth and isinstance(node, ast.stmt):
            self.lines.add(node.lineno)
        super().visit(node)

    def _visit_decorators(self, node: ast.FunctionDef | ast.AsyncFunctionDef | ast.ClassDef) -> None:
        for deco in node.decorator_list:
            if self._depth:
                self.lines.add(deco.lineno)
            self.visit(deco)

    def _visit_def(self, node: ast.FunctionDef | ast.AsyncFunctionDef) -> None:
        # decorators, defaults and annotations run where the def itself runs
        self._visit_decorators(node)
        self.visit(node.args)
        if node.returns is not None:
            self.visit(node.returns)

        body = node.body[1:] if node.body and _is_docstring(node.body[0]) else node.body
        self._depth += 1
        for stmt in body:
            self.visit(stmt)
        self._depth -= 1

    visit_FunctionDef = _visit_def
    visit_AsyncFunctionDef = _visit_def

    def visit_ClassDef(self, node: ast.ClassDef) -> None:
        self._visit_decorators(node)
        for child in (*node.bases, *node.keywords, *node.body):
            self.visit(child)

    def visit_Lambda(self, node: ast.Lambda) -> None:
        self.visit(node.args)
        self.lines.add(node.body.lineno)
        self._depth += 1
        self.visit(node.body)
        self._depth -= 1


def _executable_lines_of(tree: ast.AST) -> set[int]:
    collector = _BodyLineCollector()
    collector.visit(tree)
    return collector.lines


def _line_candidates(lines: Sequence[str], first: int = 1) -> Iterator[int]:
    for lineno in range(first, len(lines) + 1):
        line = lines[lineno - 1]
        if line.strip() and not line[0].isspace() and not line.startswith("#"):
            yield lineno


def _statement_candidates(lines: Sequence[str]) -> Iterator[int]:
    """Yield lines where a logical line starts in column 0.

    Past the point where tokenizing fails the non-indented lines are used
    instead.
    """
    last = 0
    at_line_start = True
    readline = io.StringIO("\n".join(lines)).readline
    try:
        for tok in tokenize.generate_tokens(readline):
            if tok.type == tokenize.NEWLINE:
                at_line_start = True
            elif tok.type in _LAYOUT_TOKENS or not at_line_start:
                continue
            else:
                at_line_start = False
                if tok.start[1] == 0:
                    last = tok.start[0]
                    yield last
    except (tokenize.TokenError, SyntaxError) as exc:
        logger.debug("tokenizing stopped after line %d (%s)", last, exc)
        yield from _line_candidates(lines, last + 1)


def top_level_starts(lines: Sequence[str]) -> list[int]:
    """Return the 1-based line numbers at which a new top-level form begins."""
    starts = [1]
    after_decorator = False
    for lineno in _statement_candidates(lines):
        line = lines[lineno - 1]
        if _CONTINUATION_RE.match(line):
            continue
        is_decorator = line.startswith("@")
        if after_decorator or lineno == 1:
            after_decorator = is_decorator
            continue
        starts.append(lineno)
        after_decorator = is_decorator
    return starts


class PythonSourceClassifier:
    """Report executable lines of Python source using the :mod:`ast` parser.

    The whole module is parsed at once when possible. When that fails the
    text is cut at top-level boundaries and each form is parsed on its own;
    forms that still fail are skipped.
    """

    def executable_lines(self, source: str, filename: str = "<unknown>") -> frozenset[int]:
        try:
            tree = ast.parse(source, filename=filename)
        except (SyntaxError, ValueError) as exc:
            logger.warning("%s: could not parse whole module (%s); parsing top-level forms", filename, exc)
            return frozenset(self._recover(source, filename))
        return frozenset(_executable_lines_of(tree))

    def _recover(self, source: str, filename: str) -> set[int]:
        index = LineIndex(source)
        lines: set[int] = set()
        parsed = 0
        for first_line, chunk in self._chunks(source, index):
            try:
                tree = ast.parse(chunk, filename=filename)
            except (SyntaxError, ValueError) as exc:
                logger.warning("%s:%d: skipping unparsable top-level form (%s)", filename, first_line, exc)
                continue
            parsed += 1
            lines.update(ln + first_line - 1 for ln in _executable_lines_of(tree))
        if not parsed:
            msg = "no top-level form could be parsed"
            raise UnparsableSourceError(msg, filename=filename)
        return lines

    @staticmethod
    def _chunks(source: str, index: LineIndex) -> Iterator[tuple[int, str]]:
        offsets = [index.offset_of(ln) for ln in top_level_starts(source.split("\n")[: len(index)])]
        offsets.append(len(source))
        for start, end in zip(offsets, offsets[1:], strict=False):
            chunk = source[start:end]
            if chunk.strip():
                yield index.line_of(start), chunk


__all__ = [
    "PythonSourceClassifier",
    "SourceAnalyzer",
    "StaticLineOracle",
    "top_level_starts",
]
