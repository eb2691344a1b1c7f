from __future__ import annotations

import json
from functools import cache
from importlib import resources
from typing import TYPE_CHECKING

from jsonschema import validate

from tracecov._meta import __version__
from tracecov.engine.summary import get_summary
from tracecov.files import display_path
from tracecov.model.types import ExecutionCount

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from tracecov.model.records import CoverageSummary, FileCoverage

# -----------------------------------------------------------------------------
# JSON schema loading
# -----------------------------------------------------------------------------

_SCHEMA_FILES: dict[str, str] = {
    "v1": "schema.json",
}


@cache
def get_schema(version: str = "v1") -> dict[str, object]:
    """Load and cache the JSON schema for structured output."""
    try:
        filename = _SCHEMA_FILES[version]
    except KeyError as exc:
        choices = ", ".join(sorted(_SCHEMA_FILES))
        msg = f"Unsupported schema version: {version!r}. Available versions: {choices}"
        raise ValueError(msg) from exc

    text = resources.files("tracecov.data").joinpath(filename).read_text(encoding="utf-8")
    return json.loads(text)


def _summary_obj(summary: CoverageSummary) -> dict[str, object]:
    pct = summary.percent
    return {
        "covered": summary.covered,
        "total": summary.total,
        "missed": summary.missed,
        "percent": None if pct is None else round(pct, 2),
    }


def _file_obj(fc: FileCoverage, base: Path | None) -> dict[str, object]:
    return {
        "filename": display_path(fc.filename, base),
        "lines": [c.hits if isinstance(c, ExecutionCount) else None for c in fc.coverage],
        "summary": _summary_obj(get_summary(fc)),
    }


def render_json(fcs: Iterable[FileCoverage], *, base: Path | None = None) -> str:
    """Render coverage records as JSON validated against the packaged schema.

    Not-applicable lines are emitted as ``null``, every other line as its
    execution count.
    """
    fcs = list(fcs)
    schema = get_schema("v1")
    payload: dict[str, object] = {
        "schema": str(schema["$id"]),
        "tool": {"name": "tracecov", "version": __version__},
        "files": [_file_obj(fc, base) for fc in fcs],
        "totals": _summary_obj(get_summary(fcs)),
    }

    validate(payload, schema)
    return json.dumps(payload, indent=2, sort_keys=True)


__all__ = ["get_schema", "render_json"]
