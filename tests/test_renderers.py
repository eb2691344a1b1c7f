from __future__ import annotations

import json
from pathlib import Path

import pytest
from jsonschema import validate

from tracecov import __version__
from tracecov.model.records import FileCoverage
from tracecov.model.types import NOT_APPLICABLE, ExecutionCount
from tracecov.render.human import format_ranges, missed_ranges, render_human
from tracecov.render.json import get_schema, render_json
from tracecov.render.lcov import render_lcov, write_lcov
from tracecov.render.render import RenderOptions, render

NA = NOT_APPLICABLE
E = ExecutionCount


@pytest.fixture
def fcs(tmp_path: Path) -> list[FileCoverage]:
    return [
        FileCoverage(
            filename=tmp_path / "pkg" / "a.py",
            source="def f():\n    a()\n    b()\n    c()\n\n    d()\n",
            coverage=(NA, E(2), E(0), E(0), NA, E(0)),
        ),
        FileCoverage(filename=tmp_path / "pkg" / "b.py", source="X = 1\n", coverage=(NA,)),
    ]


def test_render_lcov(fcs: list[FileCoverage], tmp_path: Path) -> None:
    text = render_lcov(fcs, base=tmp_path)
    assert text == (
        "SF:pkg/a.py\n"
        "DA:2,2\n"
        "DA:3,0\n"
        "DA:4,0\n"
        "DA:6,0\n"
        "LH:1\n"
        "LF:4\n"
        "end_of_record\n"
        "SF:pkg/b.py\n"
        "LH:0\n"
        "LF:0\n"
        "end_of_record\n"
    )


def test_render_lcov_empty() -> None:
    assert render_lcov([]) == ""


def test_write_lcov(fcs: list[FileCoverage], tmp_path: Path) -> None:
    dest = tmp_path / "out" / "lcov.info"
    write_lcov(dest, fcs, base=tmp_path)
    assert dest.read_text(encoding="utf-8") == render_lcov(fcs, base=tmp_path)


def test_render_json(fcs: list[FileCoverage], tmp_path: Path) -> None:
    payload = json.loads(render_json(fcs, base=tmp_path))

    validate(payload, get_schema())
    assert payload["tool"] == {"name": "tracecov", "version": __version__}
    first = payload["files"][0]
    assert first["filename"] == "pkg/a.py"
    assert first["lines"] == [None, 2, 0, 0, None, 0]
    assert first["summary"] == {"covered": 1, "total": 4, "missed": 3, "percent": 25.0}
    assert payload["files"][1]["summary"]["percent"] is None
    assert payload["totals"]["total"] == 4


def test_get_schema_unknown_version() -> None:
    with pytest.raises(ValueError, match="Unsupported schema version"):
        get_schema("v9")


def test_missed_ranges(fcs: list[FileCoverage]) -> None:
    assert missed_ranges(fcs[0]) == [(3, 4), (6, 6)]
    assert format_ranges(missed_ranges(fcs[0])) == "3-4, 6"
    assert missed_ranges(fcs[1]) == []


def test_render_human_without_color(fcs: list[FileCoverage], tmp_path: Path) -> None:
    text = render_human(fcs, color=False, base=tmp_path)
    assert "Coverage Report" in text
    assert "pkg/a.py" in text
    assert "3-4, 6" in text
    assert "25%" in text
    assert "Overall" in text
    assert "\x1b[" not in text


def test_render_human_with_color(fcs: list[FileCoverage]) -> None:
    assert "\x1b[" in render_human(fcs, color=True)


def test_render_dispatch(fcs: list[FileCoverage], tmp_path: Path) -> None:
    options = RenderOptions(color=False, base=tmp_path)
    assert render(fcs, fmt="LCOV", options=options) == render_lcov(fcs, base=tmp_path)
    assert json.loads(render(fcs, fmt="json", options=options))["files"]
    with pytest.raises(ValueError, match="Unsupported format"):
        render(fcs, fmt="xml", options=options)
