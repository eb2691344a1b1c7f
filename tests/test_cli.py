from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from tracecov import __version__
from tracecov.cli import EXIT_CONFIG, EXIT_DATAERR, EXIT_NOINPUT, EXIT_OK, cli

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from click.testing import CliRunner

TWO_FUNCS = "def f():\n    a()\n\ndef g():\n    b()\n"


@pytest.fixture
def project(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    write_source: Callable[..., Path],
    write_trace: Callable[..., Path],
) -> Path:
    src = tmp_path / "src"
    write_source("mod.py", TWO_FUNCS, folder=src)
    write_trace("mod.py.cov", [None, 3, None, None, None], folder=src, source=TWO_FUNCS)
    write_source("other.py", "X = 1\n", folder=src / "sub")
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _run(runner: CliRunner, args: list[str]) -> tuple[int, str]:
    """Invoke the CLI and return *(exit_code, output)* for convenience."""
    result = runner.invoke(cli, args)
    return result.exit_code, result.output


def test_version(cli_runner: CliRunner) -> None:
    code, out = _run(cli_runner, ["--version"])
    assert code == EXIT_OK
    assert out.strip() == f"tracecov {__version__}"


def test_no_command_prints_help(cli_runner: CliRunner) -> None:
    code, out = _run(cli_runner, [])
    assert code == EXIT_OK
    assert "process" in out
    assert "clean" in out


def test_process_json_to_file(cli_runner: CliRunner, project: Path) -> None:
    dest = project / "cov.json"
    code, _ = _run(cli_runner, ["-q", "process", "src", "--format", "json", "--output", str(dest)])

    assert code == EXIT_OK
    payload = json.loads(dest.read_text(encoding="utf-8"))
    assert [f["filename"] for f in payload["files"]] == ["src/mod.py", "src/sub/other.py"]
    assert payload["files"][0]["lines"] == [None, 3, None, None, 0]
    assert payload["totals"] == {"covered": 1, "total": 2, "missed": 1, "percent": 50.0}


def test_process_defaults_to_src_folder(cli_runner: CliRunner, project: Path) -> None:
    dest = project / "lcov.info"
    code, _ = _run(cli_runner, ["-q", "process", "-f", "lcov", "-o", str(dest)])

    assert code == EXIT_OK
    text = dest.read_text(encoding="utf-8")
    assert "SF:src/mod.py" in text
    assert "DA:5,0" in text


def test_process_single_file_human(cli_runner: CliRunner, project: Path) -> None:
    code, out = _run(cli_runner, ["-q", "process", "src/mod.py", "--no-color"])
    assert code == EXIT_OK
    assert "src/mod.py" in out
    assert "other.py" not in out
    assert "50%" in out


def test_process_uses_config(cli_runner: CliRunner, project: Path) -> None:
    (project / "pyproject.toml").write_text(
        '[tool.tracecov]\nformat = "lcov"\noutput = "out/lcov.info"\n', encoding="utf-8"
    )
    code, _ = _run(cli_runner, ["-q", "process"])
    assert code == EXIT_OK
    assert (project / "out" / "lcov.info").read_text(encoding="utf-8").startswith("SF:src/mod.py")


def test_process_bad_config(cli_runner: CliRunner, project: Path) -> None:
    (project / "pyproject.toml").write_text('[tool.tracecov]\nformat = "xml"\n', encoding="utf-8")
    code, out = _run(cli_runner, ["process"])
    assert code == EXIT_CONFIG
    assert "format" in out


def test_process_missing_input(cli_runner: CliRunner, project: Path) -> None:
    code, out = _run(cli_runner, ["process", "nope"])
    assert code == EXIT_NOINPUT
    assert "ERROR" in out


def test_process_malformed_trace(cli_runner: CliRunner, project: Path) -> None:
    (project / "src" / "mod.py.2.cov").write_text("   12ab- def f():\n", encoding="utf-8")
    code, out = _run(cli_runner, ["process", "src"])
    assert code == EXIT_DATAERR
    assert "malformed trace record" in out


def test_process_skip_errors(cli_runner: CliRunner, project: Path) -> None:
    (project / "src" / "broken.py").write_text("def (:\n", encoding="utf-8")
    dest = project / "cov.json"

    code, _ = _run(cli_runner, ["-q", "process", "src", "--skip-errors", "-f", "json", "-o", str(dest)])

    assert code == EXIT_OK
    names = [f["filename"] for f in json.loads(dest.read_text(encoding="utf-8"))["files"]]
    assert "src/broken.py" not in names
    assert "src/mod.py" in names


def test_clean_folder(cli_runner: CliRunner, project: Path) -> None:
    code, out = _run(cli_runner, ["clean", "src"])
    assert code == EXIT_OK
    assert "src/mod.py.cov" in out
    assert not (project / "src" / "mod.py.cov").exists()
    assert (project / "src" / "mod.py").exists()


def test_clean_dry_run(cli_runner: CliRunner, project: Path) -> None:
    code, out = _run(cli_runner, ["clean", "src/mod.py", "--dry-run"])
    assert code == EXIT_OK
    assert "src/mod.py.cov" in out
    assert (project / "src" / "mod.py.cov").exists()


def test_clean_missing_input(cli_runner: CliRunner, project: Path) -> None:
    code, _ = _run(cli_runner, ["clean", "nope"])
    assert code == EXIT_NOINPUT
