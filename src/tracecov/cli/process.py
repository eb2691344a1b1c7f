from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer

from tracecov._meta import logger
from tracecov.cli._shared import load_config_or_exit, resolve_use_color
from tracecov.cli.exit_codes import EXIT_DATAERR, EXIT_GENERIC, EXIT_NOINPUT, EXIT_OK
from tracecov.engine.reconcile import process_file, process_folder
from tracecov.errors import TraceDataError
from tracecov.io import color_allowed, write_output
from tracecov.render.render import OutputFormat, RenderOptions, render

if TYPE_CHECKING:
    from tracecov.model.records import FileCoverage

_BOOL_FALSE = False


def _collect(path: Path, *, suffix: str, skip_errors: bool) -> list[FileCoverage]:
    try:
        if path.is_file():
            return [process_file(path)]
        return process_folder(path, suffix=suffix, skip_errors=skip_errors)
    except FileNotFoundError as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(code=EXIT_NOINPUT) from exc
    except TraceDataError as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(code=EXIT_DATAERR) from exc
    except OSError as exc:
        logger.debug("I/O failure while processing %s", path, exc_info=True)
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(code=EXIT_GENERIC) from exc


def process_cmd(
    path: Annotated[
        Path | None,
        typer.Argument(help="Source folder (searched recursively) or single source file."),
    ] = None,
    suffix: Annotated[
        str | None,
        typer.Option("--suffix", help="Suffix of source files to process (default: .py)."),
    ] = None,
    fmt: Annotated[
        OutputFormat | None,
        typer.Option("-f", "--format", help="Output format.", case_sensitive=False),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("-o", "--output", help="Write output to PATH (use '-' for stdout)."),
    ] = None,
    skip_errors: Annotated[
        bool,
        typer.Option("--skip-errors", help="Skip files with malformed, stale or unparsable data."),
    ] = _BOOL_FALSE,
    color: Annotated[
        bool,
        typer.Option("--color", help="Force color output"),
    ] = _BOOL_FALSE,
    no_color: Annotated[
        bool,
        typer.Option("--no-color", help="Disable color output"),
    ] = _BOOL_FALSE,
) -> None:
    """Reconcile trace files with their sources and report per-line coverage."""
    config = load_config_or_exit()
    path = path or config.folder
    output = output or config.output
    render_fmt = fmt.value if fmt is not None else config.format

    if not path.exists():
        typer.echo(f"ERROR: no such file or folder: {path}", err=True)
        raise typer.Exit(code=EXIT_NOINPUT)

    fcs = _collect(path, suffix=suffix or config.source_suffix, skip_errors=skip_errors)

    use_color = resolve_use_color(color=color, no_color=no_color, color_allowed=color_allowed(output))
    text = render(fcs, fmt=render_fmt, options=RenderOptions(color=use_color, base=Path.cwd()))
    write_output(text, output)
    raise typer.Exit(code=EXIT_OK)


def register(app: typer.Typer) -> None:
    app.command("process")(process_cmd)


__all__ = ["register"]
