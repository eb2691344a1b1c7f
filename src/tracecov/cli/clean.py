from __future__ import annotations

from pathlib import Path  # noqa: TC003
from typing import Annotated

import typer

from tracecov.cli._shared import load_config_or_exit
from tracecov.cli.exit_codes import EXIT_GENERIC, EXIT_NOINPUT, EXIT_OK
from tracecov.engine.clean import clean_file, clean_folder

_BOOL_FALSE = False


def register(app: typer.Typer) -> None:
    @app.command("clean")
    def clean(
        path: Annotated[
            Path | None,
            typer.Argument(help="Folder to clean recursively, or a source file whose trace files to remove."),
        ] = None,
        suffix: Annotated[
            str | None,
            typer.Option("--suffix", help="Suffix of the traced source files (default: .py)."),
        ] = None,
        dry_run: Annotated[
            bool,
            typer.Option("--dry-run", help="List trace files without deleting them."),
        ] = _BOOL_FALSE,
    ) -> None:
        """Delete trace files."""
        config = load_config_or_exit()
        path = path or config.folder
        if not path.exists():
            typer.echo(f"ERROR: no such file or folder: {path}", err=True)
            raise typer.Exit(code=EXIT_NOINPUT)

        try:
            if path.is_dir():
                removed = clean_folder(path, suffix=suffix or config.source_suffix, dry_run=dry_run)
            else:
                removed = clean_file(path, dry_run=dry_run)
        except OSError as exc:
            typer.echo(f"ERROR: {exc}", err=True)
            raise typer.Exit(code=EXIT_GENERIC) from exc

        for p in removed:
            typer.echo(p.as_posix())
        raise typer.Exit(code=EXIT_OK)


__all__ = ["register"]
