from __future__ import annotations

from typing import Annotated

import typer
from typer.main import get_command

from tracecov._meta import __version__
from tracecov.cli import clean, process
from tracecov.cli._shared import configure_logging

_BOOL_FALSE = False


def create_app() -> typer.Typer:
    app = typer.Typer(help="Reconcile runtime trace (.cov) files into per-line source coverage.")

    @app.callback(invoke_without_command=True)
    def _root(
        ctx: typer.Context,
        *,
        version: Annotated[
            bool,
            typer.Option("--version", help="Show version and exit"),
        ] = _BOOL_FALSE,
        verbose: Annotated[
            bool,
            typer.Option("-v", "--verbose", help="Emit diagnostic logging"),
        ] = _BOOL_FALSE,
        quiet: Annotated[
            bool,
            typer.Option("-q", "--quiet", help="Suppress INFO logs, emit only errors"),
        ] = _BOOL_FALSE,
    ) -> None:
        if version:
            typer.echo(f"tracecov {__version__}")
            raise typer.Exit
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit
        configure_logging(quiet=quiet, verbose=verbose)

    process.register(app)
    clean.register(app)

    return app


def main() -> None:
    app = create_app()
    get_command(app)()


# Click-compatible object for tooling that imports it
cli = get_command(create_app())

__all__ = ["cli", "create_app", "main"]
