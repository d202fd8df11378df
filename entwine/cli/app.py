"""Typer application for the `entwine` command."""

import logging

import typer

from .. import __version__
from ..config import load_config


app = typer.Typer(
    name="entwine",
    help="Sample values from recursive random generators.",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"entwine {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Entwine: recursive generators for property-based testing."""
    level = "DEBUG" if verbose else load_config().logging.level
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Commands register themselves on `app` when imported
from . import commands  # noqa: E402,F401


def main() -> None:
    app()
