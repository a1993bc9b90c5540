"""
Root Typer application for the pictorium CLI.
"""

from __future__ import annotations

import typer
from typer import Typer

from pictorium import __version__
from pictorium.cli.db import app as db_app
from pictorium.core.logging import configure_logging
from pictorium.core.settings import get_settings

app = Typer(
    name="pictorium",
    help="pictorium: schema lifecycle for the photo library database.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"pictorium {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """pictorium CLI: create, drop and reset the entity schema."""
    settings = get_settings()
    configure_logging(
        level=settings.log_level,
        json_format=settings.log_format == "json",
        service="pictorium",
    )


app.add_typer(db_app, name="db", help="Database schema operations.")


if __name__ == "__main__":
    app()
