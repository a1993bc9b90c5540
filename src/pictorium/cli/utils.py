"""
CLI utility helpers: consoles, the database handle and fatal error exits.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import typer
from rich.console import Console

from pictorium.core.database import Database
from pictorium.core.errors import FatalSchemaError
from pictorium.core.logging import get_logger
from pictorium.core.settings import get_settings

console = Console()
err_console = Console(stderr=True)

logger = get_logger(__name__)


def open_database(database: str | None = None) -> Database:
    """Build a handle for ``--database`` or ``PICTORIUM_DATABASE_URL``."""
    settings = get_settings()
    return Database(database or settings.database_url, echo=settings.database_echo)


@contextmanager
def abort_on_fatal() -> Iterator[None]:
    """Turn a ``FatalSchemaError`` into a terminal message and exit code 1."""
    try:
        yield
    except FatalSchemaError as exc:
        logger.error("entity.fatal", **exc.to_dict())
        err_console.print(f"[bold red]Fatal[/bold red]: {exc.message}")
        if exc.cause is not None:
            err_console.print(f"  caused by {type(exc.cause).__name__}: {exc.cause}")
        raise typer.Exit(code=1) from exc
