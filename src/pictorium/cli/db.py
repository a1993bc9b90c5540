"""
CLI: ``pictorium db`` - schema lifecycle commands.
"""

from __future__ import annotations

import typer
from rich.table import Table

from pictorium.cli.utils import abort_on_fatal, console, open_database
from pictorium.core.errors import TableNotReadyError
from pictorium.entity.lifecycle import EntityLifecycle
from pictorium.entity.registry import ENTITIES

app = typer.Typer(no_args_is_help=True)

DatabaseOption = typer.Option(None, "--database", "-d", help="Database URL")


@app.command()
def migrate(database: str | None = DatabaseOption) -> None:
    """Create missing tables, wait until readable, insert default rows."""
    db = open_database(database)
    try:
        with abort_on_fatal():
            EntityLifecycle(db).migrate_database()
    finally:
        db.dispose()
    console.print(f"[green]Migrated[/green] {len(ENTITIES)} tables on {db.url}")


@app.command()
def drop(
    database: str | None = DatabaseOption,
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Drop all registered tables."""
    if not yes:
        typer.confirm("Drop all tables?", abort=True)
    db = open_database(database)
    try:
        with abort_on_fatal():
            EntityLifecycle(db).drop_tables()
    finally:
        db.dispose()
    console.print(f"[yellow]Dropped[/yellow] {len(ENTITIES)} tables on {db.url}")


@app.command()
def reset(
    database: str | None = DatabaseOption,
    fixtures: bool = typer.Option(False, "--fixtures", help="Load test fixtures"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Drop and re-create all tables."""
    if not yes:
        typer.confirm("Reset the database? All data will be lost.", abort=True)
    db = open_database(database)
    try:
        with abort_on_fatal():
            EntityLifecycle(db).reset_database(with_fixtures=fixtures)
    finally:
        db.dispose()
    suffix = " with fixtures" if fixtures else ""
    console.print(f"[green]Reset[/green] {len(ENTITIES)} tables{suffix} on {db.url}")


@app.command()
def tables(database: str | None = DatabaseOption) -> None:
    """Show registered tables and whether each one is readable."""
    db = open_database(database)
    table = Table(title="Entity Tables")
    table.add_column("Table")
    table.add_column("Model")
    table.add_column("Readable")

    try:
        for descriptor in ENTITIES.descriptors():
            try:
                db.probe(descriptor.name)
                readable = "[green]yes[/green]"
            except TableNotReadyError:
                readable = "[red]no[/red]"
            table.add_row(descriptor.name, descriptor.model.__name__, readable)
    finally:
        db.dispose()

    console.print(table)
