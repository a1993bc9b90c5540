"""pictorium CLI -- Typer-based command line for schema bootstrap.

Entry point: ``pictorium = pictorium.cli.app:app``
"""
