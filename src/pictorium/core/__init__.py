"""Pictorium Core -- shared infrastructure for the entity lifecycle.

Architecture::

    errors.py       Structured error hierarchy (PictoriumError, FatalSchemaError)
    logging.py      structlog configuration + get_logger
    settings.py     PictoriumSettings (pydantic-settings, PICTORIUM_*)
    protocols.py    SchemaDatabase / TableDescriptorLike protocols
    orm/            SQLAlchemy 2.0 declarative base + session factory
    database.py     Database handle: create / drop / probe / session
"""
