"""
Centralized settings for pictorium.

Manifesto:
    Configuration should be explicit, validated, and environment-driven.
    The migration attempt ceiling and probe interval live here rather than
    as literals in the waiter so tests can shrink them.

All fields can be set via ``PICTORIUM_*`` environment variables (e.g.
``PICTORIUM_MIGRATION_ATTEMPTS=10``) or through a ``.env`` file.

Tags:
    configuration, settings, pydantic, environment

Doc-Types:
    api-reference
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MIGRATION_ATTEMPTS = 100
DEFAULT_MIGRATION_INTERVAL = 0.05


class PictoriumSettings(BaseSettings):
    """Pictorium configuration.

    Fields
    ──────
    database_url        : SQLAlchemy URL of the photo library database
    database_echo       : Log every SQL statement
    migration_attempts  : Probe ceiling per table while waiting for migration
    migration_interval  : Seconds to sleep between failed probes
    log_level           : Structlog log level
    log_format          : ``json`` or ``console``
    """

    model_config = SettingsConfigDict(
        env_prefix="PICTORIUM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Database ─────────────────────────────────────────────────
    database_url: str = Field(default="sqlite:///pictorium.db")
    database_echo: bool = Field(default=False)

    # ── Migration ────────────────────────────────────────────────
    migration_attempts: int = Field(default=DEFAULT_MIGRATION_ATTEMPTS, ge=1)
    migration_interval: float = Field(default=DEFAULT_MIGRATION_INTERVAL, ge=0)

    # ── Logging ──────────────────────────────────────────────────
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json", pattern="^(json|console)$")


@lru_cache(maxsize=1)
def get_settings() -> PictoriumSettings:
    """Return the cached process settings."""
    return PictoriumSettings()
