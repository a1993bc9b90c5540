"""
Structured error types for pictorium.

Provides a small hierarchy of typed errors with metadata for retry decisions,
categorization, and root cause analysis through error chaining.

Schema lifecycle code never terminates the process itself.  It raises a
``FatalSchemaError`` and leaves the decision to abort to the bootstrap caller
(the CLI, a service ``main()``, or a test session fixture).

Manifesto:
    - **Typed Error Hierarchy:** Transient, config and database errors are distinct
    - **Explicit Retry Semantics:** Each error knows if it's retryable
    - **Rich Context:** Errors carry table/operation metadata for logging
    - **Error Chaining:** Preserve original driver exceptions as ``cause``

Architecture:
    ::

        ┌─────────────────────────────────────────────────────────────┐
        │                      PictoriumError                          │
        │  (category, retryable, context, cause)                       │
        ├─────────────────────────────────────────────────────────────┤
        │  TransientError       ConfigError        DatabaseError       │
        │  (retryable=True)     (CONFIG)           (DATABASE)          │
        │       │                    │                  │              │
        │  TableNotReadyError   ProviderNot-       FatalSchemaError    │
        │                       RegisteredError         │              │
        │                                          SchemaCreateError   │
        │                                          SchemaDropError     │
        │                                          MigrationTimeoutError│
        └─────────────────────────────────────────────────────────────┘

Examples:
    >>> error = MigrationTimeoutError("photos", attempts=100)
    >>> error.fatal
    True
    >>> error.context.table
    'photos'

Tags:
    error-handling, exception-hierarchy, retry-logic, schema, fatal

Doc-Types:
    - API Reference
    - Error Handling Guide
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Standard error categories for classification and routing."""

    DATABASE = "DATABASE"
    SCHEMA = "SCHEMA"
    CONFIG = "CONFIG"
    INTERNAL = "INTERNAL"
    UNKNOWN = "UNKNOWN"


@dataclass
class ErrorContext:
    """
    Structured metadata attached to an error.

    Attributes:
        table: Logical table name the operation was working on
        operation: Lifecycle operation (create, drop, probe, seed, ...)
        attempts: Number of attempts made before the error was raised
        metadata: Additional key-value pairs
    """

    table: str | None = None
    operation: str | None = None
    attempts: int | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result: dict[str, Any] = {}
        for key in ("table", "operation", "attempts"):
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.metadata:
            result.update(self.metadata)
        return result


class PictoriumError(Exception):
    """
    Base exception for all pictorium errors.

    Subclasses set ``default_category`` and ``default_retryable`` to provide
    sensible defaults for their domain.  ``fatal`` marks errors that the
    bootstrap caller must treat as unrecoverable.
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL
    default_retryable: bool = False
    fatal: bool = False

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        retryable: bool | None = None,
        context: ErrorContext | None = None,
        cause: BaseException | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.retryable = retryable if retryable is not None else self.default_retryable
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> PictoriumError:
        """
        Add context to this error (fluent API).

        Usage:
            raise SchemaCreateError("cameras").with_context(dialect="mysql")
        """
        for key, value in kwargs.items():
            if key != "metadata" and hasattr(self.context, key):
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Serialize for structured logging."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
            "retryable": self.retryable,
            "fatal": self.fatal,
        }
        ctx = self.context.to_dict()
        if ctx:
            result["context"] = ctx
        if self.cause is not None:
            result["cause"] = f"{type(self.cause).__name__}: {self.cause}"
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# TRANSIENT ERRORS
# =============================================================================


class TransientError(PictoriumError):
    """Temporary failure that is expected to clear on retry."""

    default_category = ErrorCategory.DATABASE
    default_retryable = True


class TableNotReadyError(TransientError):
    """A probe could not read the table yet."""

    def __init__(self, table: str, *, cause: BaseException | None = None):
        super().__init__(
            f"table {table} is not readable yet",
            context=ErrorContext(table=table, operation="probe"),
            cause=cause,
        )
        self.table = table


# =============================================================================
# CONFIG ERRORS
# =============================================================================


class ConfigError(PictoriumError):
    """Invalid or missing configuration."""

    default_category = ErrorCategory.CONFIG
    default_retryable = False


class ProviderNotRegisteredError(ConfigError):
    """No database provider has been registered for this process."""

    def __init__(self) -> None:
        super().__init__("no database provider registered")


# =============================================================================
# DATABASE / SCHEMA ERRORS
# =============================================================================


class DatabaseError(PictoriumError):
    """Database query or transaction error."""

    default_category = ErrorCategory.DATABASE
    default_retryable = False


class FatalSchemaError(DatabaseError):
    """The schema could not be established.  Startup must abort."""

    default_category = ErrorCategory.SCHEMA
    fatal = True


class SchemaCreateError(FatalSchemaError):
    """Creating or verifying a table failed."""

    def __init__(self, table: str, *, cause: BaseException | None = None):
        super().__init__(
            f"failed to create table {table}",
            context=ErrorContext(table=table, operation="create"),
            cause=cause,
        )
        self.table = table


class SchemaDropError(FatalSchemaError):
    """Dropping a table failed."""

    def __init__(self, table: str, *, cause: BaseException | None = None):
        super().__init__(
            f"failed to drop table {table}",
            context=ErrorContext(table=table, operation="drop"),
            cause=cause,
        )
        self.table = table


class MigrationTimeoutError(FatalSchemaError):
    """A table never became readable within the attempt ceiling."""

    def __init__(self, table: str, *, attempts: int, cause: BaseException | None = None):
        super().__init__(
            f"migration failed: table {table} not readable after {attempts} attempts",
            context=ErrorContext(table=table, operation="wait", attempts=attempts),
            cause=cause,
        )
        self.table = table
        self.attempts = attempts


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================


def is_retryable(error: BaseException) -> bool:
    """Check if an error is retryable."""
    if isinstance(error, PictoriumError):
        return error.retryable
    return False


def is_fatal(error: BaseException) -> bool:
    """Check if an error must abort startup."""
    return isinstance(error, PictoriumError) and error.fatal


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "PictoriumError",
    "TransientError",
    "TableNotReadyError",
    "ConfigError",
    "ProviderNotRegisteredError",
    "DatabaseError",
    "FatalSchemaError",
    "SchemaCreateError",
    "SchemaDropError",
    "MigrationTimeoutError",
    "is_retryable",
    "is_fatal",
]
