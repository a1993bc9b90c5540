"""One-shot initialization gate and single-assignment provider slot.

Several test suites may share one process and each call the same bootstrap
entry point.  ``FixtureGate`` makes sure the destructive reset-with-fixtures
runs exactly once: the first caller runs it while holding the gate's lock,
every concurrent caller blocks on that lock until the run has finished, and
later callers return immediately.  ``wait`` blocks until the run has
finished without ever running anything itself.

``ProviderSlot`` holds the database handle for the process.  Registration is
single assignment; a second registration is a no-op.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from pictorium.core.errors import FatalSchemaError, ProviderNotRegisteredError
from pictorium.core.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class FixtureGate:
    """Runs a callable at most once for the lifetime of the gate.

    If the single run raises, the gate stays closed and every later caller
    gets a ``FatalSchemaError`` chained to the original failure.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._finished = threading.Event()
        self._done = False
        self._error: BaseException | None = None

    @property
    def done(self) -> bool:
        return self._done

    @property
    def error(self) -> BaseException | None:
        return self._error

    def run(self, fn: Callable[[], Any]) -> bool:
        """Run *fn* if no caller has yet; return ``True`` for the caller that ran it."""
        with self._lock:
            if self._done:
                if self._error is not None:
                    raise FatalSchemaError(
                        "fixture initialization failed earlier in this process",
                        cause=self._error,
                    )
                return False

            try:
                fn()
            except BaseException as exc:
                self._error = exc
                logger.error("entity.fixture_init_failed", error=str(exc))
                raise
            finally:
                self._done = True
                self._finished.set()

            logger.debug("entity.fixture_init_done")
            return True

    def wait(self, timeout: float | None = None) -> bool:
        """Block until the single run has finished, without running anything.

        Returns ``False`` if *timeout* expired first.

        Raises:
            FatalSchemaError: If the run failed.
        """
        if not self._finished.wait(timeout):
            return False
        if self._error is not None:
            raise FatalSchemaError(
                "fixture initialization failed earlier in this process",
                cause=self._error,
            )
        return True


class ProviderSlot(Generic[T]):
    """Process-wide, single-assignment holder for a database provider."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._provider: T | None = None

    @property
    def is_registered(self) -> bool:
        return self._provider is not None

    def register(self, provider: T) -> bool:
        """Store *provider* unless one is already registered.

        Returns ``True`` if *provider* was stored, ``False`` if the slot was taken.
        """
        with self._lock:
            if self._provider is not None:
                logger.debug("entity.provider_already_registered")
                return False
            self._provider = provider
            return True

    def get(self) -> T | None:
        return self._provider

    @property
    def provider(self) -> T:
        """The registered provider.

        Raises:
            ProviderNotRegisteredError: If nothing has been registered.
        """
        provider = self._provider
        if provider is None:
            raise ProviderNotRegisteredError()
        return provider
