"""Transaction demarcation shared by services and repositories.

:meth:`TransactionManager.transaction` opens one ``engine.begin()`` block
and publishes its connection as the *active* connection for the current
context. Repositories obtain connections through
:meth:`TransactionManager.connection`, so every repository call made
inside a transaction block participates in it:

- **Inside a transaction**: the active connection is reused; commit or
  rollback happens when the outermost block exits.
- **Outside**: each call runs in its own short ``engine.begin()`` block.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from sqlalchemy import Connection
    from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)


class TransactionManager:
    """Context-local transaction scope over a single engine."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine
        self._active: ContextVar[Connection | None] = ContextVar(
            f"campuscoffee_active_connection_{id(self)}", default=None
        )

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def in_transaction(self) -> bool:
        """Whether a transaction block is open in the current context."""
        return self._active.get() is not None

    @contextmanager
    def transaction(self) -> Iterator[Connection]:
        """Open a transaction block; nested blocks join the outer one.

        Commits when the outermost block exits normally, rolls back if it
        exits with an exception.
        """
        active = self._active.get()
        if active is not None:
            yield active
            return

        with self._engine.begin() as conn:
            token = self._active.set(conn)
            logger.debug("Transaction started")
            try:
                yield conn
            except Exception:
                logger.debug("Transaction rolled back")
                raise
            finally:
                self._active.reset(token)
        logger.debug("Transaction committed")

    @contextmanager
    def connection(self) -> Iterator[Connection]:
        """Yield the active connection, or a fresh auto-committing one."""
        active = self._active.get()
        if active is not None:
            yield active
            return

        with self._engine.begin() as conn:
            yield conn
