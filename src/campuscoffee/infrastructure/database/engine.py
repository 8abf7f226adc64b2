"""Database engine setup.

SQLAlchemy Core (not ORM) is used: rows are mapped to frozen pydantic
models by the repositories, so identity maps and sessions buy nothing.
Any SQLAlchemy URL works; SQLite URLs get foreign keys enabled.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine

from campuscoffee.infrastructure.database.schema import metadata


def create_db_engine(url: str) -> Engine:
    """Create an engine for *url*, enabling foreign keys on SQLite.

    SQL echo is a logging concern; see :func:`campuscoffee.config.logging.configure_logging`.
    """
    engine = create_engine(url)

    if engine.dialect.name == "sqlite":

        @event.listens_for(engine, "connect")
        def _set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def init_database(url: str) -> Engine:
    """Create the engine and all tables from :data:`schema.metadata`.

    Idempotent, safe to call on an existing database.
    """
    engine = create_db_engine(url)
    metadata.create_all(engine)
    return engine
