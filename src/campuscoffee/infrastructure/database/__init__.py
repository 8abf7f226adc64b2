"""SQLite database engine, schema, and transactions via SQLAlchemy Core."""

from campuscoffee.infrastructure.database.engine import create_db_engine, init_database
from campuscoffee.infrastructure.database.schema import metadata, pos
from campuscoffee.infrastructure.database.transactions import TransactionManager

__all__ = [
    "TransactionManager",
    "create_db_engine",
    "init_database",
    "metadata",
    "pos",
]
