"""Generic SQLAlchemy Core implementation of the CRUD data port.

One repository wraps one table whose rows map one-to-one onto a frozen
pydantic model. The table must have an integer ``id`` primary key and
``created_at`` / ``updated_at`` columns; the repository owns all three.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel
from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import IntegrityError

from campuscoffee.domain.exceptions import DuplicationError, NotFoundError

if TYPE_CHECKING:
    from sqlalchemy import Connection, Table

    from campuscoffee.infrastructure.database.transactions import TransactionManager

_MANAGED_FIELDS = frozenset({"id", "created_at", "updated_at"})


class SqlCrudRepository[DomainT: BaseModel, IdT]:
    """CRUD data port over a single table.

    Args:
        transactions: Transaction scope; calls join its active transaction.
        table: Backing table.
        model_cls: Domain model the rows are validated into.
        unique_fields: Columns checked for duplicates before every write.
    """

    def __init__(
        self,
        transactions: TransactionManager,
        table: Table,
        model_cls: type[DomainT],
        *,
        unique_fields: tuple[str, ...] = (),
    ) -> None:
        self._transactions = transactions
        self._table = table
        self._model_cls = model_cls
        self._unique_fields = unique_fields

    def clear(self) -> None:
        """Delete every row."""
        with self._transactions.connection() as conn:
            conn.execute(delete(self._table))

    def get_all(self) -> list[DomainT]:
        """All rows ordered by id."""
        stmt = select(self._table).order_by(self._table.c.id)
        with self._transactions.connection() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [self._to_model(row) for row in rows]

    def get_by_id(self, id: IdT) -> DomainT:
        """Fetch one row by id or raise :class:`NotFoundError`."""
        with self._transactions.connection() as conn:
            return self._fetch(conn, id)

    def upsert(self, instance: DomainT) -> DomainT:
        """Insert (``id is None``) or update, returning the stored row.

        Raises:
            DuplicationError: A unique column value is held by another row.
            NotFoundError: Update of an id with no row.
        """
        values = self._to_values(instance)
        instance_id = getattr(instance, "id", None)
        now = datetime.now(UTC)

        with self._transactions.connection() as conn:
            self._check_unique(conn, instance_id, values)
            try:
                if instance_id is None:
                    result = conn.execute(
                        insert(self._table).values(**values, created_at=now, updated_at=now)
                    )
                    instance_id = result.inserted_primary_key[0]
                else:
                    result = conn.execute(
                        update(self._table)
                        .where(self._table.c.id == instance_id)
                        .values(**values, updated_at=now)
                    )
                    if result.rowcount == 0:
                        raise NotFoundError(self._model_cls, instance_id)
            except IntegrityError as exc:
                field = self._violated_unique_field(exc)
                if field is None:
                    raise
                raise DuplicationError(self._model_cls, field, values[field]) from exc
            return self._fetch(conn, instance_id)

    def delete(self, id: IdT) -> None:
        """Delete one row by id or raise :class:`NotFoundError`."""
        with self._transactions.connection() as conn:
            result = conn.execute(delete(self._table).where(self._table.c.id == id))
            if result.rowcount == 0:
                raise NotFoundError(self._model_cls, id)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _fetch(self, conn: Connection, id: Any) -> DomainT:
        row = conn.execute(select(self._table).where(self._table.c.id == id)).mappings().first()
        if row is None:
            raise NotFoundError(self._model_cls, id)
        return self._to_model(row)

    def _check_unique(self, conn: Connection, instance_id: Any, values: dict[str, Any]) -> None:
        for field in self._unique_fields:
            column = self._table.c[field]
            stmt = select(self._table.c.id).where(column == values[field])
            if instance_id is not None:
                stmt = stmt.where(self._table.c.id != instance_id)
            if conn.execute(stmt).first() is not None:
                raise DuplicationError(self._model_cls, field, values[field])

    def _violated_unique_field(self, exc: IntegrityError) -> str | None:
        """Name the unique column an integrity error reports, if any.

        Recognizes SQLite (``UNIQUE constraint failed: pos.name``) and
        PostgreSQL (``Key (name)=(...)``) messages.
        """
        message = str(exc.orig)
        for field in self._unique_fields:
            if f"{self._table.name}.{field}" in message or f"({field})=" in message:
                return field
        return None

    def _to_values(self, instance: DomainT) -> dict[str, Any]:
        """Column values for a write; enums are stored by value."""
        return instance.model_dump(mode="json", exclude=set(_MANAGED_FIELDS))

    def _to_model(self, row: Any) -> DomainT:
        data = dict(row)
        for key in ("created_at", "updated_at"):
            stamp = data.get(key)
            # SQLite drops tzinfo on the way back
            if isinstance(stamp, datetime) and stamp.tzinfo is None:
                data[key] = stamp.replace(tzinfo=UTC)
        return self._model_cls.model_validate(data)
