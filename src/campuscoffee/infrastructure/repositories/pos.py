"""Repository for campus points of sale."""

from __future__ import annotations

from typing import TYPE_CHECKING

from campuscoffee.domain.models import Pos
from campuscoffee.infrastructure.database.schema import pos
from campuscoffee.infrastructure.repositories.base import SqlCrudRepository

if TYPE_CHECKING:
    from campuscoffee.infrastructure.database.transactions import TransactionManager


class PosRepository(SqlCrudRepository[Pos, int]):
    """CRUD data port over the ``pos`` table; POS names are unique."""

    def __init__(self, transactions: TransactionManager) -> None:
        super().__init__(transactions, pos, Pos, unique_fields=("name",))
