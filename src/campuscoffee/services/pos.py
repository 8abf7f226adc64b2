"""PosService — CRUD for campus points of sale."""

from __future__ import annotations

from typing import TYPE_CHECKING

from campuscoffee.domain.models import Pos
from campuscoffee.infrastructure.database.transactions import TransactionManager
from campuscoffee.infrastructure.repositories.pos import PosRepository
from campuscoffee.services.crud import CrudService, TransactionFactory

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

    from campuscoffee.domain.ports import CrudDataPort


class PosService(CrudService[Pos, int]):
    """Points of sale, keyed by integer id."""

    def __init__(
        self,
        repository: CrudDataPort[Pos, int],
        *,
        transaction: TransactionFactory | None = None,
    ) -> None:
        super().__init__(repository, Pos, transaction=transaction)

    @classmethod
    def from_engine(cls, engine: Engine) -> PosService:
        """Wire the SQL repository; upserts run in one database transaction."""
        transactions = TransactionManager(engine)
        return cls(PosRepository(transactions), transaction=transactions.transaction)
