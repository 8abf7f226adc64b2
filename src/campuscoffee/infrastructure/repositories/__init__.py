"""Repository layer — data-port implementations over SQLAlchemy Core."""

from campuscoffee.infrastructure.repositories.base import SqlCrudRepository
from campuscoffee.infrastructure.repositories.pos import PosRepository

__all__ = ["PosRepository", "SqlCrudRepository"]
