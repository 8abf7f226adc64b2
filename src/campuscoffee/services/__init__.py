"""Service layer — entity services over data ports.

Services may import from domain and infrastructure layers.
They must never import from commands or config.
"""

from campuscoffee.services.crud import CrudService
from campuscoffee.services.pos import PosService

__all__ = ["CrudService", "PosService"]
