"""CrudService — generic create/read/update/delete over a data port.

Every operation forwards to the injected :class:`CrudDataPort`; the
service adds logging and one rule: an update (``id`` set) must target an
existing instance, checked before the write. Errors from the port are
never translated or recovered from.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from contextlib import AbstractContextManager, nullcontext
from typing import TYPE_CHECKING, Any

from campuscoffee.domain.exceptions import DuplicationError

if TYPE_CHECKING:
    from campuscoffee.domain.models import DomainModel
    from campuscoffee.domain.ports import CrudDataPort

logger = logging.getLogger(__name__)

type TransactionFactory = Callable[[], AbstractContextManager[Any]]


class CrudService[DomainT: DomainModel[Any], IdT]:
    """Base for per-entity services.

    Subclasses bind the entity type and pass their data port up::

        class PosService(CrudService[Pos, int]):
            def __init__(self, repository: CrudDataPort[Pos, int]) -> None:
                super().__init__(repository, Pos)

    Args:
        data_port: Data access the operations delegate to.
        domain_class: Entity class; only its name is used, in log messages.
        transaction: Zero-argument factory for the context manager that
            scopes :meth:`upsert`. Defaults to no transaction.
    """

    def __init__(
        self,
        data_port: CrudDataPort[DomainT, IdT],
        domain_class: type[DomainT],
        *,
        transaction: TransactionFactory | None = None,
    ) -> None:
        self._data_port = data_port
        self._domain_class = domain_class
        self._transaction: TransactionFactory = transaction or nullcontext

    @property
    def domain_name(self) -> str:
        return self._domain_class.__name__

    def clear(self) -> None:
        """Remove every persisted instance. Meant for tests and resets."""
        logger.warning("Clearing all %s data...", self.domain_name)
        self._data_port.clear()

    def get_all(self) -> list[DomainT]:
        """All persisted instances, in the data port's order."""
        logger.debug("Retrieving all %s...", self.domain_name)
        return self._data_port.get_all()

    def get_by_id(self, id: IdT) -> DomainT:
        """The instance with *id*; ``NotFoundError`` propagates from the port."""
        _require_id(id)
        logger.debug("Retrieving %s with ID '%s'...", self.domain_name, id)
        return self._data_port.get_by_id(id)

    def upsert(self, instance: DomainT) -> DomainT:
        """Create *instance* (``id is None``) or update it (``id`` set).

        Updates first fetch the instance by id so an unknown id fails with
        ``NotFoundError`` before anything is written. The existence check
        and the write share one transaction scope.

        Returns:
            The persisted instance as returned by the data port, with the
            identifier and timestamps filled in.

        Raises:
            NotFoundError: Update of an id that does not exist.
            DuplicationError: The write violates a uniqueness constraint.
        """
        if instance is None:
            msg = f"{self.domain_name} to upsert must not be None"
            raise ValueError(msg)

        id = instance.id
        with self._transaction():
            if id is None:
                logger.info("Creating new %s...", self.domain_name)
            else:
                logger.info("Updating %s with ID '%s'...", self.domain_name, id)
                # Result unused: raises NotFoundError for unknown ids
                self._data_port.get_by_id(id)

            try:
                upserted = self._data_port.upsert(instance)
            except DuplicationError as exc:
                logger.error("Error upserting %s: %s", self.domain_name, exc)
                raise

        logger.info("Successfully upserted %s with ID: '%s'.", self.domain_name, upserted.id)
        return upserted

    def delete(self, id: IdT) -> None:
        """Delete the instance with *id*. Unknown ids are the port's concern."""
        _require_id(id)
        logger.info("Trying to delete %s with ID '%s'...", self.domain_name, id)
        self._data_port.delete(id)
        logger.info("%s with ID '%s' deleted.", self.domain_name, id)


def _require_id(id: object) -> None:
    if id is None:
        msg = "ID must not be None"
        raise ValueError(msg)
