"""Ports — the protocols at the domain boundary.

``CrudDataPort`` is what the service layer consumes; the infrastructure
layer provides implementations. ``CrudApi`` is what the service layer
exposes to presentation code (CLI, HTTP). Both share the same five
operations and failure semantics:

- ``get_by_id`` raises :class:`~campuscoffee.domain.exceptions.NotFoundError`
  for unknown identifiers.
- ``upsert`` raises :class:`~campuscoffee.domain.exceptions.DuplicationError`
  on uniqueness violations and assigns identifier/timestamps on create.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class CrudDataPort[DomainT, IdT](Protocol):
    """Data access consumed by :class:`~campuscoffee.services.crud.CrudService`."""

    def clear(self) -> None: ...

    def get_all(self) -> list[DomainT]: ...

    def get_by_id(self, id: IdT) -> DomainT: ...

    def upsert(self, instance: DomainT) -> DomainT: ...

    def delete(self, id: IdT) -> None: ...


@runtime_checkable
class CrudApi[DomainT, IdT](Protocol):
    """CRUD operations exposed by the service layer."""

    def clear(self) -> None: ...

    def get_all(self) -> list[DomainT]: ...

    def get_by_id(self, id: IdT) -> DomainT: ...

    def upsert(self, instance: DomainT) -> DomainT: ...

    def delete(self, id: IdT) -> None: ...
