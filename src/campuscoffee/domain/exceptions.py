"""Domain error taxonomy.

Both errors carry the domain class so messages name the entity type
without the raiser having to format it.
"""

from __future__ import annotations

from typing import Any


class CampusCoffeeError(Exception):
    """Base class for all domain errors."""


class NotFoundError(CampusCoffeeError):
    """No persisted instance matches the given identifier."""

    def __init__(self, domain_class: type, id: Any) -> None:
        self.domain_class = domain_class
        self.id = id
        super().__init__(f"{domain_class.__name__} with ID '{id}' does not exist.")


class DuplicationError(CampusCoffeeError):
    """A write would violate a uniqueness constraint."""

    def __init__(self, domain_class: type, field: str, value: Any) -> None:
        self.domain_class = domain_class
        self.field = field
        self.value = value
        super().__init__(f"{domain_class.__name__} with {field} '{value}' already exists.")
