"""Domain models.

:class:`DomainModel` is the structural contract every persisted entity
satisfies: an ``id`` that is ``None`` until the data layer assigns one.
:class:`Pos` is the campus point of sale.
"""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from typing import Protocol

from pydantic import BaseModel, Field


class DomainModel[IdT](Protocol):
    """Anything with an optional identifier."""

    @property
    def id(self) -> IdT | None: ...


class PosType(StrEnum):
    """Kinds of point of sale."""

    CAFE = "CAFE"
    VENDING_MACHINE = "VENDING_MACHINE"
    BAKERY = "BAKERY"
    CAFETERIA = "CAFETERIA"


class CampusType(StrEnum):
    """University campus a point of sale belongs to."""

    ALTSTADT = "ALTSTADT"
    BERGHEIM = "BERGHEIM"
    INF = "INF"


class Pos(BaseModel):
    """A point of sale serving coffee on campus.

    ``id`` and the timestamps are owned by the data layer: leave them
    unset when creating, they are filled in on the returned instance.
    """

    model_config = {"frozen": True}

    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    name: str = Field(min_length=1)
    description: str = ""
    type: PosType
    campus: CampusType
    street: str = Field(min_length=1)
    house_number: str = Field(min_length=1)
    postal_code: int = Field(gt=0)
    city: str = Field(min_length=1)
