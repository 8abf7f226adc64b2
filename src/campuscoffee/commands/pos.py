"""Command group: pos, manage campus points of sale."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import click

from campuscoffee.commands._base import CoffeeGroup
from campuscoffee.domain.models import CampusType, Pos, PosType

if TYPE_CHECKING:
    from campuscoffee.commands._context import AppContext

_POS_TYPES = [t.value for t in PosType]
_CAMPUSES = [c.value for c in CampusType]


def _pos_options(*, required: bool) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Shared field options for ``create`` (all required) and ``update`` (all optional)."""
    options = [
        click.option("--name", required=required, help="Unique POS name."),
        click.option("--description", default=None, help="Free-text description."),
        click.option(
            "--type",
            "pos_type",
            type=click.Choice(_POS_TYPES, case_sensitive=False),
            required=required,
            help="Kind of point of sale.",
        ),
        click.option(
            "--campus",
            type=click.Choice(_CAMPUSES, case_sensitive=False),
            required=required,
            help="Campus the POS belongs to.",
        ),
        click.option("--street", required=required),
        click.option("--house-number", required=required),
        click.option("--postal-code", type=int, required=required),
        click.option("--city", required=required),
    ]

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        for option in reversed(options):
            func = option(func)
        return func

    return decorator


def _collect_fields(pos_type: str | None, **fields: Any) -> dict[str, Any]:
    """Map option values onto Pos field names, dropping unset ones."""
    fields["type"] = pos_type
    return {key: value for key, value in fields.items() if value is not None}


@click.group(
    cls=CoffeeGroup,
    examples="""\
  campuscoffee pos list
  campuscoffee pos get 1
  campuscoffee pos create --name "Schmelzpunkt" --type CAFE --campus ALTSTADT \\
      --street "Hauptstraße" --house-number 90 --postal-code 69117 --city Heidelberg
  campuscoffee pos update 1 --description "Great croissants"
  campuscoffee pos delete 1""",
)
def pos() -> None:
    """Manage points of sale."""


@pos.command("list")
@click.pass_obj
def list_pos(app: AppContext) -> None:
    """List all points of sale."""
    items = app.pos_service.get_all()
    app.emit(
        "list_pos",
        {"count": len(items), "items": [item.model_dump(mode="json") for item in items]},
    )


@pos.command("get")
@click.argument("pos_id", type=int)
@click.pass_obj
def get_pos(app: AppContext, pos_id: int) -> None:
    """Show one point of sale by ID."""
    found = app.pos_service.get_by_id(pos_id)
    app.emit("get_pos", found.model_dump(mode="json"))


@pos.command("create")
@_pos_options(required=True)
@click.pass_obj
def create_pos(app: AppContext, pos_type: str, **fields: Any) -> None:
    """Create a point of sale."""
    created = app.pos_service.upsert(Pos(**_collect_fields(pos_type, **fields)))
    app.emit("create_pos", created.model_dump(mode="json"))


@pos.command("update")
@click.argument("pos_id", type=int)
@_pos_options(required=False)
@click.pass_obj
def update_pos(app: AppContext, pos_id: int, pos_type: str | None, **fields: Any) -> None:
    """Update a point of sale; omitted options keep their stored values."""
    service = app.pos_service
    current = service.get_by_id(pos_id)
    changes = _collect_fields(pos_type, **fields)
    updated = service.upsert(Pos.model_validate({**current.model_dump(), **changes}))
    app.emit("update_pos", updated.model_dump(mode="json"))


@pos.command("delete")
@click.argument("pos_id", type=int)
@click.pass_obj
def delete_pos(app: AppContext, pos_id: int) -> None:
    """Delete a point of sale by ID."""
    app.pos_service.delete(pos_id)
    app.emit("delete_pos", {"id": pos_id})


@pos.command("clear")
@click.option("--yes", is_flag=True, help="Skip the confirmation prompt.")
@click.pass_obj
def clear_pos(app: AppContext, yes: bool) -> None:
    """Delete ALL points of sale."""
    if not yes:
        click.confirm("Delete all points of sale?", abort=True)
    app.pos_service.clear()
    app.emit("clear_pos", {"cleared": True})
