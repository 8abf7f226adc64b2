"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Provides lazy database initialization and
centralized result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, NoReturn

import click
from pydantic import ValidationError

from campuscoffee.commands._result import CommandError, CommandResult
from campuscoffee.config.logging import configure_logging
from campuscoffee.domain.exceptions import DuplicationError, NotFoundError

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

    from campuscoffee.config.settings import CoffeeSettings
    from campuscoffee.services.pos import PosService


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The database is initialized on first use so ``--help`` and
    ``--version`` never touch it.
    """

    def __init__(self, settings: CoffeeSettings) -> None:
        self.settings = settings
        self._engine: Engine | None = None
        self._pos_service: PosService | None = None

        configure_logging(
            verbose=settings.verbose,
            log_json=settings.log_json,
            sql_echo=settings.database.echo,
        )

    @property
    def engine(self) -> Engine:
        """The database engine (created lazily, tables ensured)."""
        if self._engine is None:
            from campuscoffee.infrastructure.database.engine import init_database

            self._engine = init_database(self.settings.database.url)
        return self._engine

    @property
    def pos_service(self) -> PosService:
        if self._pos_service is None:
            from campuscoffee.services.pos import PosService

            self._pos_service = PosService.from_engine(self.engine)
        return self._pos_service

    def emit(self, op: str, data: dict[str, Any]) -> None:
        """Write a success envelope to stdout."""
        result = CommandResult(ok=True, op=op, data=data)
        click.echo(result.model_dump_json(indent=2))

    def fail(self, op: str, exc: Exception) -> NoReturn:
        """Write an error envelope for *exc* to stderr and exit with code 1."""
        result = CommandResult(ok=False, op=op, error=_to_error(exc))
        click.echo(result.model_dump_json(indent=2), err=True)
        raise SystemExit(1)


def _to_error(exc: Exception) -> CommandError:
    if isinstance(exc, NotFoundError):
        return CommandError(code="NOT_FOUND", message=str(exc), detail={"id": exc.id})
    if isinstance(exc, DuplicationError):
        return CommandError(
            code="DUPLICATE",
            message=str(exc),
            detail={"field": exc.field, "value": exc.value},
        )
    if isinstance(exc, ValidationError):
        errors = [
            {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
            for err in exc.errors()
        ]
        return CommandError(
            code="INVALID_INPUT",
            message=f"{exc.error_count()} invalid field(s)",
            detail={"errors": errors},
        )
    return CommandError(code="INVALID_INPUT", message=str(exc))
