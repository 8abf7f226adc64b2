"""Click classes shared by the campuscoffee command groups.

:class:`CoffeeCommand` turns domain and validation failures raised by a
command body into the JSON error envelope, so command functions only
handle the success path. :class:`CoffeeGroup` makes that the default
command class and adds an ``--examples`` flag to the group.
"""

from __future__ import annotations

from typing import Any

import click
from pydantic import ValidationError

from campuscoffee.commands._context import AppContext
from campuscoffee.domain.exceptions import CampusCoffeeError

# Failures reported as an error envelope; anything else is a crash.
REPORTED_ERRORS: tuple[type[Exception], ...] = (CampusCoffeeError, ValidationError)


class CoffeeCommand(click.Command):
    """Command whose reported errors become ``{"ok": false}`` envelopes.

    The envelope's ``op`` is ``<command>_<group>`` (``get_pos``) unless
    ``op=`` is given explicitly.
    """

    def __init__(self, *args: Any, op: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.op = op

    def op_name(self, ctx: click.Context) -> str:
        if self.op:
            return self.op
        if ctx.parent is not None and ctx.parent.command.name:
            return f"{self.name}_{ctx.parent.command.name}"
        return self.name or "unknown"

    def invoke(self, ctx: click.Context) -> Any:
        try:
            return super().invoke(ctx)
        except REPORTED_ERRORS as exc:
            app = ctx.find_object(AppContext)
            if app is None:
                raise
            app.fail(self.op_name(ctx), exc)


class CoffeeGroup(click.Group):
    """Group of :class:`CoffeeCommand` with an optional ``--examples`` flag."""

    command_class = CoffeeCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples

    def get_params(self, ctx: click.Context) -> list[click.Parameter]:
        params = super().get_params(ctx)
        if self.examples:
            return [*params, _examples_option(self.examples)]
        return params


def _examples_option(examples: str) -> click.Option:
    def show(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if value and not ctx.resilient_parsing:
            click.echo(f"Examples for '{ctx.command_path}':\n\n{examples}")
            ctx.exit(0)

    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=show,
        help="Show usage examples.",
    )
