"""Root CLI group for campuscoffee with global flags and command registration."""

from __future__ import annotations

import click

from campuscoffee import __version__
from campuscoffee.commands import register_commands
from campuscoffee.commands._context import AppContext
from campuscoffee.config.settings import CoffeeSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="campuscoffee")
@click.option("-v", "--verbose", count=True, help="More log output (-v INFO, -vv DEBUG).")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("--database-url", default=None, help="SQLAlchemy database URL.")
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    log_json: bool,
    config_path: str | None,
    database_url: str | None,
) -> None:
    """campuscoffee: manage campus coffee points of sale."""
    flags: dict[str, int | bool] = {}
    # Unset flags must not shadow env/TOML values
    if verbose:
        flags["verbose"] = verbose
    if log_json:
        flags["log_json"] = True
    settings = CoffeeSettings.from_cli(
        config_path=config_path,
        database_url=database_url,
        **flags,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
