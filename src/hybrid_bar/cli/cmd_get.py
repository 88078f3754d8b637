# src/hybrid_bar/cli/cmd_get.py

"""
Value lookup commands.
"""

from __future__ import annotations

import click
from loguru import logger

from hybrid_bar.core.errors import ConfigError

from ._errors import fatal

EXIT_NOT_FOUND = 2


@click.command(name="get")
@click.argument("root")
@click.argument("key")
@click.option(
    "--int",
    "as_int",
    is_flag=True,
    help="Read the value as a 32-bit integer.",
)
@click.option(
    "--raw",
    is_flag=True,
    help="Skip variable substitution for string values.",
)
@click.pass_context
def cmd_get(ctx, root, key, as_int, raw):
    """
    Print the value of ROOT:KEY.

    Exits with status 2 when the value is not set.
    """
    app = ctx.obj["app"]

    try:
        value = app.try_get(root, key, not as_int, not raw)
    except ConfigError as err:
        fatal(err)

    if value is None:
        logger.warning(f"{root}:{key} is not set")
        ctx.exit(EXIT_NOT_FOUND)

    click.echo(value.integer if as_int else value.string)


@click.command(name="update-rate")
@click.pass_context
def cmd_update_rate(ctx):
    """
    Print the effective update rate in milliseconds.
    """
    try:
        click.echo(ctx.obj["app"].get_update_rate())
    except ConfigError as err:
        fatal(err)
