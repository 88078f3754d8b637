# src/hybrid_bar/cli/cmd_config.py

"""
Commands for inspecting the cached configuration as a whole.
"""

from __future__ import annotations

import click
from loguru import logger

from hybrid_bar.core.errors import ConfigError
from hybrid_bar.core.variables import MAX_VARIABLES

from ._errors import fatal


@click.command(name="config")
@click.pass_context
def cmd_config(ctx):
    """
    Show a summary of the active configuration.
    """
    logger.debug("Config summary command")

    app = ctx.obj["app"]
    try:
        _show_config_summary(app)
    except ConfigError as err:
        fatal(err)


@click.command(name="variables")
@click.pass_context
def cmd_variables(ctx):
    """
    List variables in the order they are substituted.
    """
    try:
        table = ctx.obj["app"].variables()
    except ConfigError as err:
        fatal(err)

    if not table:
        click.echo("No variables defined.")
        return

    for index, variable in enumerate(table, start=1):
        click.echo(f"{index:>3}  {variable.name} = {variable.value}")


# =====================================================================
# Internal: summary printer
# =====================================================================

def _show_config_summary(app):
    cache = app.cache

    click.echo("  Active config file:")
    click.echo(f"    {cache.loaded_from}")

    click.echo("\n  Sections:")
    for name in cache.sections():
        section = cache.section(name)
        if section is None:
            click.echo(f"    • {name:<20} (not a section)")
            continue
        click.echo(f"    • {name:<20} {len(section)} keys")

    # Validates the variable cap as a side effect.
    variables = app.variables()

    click.echo("\n  [hybrid]")
    click.echo(f"    update_rate    = {app.get_update_rate()} ms")
    click.echo(f"    variables      = {len(variables)} / {MAX_VARIABLES}")
