# src/hybrid_bar/cli/_main.py

import click
from loguru import logger

from hybrid_bar.core.config import AppContext
from hybrid_bar.core.errors import ConfigError
from hybrid_bar.config_logger import init_logging

from ._errors import fatal

from .cmd_get import cmd_get, cmd_update_rate
from .cmd_config import cmd_config, cmd_variables


@click.group(
    invoke_without_command=True,
    context_settings={"max_content_width": 120},
)
@click.option(
    "--log-level",
    type=click.Choice(
        ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"],
        case_sensitive=False,
    ),
    help="Override the log level defined in the config file.",
)
@click.option(
    "--config-file",
    type=click.Path(dir_okay=False),
    help="Load an alternate config file instead of ~/.config/HybridBar/$HYBRID_CONFIG.",
)
@click.pass_context
def cli(ctx, log_level, config_file):
    """
    hybrid-config: inspect the Hybrid Bar configuration.

    \b
    Examples:
        hybrid-config get hybrid title        string value, variables applied
        hybrid-config get hybrid title --raw  string value as written
        hybrid-config get hybrid update_rate --int
        hybrid-config update-rate             effective refresh interval (ms)
        hybrid-config variables               variable table in substitution order
    """

    ctx.ensure_object(dict)

    # ------------------------------------------------------------
    # Load CONFIG FILE (default OR user override)
    # ------------------------------------------------------------
    app = AppContext.from_file(config_file)
    try:
        app.refresh()
    except ConfigError as err:
        fatal(err)

    ctx.obj["app"] = app

    # ------------------------------------------------------------
    # Initialize logging AFTER config is known
    # ------------------------------------------------------------
    ctx.obj["log_level_effective"] = init_logging(level=log_level, cache=app.cache)
    logger.debug(f"Loaded configuration from: {app.cache.loaded_from}")

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        click.echo("\nRun 'hybrid-config config' to see a configuration summary.")
        ctx.exit(0)


# Attach subcommands
cli.add_command(cmd_get)
cli.add_command(cmd_update_rate)
cli.add_command(cmd_config)
cli.add_command(cmd_variables)
