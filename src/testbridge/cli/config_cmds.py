# src/testbridge/cli/config_cmds.py

import click
import structlog
from rich.pretty import pretty_repr

from testbridge.cli.utils import get_config
from testbridge.telemetry import StructLogger

log: StructLogger = structlog.get_logger("cli.config")


@click.group(name="config")
def config_cli():
    """Commands for inspecting configuration."""
    pass


@config_cli.command(name="show")
@click.pass_context
def show_config(ctx: click.Context):
    """Display the effective configuration after all overrides."""
    config = get_config(ctx)
    log.info("Executing 'config show' command", emoji_key="config")
    # pretty_repr returns a plain string, which keeps the output testable.
    click.echo(pretty_repr(config, expand_all=True))

# ⚙️🛠️
