# src/testbridge/cli/main.py

"""
Main CLI entry point for testbridge using Click.
Handles global options like logging level and the base commands.
"""

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

import click
import structlog

from testbridge.cli.compile_cmds import compile_cli
from testbridge.cli.config_cmds import config_cli
from testbridge.cli.report_cmds import report_cli
from testbridge.cli.run_cmds import run_cli
from testbridge.cli.tools_cmds import tools_cli
from testbridge.cli.utils import logging_options, setup_logging_from_context
from testbridge.config import apply_overrides, load_config
from testbridge.exceptions import ConfigurationError
from testbridge.telemetry import StructLogger

try:
    __version__ = version("testbridge")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

log: StructLogger = structlog.get_logger("cli.main")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-V", "--version", package_name="testbridge")
@click.option(
    "-c",
    "--config-path",
    type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True, path_type=Path),
    default=None,
    envvar="TESTBRIDGE_CONF",
    help="Path to a testbridge TOML configuration file (env var TESTBRIDGE_CONF).",
    show_envvar=True,
)
@click.option(
    "--rspec-command",
    default=None,
    envvar="TESTBRIDGE_RSPEC_COMMAND",
    help="Base command for RSpec runs, e.g. 'bundle exec rspec'.",
    show_envvar=True,
)
@click.option(
    "--cargo-command",
    default=None,
    envvar="TESTBRIDGE_CARGO_COMMAND",
    help="Base command for Cargo runs, e.g. 'cargo test'.",
    show_envvar=True,
)
@click.option(
    "-C",
    "--working-dir",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
    default=None,
    envvar="TESTBRIDGE_WORKING_DIR",
    help="Directory test commands run in.",
)
@logging_options
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: Path | None,
    rspec_command: str | None,
    cargo_command: str | None,
    working_dir: Path | None,
    log_level: str | None,
    log_file: str | None,
    json_logs: bool | None,
):
    """
    Testbridge: run RSpec and Cargo tests on behalf of tool-calling clients.

    Requests are validated and compiled into argument vectors before any
    process is started.
    Configuration precedence: CLI options > Environment Variables > Config File > Defaults.
    """
    ctx.ensure_object(dict)

    ctx.obj["LOG_LEVEL"] = log_level
    ctx.obj["LOG_FILE"] = log_file
    ctx.obj["JSON_LOGS"] = json_logs if json_logs is not None else False

    # Configure logging before anything logs; structlog defaults write to stdout.
    setup_logging_from_context(
        ctx, default_log_level="WARNING"
    )

    try:
        config = apply_overrides(
            load_config(config_path),
            rspec_base=rspec_command,
            cargo_base=cargo_command,
            working_dir=working_dir,
        )
    except ConfigurationError as e:
        click.echo(f"Error: Configuration problem: {e}", err=True)
        ctx.exit(2)

    ctx.obj["CONFIG"] = config
    if log_level is None and config_path is not None:
        ctx.obj["LOG_LEVEL"] = config.global_config.log_level
        setup_logging_from_context(ctx)

    log.debug(
        "Main CLI group initialized",
        config_path=str(config_path) if config_path else None,
        rspec_base=config.commands.rspec_base,
        cargo_base=config.commands.cargo_base,
        log_level=log_level,
    )


cli.add_command(compile_cli)
cli.add_command(config_cli)
cli.add_command(report_cli)
cli.add_command(run_cli)
cli.add_command(tools_cli)

if __name__ == "__main__":
    cli()

# 🖥️⚙️
