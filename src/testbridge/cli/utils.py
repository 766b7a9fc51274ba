# src/testbridge/cli/utils.py

import logging

import click
import structlog

from testbridge.compiler import RequestDispatcher
from testbridge.config import BridgeConfig
from testbridge.runner import get_test_runner
from testbridge.telemetry import setup_logging as core_setup_logging
from testbridge.tools import TestRunnerService, ToolResult

log = structlog.get_logger("cli.utils")

LOG_LEVEL_CHOICES = click.Choice(list(logging._nameToLevel.keys()), case_sensitive=False)


def logging_options(f):
    """Decorator to add logging options to any command."""
    f = click.option(
        "-l",
        "--log-level",
        type=LOG_LEVEL_CHOICES,
        default=None,
        envvar="TESTBRIDGE_LOG_LEVEL",
        help="Set the logging level (overrides config file).",
    )(f)
    f = click.option(
        "--log-file",
        type=click.Path(dir_okay=False, writable=True, resolve_path=True),
        default=None,
        envvar="TESTBRIDGE_LOG_FILE",
        help="Path to write logs to a file (JSON format).",
    )(f)
    f = click.option(
        "--json-logs",
        is_flag=True,
        default=None,
        envvar="TESTBRIDGE_JSON_LOGS",
        help="Output console logs as JSON.",
    )(f)
    return f


def setup_logging_from_context(
    ctx: click.Context,
    default_log_level: str = "INFO",
) -> None:
    """
    Setup logging using context values.
    """
    log_level_str = ctx.obj.get("LOG_LEVEL") or default_log_level
    log_file_path = ctx.obj.get("LOG_FILE")
    use_json_logs = ctx.obj.get("JSON_LOGS", False)

    numeric_level = logging.getLevelName(log_level_str.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
        log_level_str = "INFO"

    core_setup_logging(
        level=numeric_level,
        json_logs=use_json_logs,
        log_file=log_file_path,
    )

    log.debug(
        "CLI logging initialized via utils",
        level=log_level_str,
        file=log_file_path or "console",
        json=use_json_logs,
    )


def get_config(ctx: click.Context) -> BridgeConfig:
    return ctx.obj["CONFIG"]


def build_service(config: BridgeConfig) -> TestRunnerService:
    """Wire a dispatcher and the subprocess runner from the effective config."""
    return TestRunnerService(
        dispatcher=RequestDispatcher(config.commands),
        runner=get_test_runner("subprocess"),
        working_dir=config.working_dir,
    )


def emit_tool_result(ctx: click.Context, result: ToolResult) -> None:
    """Print a tool result, exiting non-zero when it is an error."""
    if result.is_error:
        click.echo(f"Error: {result.text}", err=True)
        ctx.exit(1)
    click.echo(result.text)

# ⚙️🛠️
