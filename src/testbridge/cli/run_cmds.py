# src/testbridge/cli/run_cmds.py

import asyncio

import click
import structlog

from testbridge.cli.utils import build_service, emit_tool_result, get_config
from testbridge.compiler import RunCargoTests, RunSpecFile
from testbridge.telemetry import StructLogger

log: StructLogger = structlog.get_logger("cli.run")


@click.group(name="run")
def run_cli():
    """Validate, compile and run a test request, printing its output."""
    pass


@run_cli.command(name="rspec")
@click.argument("location")
@click.pass_context
def run_rspec(ctx: click.Context, location: str):
    """Run an RSpec LOCATION such as spec/models/user_spec.rb:37."""
    log.debug("Running RSpec request from CLI", location=location)
    service = build_service(get_config(ctx))
    result = asyncio.run(service.run_request(RunSpecFile(raw_location=location)))
    emit_tool_result(ctx, result)


@run_cli.command(name="cargo")
@click.option("-p", "--pattern", default=None, help="Test name pattern.")
@click.argument("extra_args", nargs=-1)
@click.pass_context
def run_cargo(ctx: click.Context, pattern: str | None, extra_args: tuple[str, ...]):
    """Run Cargo tests. Pass flags for cargo after '--'."""
    log.debug("Running Cargo request from CLI", pattern=pattern, extra_args=extra_args)
    service = build_service(get_config(ctx))
    result = asyncio.run(service.run_request(RunCargoTests(pattern=pattern, extra_args=extra_args)))
    emit_tool_result(ctx, result)

# ⚙️🛠️
