# src/testbridge/cli/compile_cmds.py

import json

import click
import structlog

from testbridge.cli.utils import get_config
from testbridge.compiler import (
    Rejection,
    RequestDispatcher,
    RunCargoTests,
    RunSpecFile,
    TestRunnerRequest,
)
from testbridge.telemetry import StructLogger

log: StructLogger = structlog.get_logger("cli.compile")

json_option = click.option(
    "--json", "as_json", is_flag=True, help="Print the program and arguments as JSON."
)


@click.group(name="compile")
def compile_cli():
    """Show the command a request compiles to, without running it."""
    pass


def _emit(ctx: click.Context, request: TestRunnerRequest, as_json: bool) -> None:
    dispatcher = RequestDispatcher(get_config(ctx).commands)
    outcome = dispatcher.dispatch(request)
    if isinstance(outcome, Rejection):
        click.echo(f"Error: {outcome.describe()}", err=True)
        ctx.exit(1)

    log.info("Compiled command", command=outcome.display(), emoji_key="compile")
    if as_json:
        click.echo(json.dumps({"program": outcome.program, "arguments": list(outcome.arguments)}))
    else:
        click.echo(outcome.display())


@compile_cli.command(name="rspec")
@click.argument("location")
@json_option
@click.pass_context
def compile_rspec(ctx: click.Context, location: str, as_json: bool):
    """Compile an RSpec LOCATION such as spec/models/user_spec.rb:37:87."""
    _emit(ctx, RunSpecFile(raw_location=location), as_json)


@compile_cli.command(name="cargo")
@click.option("-p", "--pattern", default=None, help="Test name pattern.")
@click.argument("extra_args", nargs=-1)
@json_option
@click.pass_context
def compile_cargo(ctx: click.Context, pattern: str | None, extra_args: tuple[str, ...], as_json: bool):
    """Compile a Cargo test run. Pass flags for cargo after '--'."""
    _emit(ctx, RunCargoTests(pattern=pattern, extra_args=extra_args), as_json)

# ⚙️🛠️
