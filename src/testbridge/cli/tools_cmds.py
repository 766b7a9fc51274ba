# src/testbridge/cli/tools_cmds.py

import asyncio
import json

import click
import structlog

from testbridge.cli.utils import build_service, emit_tool_result, get_config
from testbridge.telemetry import StructLogger

log: StructLogger = structlog.get_logger("cli.tools")


@click.group(name="tools")
def tools_cli():
    """Inspect and invoke the tools offered to tool-calling clients."""
    pass


@tools_cli.command(name="list")
@click.pass_context
def list_tools(ctx: click.Context):
    """Print the tool catalogue as JSON."""
    service = build_service(get_config(ctx))
    payload = {
        "serverInfo": service.server_info(),
        "tools": [spec.to_dict() for spec in service.list_tools()],
    }
    click.echo(json.dumps(payload, indent=2))


@tools_cli.command(name="call")
@click.argument("name")
@click.argument("arguments", default="{}")
@click.pass_context
def call_tool(ctx: click.Context, name: str, arguments: str):
    """Invoke tool NAME with a JSON object of ARGUMENTS."""
    try:
        parsed = json.loads(arguments)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"not valid JSON: {e}", param_hint="ARGUMENTS") from e
    if not isinstance(parsed, dict):
        raise click.BadParameter("must be a JSON object", param_hint="ARGUMENTS")

    log.debug("Calling tool from CLI", tool=name)
    service = build_service(get_config(ctx))
    emit_tool_result(ctx, asyncio.run(service.call_tool(name, parsed)))

# ⚙️🛠️
