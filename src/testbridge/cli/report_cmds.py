# src/testbridge/cli/report_cmds.py

import click
import structlog

from testbridge.exceptions import ReportParseError
from testbridge.reports import extract_json_from_output, parse_results, summarize
from testbridge.telemetry import StructLogger

log: StructLogger = structlog.get_logger("cli.report")


@click.group(name="report")
def report_cli():
    """Summarize captured test framework output."""
    pass


@report_cli.command(name="cypress")
@click.argument("output_file", type=click.File("r", encoding="utf-8"))
@click.pass_context
def cypress_report(ctx: click.Context, output_file):
    """Summarize Cypress JSON reporter output read from OUTPUT_FILE ('-' for stdin)."""
    try:
        results = parse_results(extract_json_from_output(output_file.read()))
    except ReportParseError as e:
        log.error("Could not parse Cypress output", error=str(e))
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    click.echo(summarize(results))
    if results.stats.failures:
        ctx.exit(1)

# ⚙️🛠️
