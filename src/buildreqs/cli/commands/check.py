from __future__ import annotations

import click

from buildreqs.cli.console import console
from buildreqs.cli.context import CLIContext, ExitCode, async_command
from buildreqs.cli.output import (
    INCOMPLETE_NOTICE,
    OutputFormat,
    format_requirement_line,
    format_requirements_json,
)
from buildreqs.requirements import RequirementOrchestrator


@click.command()
@click.option(
    "-f",
    "--format",
    "fmt",
    type=click.Choice([f.value for f in OutputFormat]),
    default=None,
    help="Output format (default from config: text).",
)
@click.pass_context
@async_command
async def check(ctx: click.Context, fmt: str | None) -> None:
    """Check that this machine can build OS X apps.

    Requirements are checked in order. If Apple OS X is not detected, the
    remaining requirements are skipped and left out of the output.

    Examples:
        buildreqs check
        buildreqs check --format json
    """
    cli_ctx: CLIContext = ctx.obj["cli_ctx"]
    output_format = OutputFormat(fmt or cli_ctx.config.output.format)

    report = await RequirementOrchestrator().run()

    if output_format == OutputFormat.JSON:
        click.echo(format_requirements_json(report.requirements))
    else:
        console.print("Requirements check results for osx:")
        for requirement in report.requirements:
            console.print(format_requirement_line(requirement), soft_wrap=True)
        if not report.complete:
            console.print(INCOMPLETE_NOTICE, style="yellow")

    ctx.exit(ExitCode.SUCCESS if report.success else ExitCode.FAILURE)
