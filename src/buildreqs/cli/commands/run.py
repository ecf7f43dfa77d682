from __future__ import annotations

from pathlib import Path

import click

from buildreqs.cli.console import err_console
from buildreqs.cli.context import ExitCode, async_command
from buildreqs.cli.output import format_error
from buildreqs.exceptions import NonZeroExitError, SpawnError
from buildreqs.runners import spawn


@click.command(
    context_settings={
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
    }
)
@click.option(
    "--cwd",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Working directory for the command.",
)
@click.argument("command")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
@async_command
async def run(
    ctx: click.Context,
    cwd: Path | None,
    command: str,
    args: tuple[str, ...],
) -> None:
    """Run COMMAND with the terminal passed through.

    Everything after COMMAND is passed to it untouched, options included.
    Exits with the command's own exit code when it fails.

    Examples:
        buildreqs run xcodebuild -version
        buildreqs run --cwd platforms/osx xcodebuild -project App.xcodeproj
    """
    try:
        await spawn(command, args, cwd=cwd)
    except NonZeroExitError as e:
        err_console.print(format_error(e.message), markup=False, highlight=False)
        # Signal-terminated children report a negative code
        code = e.returncode if e.returncode and e.returncode > 0 else ExitCode.FAILURE
        ctx.exit(code)
    except SpawnError as e:
        err_console.print(format_error(e.message), markup=False, highlight=False)
        ctx.exit(ExitCode.FAILURE)
