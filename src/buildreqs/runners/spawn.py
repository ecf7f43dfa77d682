"""Process runner with inherited console I/O.

The build pipeline uses :func:`spawn` to invoke external tools (for example
``xcodebuild``) so that their output streams straight to the user's
terminal.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import TYPE_CHECKING

from buildreqs.exceptions import NonZeroExitError, SpawnError
from buildreqs.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

__all__ = ["spawn", "format_exit_error"]

logger = get_logger(__name__)


def format_exit_error(returncode: int, cmd: str, args: Sequence[str]) -> str:
    """Build the diagnostic for a command that exited with a nonzero code.

    Arguments are joined with commas.

    Example:
        >>> format_exit_error(2, "xcodebuild", ["-project", "App.xcodeproj"])
        'Error code 2 for command: xcodebuild with args: -project,App.xcodeproj'
    """
    return f"Error code {returncode} for command: {cmd} with args: {','.join(args)}"


async def spawn(
    cmd: str,
    args: Sequence[str] = (),
    cwd: Path | str | None = None,
) -> None:
    """Run a command with the parent's stdin, stdout and stderr.

    Args:
        cmd: Command to execute.
        args: Arguments passed to the command.
        cwd: Working directory for the command. Defaults to the current one.

    Raises:
        SpawnError: If the process could not be launched.
        NonZeroExitError: If the process exited with a nonzero code.
    """
    args = list(args)
    logger.debug("spawn_started", command=cmd, args=args, cwd=str(cwd) if cwd else None)

    try:
        # No pipes: the child inherits this process's standard streams.
        process = await asyncio.create_subprocess_exec(cmd, *args, cwd=cwd)
    except OSError as e:
        logger.error("spawn_failed", command=cmd, error=str(e))
        raise SpawnError(f"error caught: {e}", command=cmd, cause=e) from e

    returncode = await process.wait()
    logger.debug("spawn_exited", command=cmd, returncode=returncode)

    if returncode:
        raise NonZeroExitError(
            format_exit_error(returncode, cmd, args),
            command=cmd,
            args=args,
            returncode=returncode,
        )
