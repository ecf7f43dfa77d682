"""Command runner for capturing the output of external tools.

This module provides the CommandRunner class used by requirement checks to
ask a tool for its version. Output is captured through pipes, unlike
``buildreqs.runners.spawn`` which passes the terminal through.
"""

from __future__ import annotations

import asyncio
import os
import time
from pathlib import Path
from typing import TYPE_CHECKING

from buildreqs.exceptions import WorkingDirectoryError
from buildreqs.logging import get_logger
from buildreqs.runners.models import CommandResult

if TYPE_CHECKING:
    from collections.abc import Sequence

__all__ = ["CommandRunner"]

logger = get_logger(__name__)


class CommandRunner:
    """Execute commands and capture their output.

    There is deliberately no timeout: a tool that never exits blocks the
    caller until it does.

    Attributes:
        cwd: Working directory for command execution.
        env: Additional environment variables to merge with parent env.

    Example:
        ```python
        runner = CommandRunner()
        result = await runner.run(["xcodebuild", "-version"])
        if result.success:
            print(result.stdout)
        ```
    """

    def __init__(
        self,
        cwd: Path | None = None,
        env: dict[str, str] | None = None,
    ) -> None:
        """Initialize the CommandRunner.

        Args:
            cwd: Working directory for commands. If None, uses current directory.
            env: Additional environment variables to merge with os.environ.
        """
        self._cwd = cwd
        self._extra_env = env or {}

    @property
    def cwd(self) -> Path | None:
        """Working directory for command execution."""
        return self._cwd

    def _validate_cwd(self, cwd: Path | None) -> None:
        """Validate working directory exists.

        Raises:
            WorkingDirectoryError: If directory does not exist.
        """
        if cwd is not None and not cwd.is_dir():
            raise WorkingDirectoryError(
                f"Working directory does not exist: {cwd}",
                path=cwd,
            )

    def _build_env(self, extra_env: dict[str, str] | None = None) -> dict[str, str]:
        env = os.environ.copy()
        env.update(self._extra_env)
        if extra_env:
            env.update(extra_env)
        return env

    async def run(
        self,
        command: Sequence[str],
        *,
        cwd: Path | None = None,
        env: dict[str, str] | None = None,
    ) -> CommandResult:
        """Execute a command and return the captured result.

        Args:
            command: Command and arguments as a sequence (no shell expansion).
            cwd: Override working directory for this command.
            env: Additional environment variables for this command.

        Returns:
            CommandResult with returncode, stdout, stderr, duration_ms.

        Raises:
            WorkingDirectoryError: If working directory does not exist.
        """
        effective_cwd = cwd if cwd is not None else self._cwd
        self._validate_cwd(effective_cwd)
        effective_env = self._build_env(env)

        start_time = time.monotonic()
        returncode = 0
        stdout_str = ""
        stderr_str = ""

        logger.debug("command_started", command=list(command))

        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                cwd=effective_cwd,
                env=effective_env,
            )
            stdout_bytes, stderr_bytes = await process.communicate()
            returncode = process.returncode or 0
            stdout_str = stdout_bytes.decode("utf-8", errors="replace")
            stderr_str = stderr_bytes.decode("utf-8", errors="replace")

        except FileNotFoundError:
            returncode = 127
            stderr_str = f"Command not found: {command[0]}"
        except PermissionError:
            returncode = 126
            stderr_str = f"Permission denied: {command[0]}"
        except OSError as e:
            # e.g. ENOEXEC for a file that is not a valid executable
            returncode = 126
            stderr_str = f"Cannot execute {command[0]}: {e}"

        duration_ms = int((time.monotonic() - start_time) * 1000)

        logger.debug(
            "command_finished",
            command=list(command),
            returncode=returncode,
            duration_ms=duration_ms,
        )

        return CommandResult(
            returncode=returncode,
            stdout=stdout_str,
            stderr=stderr_str,
            duration_ms=duration_ms,
        )
