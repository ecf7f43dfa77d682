from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from buildreqs.exceptions.base import BuildReqsError


class RunnerError(BuildReqsError):
    """Base exception for runner failures.

    Attributes:
        message: Human-readable error message.
    """

    pass


class WorkingDirectoryError(RunnerError):
    """Working directory does not exist or is not accessible.

    Attributes:
        message: Human-readable error message.
        path: The path that was not found.
    """

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        """Initialize the WorkingDirectoryError.

        Args:
            message: Human-readable error message.
            path: The path that was not found.
        """
        self.path = path
        super().__init__(message)


class SpawnError(RunnerError):
    """The child process could not be launched at all.

    Raised before any exit code exists, e.g. when the executable is missing
    or not executable.

    Attributes:
        message: Human-readable error message.
        command: The command that failed to launch.
        cause: The original OS-level exception.
    """

    def __init__(
        self,
        message: str,
        command: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        """Initialize the SpawnError.

        Args:
            message: Human-readable error message.
            command: The command that failed to launch.
            cause: The original exception raised by the spawn attempt.
        """
        self.command = command
        self.cause = cause
        super().__init__(message)


class NonZeroExitError(RunnerError):
    """A spawned process exited with a nonzero exit code.

    Attributes:
        message: Human-readable error message.
        command: The command that was run.
        args: Arguments passed to the command.
        returncode: Exit code reported by the process.
    """

    def __init__(
        self,
        message: str,
        command: str | None = None,
        args: Sequence[str] = (),
        returncode: int | None = None,
    ) -> None:
        """Initialize the NonZeroExitError.

        Args:
            message: Human-readable error message.
            command: The command that was run.
            args: Arguments passed to the command.
            returncode: Exit code reported by the process.
        """
        self.command = command
        self.args_list = tuple(args)
        self.returncode = returncode
        super().__init__(message)
