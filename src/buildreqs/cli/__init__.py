"""CLI utilities for buildreqs."""

from __future__ import annotations

from buildreqs.cli.context import CLIContext, ExitCode, async_command
from buildreqs.cli.output import OutputFormat

__all__ = [
    "CLIContext",
    "ExitCode",
    "OutputFormat",
    "async_command",
]
