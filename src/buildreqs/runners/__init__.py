"""Subprocess execution for buildreqs.

- CommandRunner: capture a tool's output (used for version probing)
- spawn: run a build tool with the terminal passed through
"""

from __future__ import annotations

from buildreqs.runners.command import CommandRunner
from buildreqs.runners.models import CommandResult
from buildreqs.runners.spawn import format_exit_error, spawn

__all__ = [
    "CommandResult",
    "CommandRunner",
    "spawn",
    "format_exit_error",
]
