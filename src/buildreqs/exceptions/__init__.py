"""buildreqs exception hierarchy.

All exceptions can be imported from this package:
    from buildreqs.exceptions import BuildReqsError, ToolNotFoundError
"""

from __future__ import annotations

# Base exception
from buildreqs.exceptions.base import BuildReqsError

# Configuration exceptions
from buildreqs.exceptions.config import ConfigError

# Requirement check exceptions
from buildreqs.exceptions.requirements import (
    PlatformUnsupportedError,
    RequirementError,
    RequirementStateError,
    ToolNotFoundError,
    ToolVersionError,
    VersionParseError,
    VersionTooLowError,
)

# Runner exceptions
from buildreqs.exceptions.runner import (
    NonZeroExitError,
    RunnerError,
    SpawnError,
    WorkingDirectoryError,
)

__all__ = [
    # Base
    "BuildReqsError",
    # Config
    "ConfigError",
    # Requirements
    "RequirementError",
    "ToolNotFoundError",
    "VersionTooLowError",
    "PlatformUnsupportedError",
    "ToolVersionError",
    "VersionParseError",
    "RequirementStateError",
    # Runner
    "RunnerError",
    "WorkingDirectoryError",
    "SpawnError",
    "NonZeroExitError",
]
