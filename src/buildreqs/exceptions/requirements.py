"""Requirement check exceptions.

Every exception here is raised by a requirement check function to report
that the requirement is not met. The orchestrator records ``str(error)`` as
the requirement's failure reason instead of letting it propagate.
"""

from __future__ import annotations

from buildreqs.exceptions.base import BuildReqsError

__all__ = [
    "RequirementError",
    "ToolNotFoundError",
    "VersionTooLowError",
    "PlatformUnsupportedError",
    "ToolVersionError",
    "VersionParseError",
    "RequirementStateError",
]


class RequirementError(BuildReqsError):
    """Base exception for a requirement that is not satisfied.

    Attributes:
        message: Human-readable error message.
    """

    pass


class ToolNotFoundError(RequirementError):
    """Tool executable could not be resolved on PATH.

    Attributes:
        message: Human-readable error message.
        tool: Name of the tool that was looked up.
    """

    def __init__(self, message: str, tool: str | None = None) -> None:
        self.tool = tool
        super().__init__(message)


class VersionTooLowError(RequirementError):
    """Tool was found but reports a version below the required minimum.

    Attributes:
        message: Human-readable error message.
        tool: Name of the tool.
        version: Version the tool reported.
        min_version: Minimum version that was required.
    """

    def __init__(
        self,
        message: str,
        tool: str | None = None,
        version: str | None = None,
        min_version: str | None = None,
    ) -> None:
        self.tool = tool
        self.version = version
        self.min_version = min_version
        super().__init__(message)


class PlatformUnsupportedError(RequirementError):
    """Host operating system is not supported.

    Attributes:
        message: Human-readable error message.
        platform: Platform identifier of the host (e.g., "linux").
    """

    def __init__(self, message: str, platform: str | None = None) -> None:
        self.platform = platform
        super().__init__(message)


class ToolVersionError(RequirementError):
    """The installed version of a tool could not be retrieved.

    Attributes:
        message: Human-readable error message.
        tool: Name of the tool.
    """

    def __init__(self, message: str, tool: str | None = None) -> None:
        self.tool = tool
        super().__init__(message)


class VersionParseError(RequirementError):
    """A version string is not a dotted numeric version.

    Attributes:
        message: Human-readable error message.
        version: The offending version string.
    """

    def __init__(self, message: str, version: str | None = None) -> None:
        self.version = version
        super().__init__(message)


class RequirementStateError(BuildReqsError):
    """An outcome was recorded on a requirement that already has one.

    Raised by ``Requirement.record()``. Not a ``RequirementError``: an
    unmet requirement never raises it. Like any ``BuildReqsError``, it is
    recorded as ``Missing`` if a check function raises it.
    """

    pass
