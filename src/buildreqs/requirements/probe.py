"""Tool probe: locate an executable and validate its version.

Absence from PATH and a too-old version are reported as distinct errors
(ToolNotFoundError and VersionTooLowError).
"""

from __future__ import annotations

import shutil

from buildreqs.exceptions import ToolNotFoundError, VersionTooLowError
from buildreqs.logging import get_logger
from buildreqs.requirements.versions import compare_versions, get_tool_version
from buildreqs.runners import CommandRunner

__all__ = [
    "XCODEBUILD_MIN_VERSION",
    "XCODEBUILD_NOT_FOUND_MESSAGE",
    "check_tool",
    "check_xcodebuild",
]

logger = get_logger(__name__)

XCODEBUILD_MIN_VERSION = "6.0.0"

XCODEBUILD_NOT_FOUND_MESSAGE = (
    f"Please install version {XCODEBUILD_MIN_VERSION} or greater from App Store"
)


async def check_tool(
    tool: str,
    min_version: str,
    message: str = "",
    *,
    runner: CommandRunner | None = None,
) -> str:
    """Check that a tool is on PATH with at least the given version.

    Args:
        tool: Executable name, e.g. "xcodebuild".
        min_version: Minimum acceptable version (inclusive).
        message: Hint appended to every failure message.
        runner: Runner used to query the tool version.

    Returns:
        The installed version, stripped of surrounding whitespace.

    Raises:
        ToolNotFoundError: If the tool is not on PATH.
        VersionTooLowError: If the installed version is older than min_version.
        ToolVersionError: If the version cannot be retrieved.
        VersionParseError: If the retrieved version cannot be compared.
    """
    tool_path = shutil.which(tool)
    if tool_path is None:
        logger.debug("tool_probe_not_found", tool=tool)
        raise ToolNotFoundError(f"{tool} was not found. {message}", tool=tool)

    version = (await get_tool_version(tool, runner=runner)).strip()

    if compare_versions(version, min_version) < 0:
        logger.debug(
            "tool_probe_version_too_low",
            tool=tool,
            version=version,
            min_version=min_version,
        )
        raise VersionTooLowError(
            f"Cordova needs {tool} version {min_version} or greater, "
            f"you have version {version}. {message}",
            tool=tool,
            version=version,
            min_version=min_version,
        )

    logger.debug("tool_probe_passed", tool=tool, path=tool_path, version=version)
    return version


async def check_xcodebuild() -> str:
    """Check that xcodebuild is installed at XCODEBUILD_MIN_VERSION or newer."""
    return await check_tool(
        "xcodebuild", XCODEBUILD_MIN_VERSION, XCODEBUILD_NOT_FOUND_MESSAGE
    )
