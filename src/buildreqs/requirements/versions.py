"""Tool version retrieval and comparison.

- compare_versions: order two dotted numeric version strings
- get_tool_version: ask a known tool for its installed version
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from packaging.version import InvalidVersion, Version

from buildreqs.exceptions import ToolVersionError, VersionParseError
from buildreqs.logging import get_logger
from buildreqs.runners import CommandRunner

__all__ = [
    "ToolVersionQuery",
    "KNOWN_TOOLS",
    "compare_versions",
    "parse_version",
    "get_tool_version",
]

logger = get_logger(__name__)

#: Only digits separated by dots; missing trailing segments count as zero.
DOTTED_VERSION_PATTERN = re.compile(r"[0-9]+(\.[0-9]+)*")


@dataclass(frozen=True, slots=True)
class ToolVersionQuery:
    """How to ask a tool for its version.

    Attributes:
        command: Command and arguments that print the version.
        pattern: Regex whose first group captures the version.
    """

    command: tuple[str, ...]
    pattern: re.Pattern[str]


KNOWN_TOOLS: dict[str, ToolVersionQuery] = {
    # `xcodebuild -version` prints "Xcode 7.2.1" then "Build version 7C1002"
    "xcodebuild": ToolVersionQuery(
        command=("xcodebuild", "-version"),
        pattern=re.compile(r"Xcode (.*)"),
    ),
}


def parse_version(version: str) -> Version:
    """Parse a dotted numeric version string.

    Raises:
        VersionParseError: If the string has anything but digits and dots.
    """
    if not DOTTED_VERSION_PATTERN.fullmatch(version):
        raise VersionParseError(
            f"Version should contain only numbers and dots, got '{version}'",
            version=version,
        )
    try:
        return Version(version)
    except InvalidVersion as e:
        raise VersionParseError(str(e), version=version) from e


def compare_versions(version_a: str, version_b: str) -> int:
    """Compare two dotted numeric versions.

    Returns:
        -1 if version_a is older, 0 if equal, 1 if newer.

    Raises:
        VersionParseError: If either version is malformed.

    Example:
        >>> compare_versions("6.0", "6.0.0")
        0
        >>> compare_versions("5.9.9", "6.0.0")
        -1
    """
    a = parse_version(version_a)
    b = parse_version(version_b)
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


async def get_tool_version(
    tool: str,
    *,
    runner: CommandRunner | None = None,
) -> str:
    """Return the version string a tool reports for itself.

    Args:
        tool: Tool name. Must be one of KNOWN_TOOLS.
        runner: Runner used to invoke the tool. Defaults to a new CommandRunner.

    Returns:
        The raw version string (not stripped).

    Raises:
        ToolVersionError: If the tool is unknown, fails, or prints no version.
    """
    query = KNOWN_TOOLS.get(tool)
    if query is None:
        valid = ", ".join(f"'{name}'" for name in KNOWN_TOOLS)
        raise ToolVersionError(
            f"{tool} is not valid tool name. Valid names are: {valid}",
            tool=tool,
        )

    runner = runner or CommandRunner()
    result = await runner.run(query.command)

    if not result.success:
        logger.debug(
            "tool_version_command_failed",
            tool=tool,
            returncode=result.returncode,
        )
        raise ToolVersionError(
            result.stderr.strip() or f"{tool} exited with code {result.returncode}",
            tool=tool,
        )

    match = query.pattern.search(result.stdout)
    if match is None:
        raise ToolVersionError(
            f"Unable to determine {tool} version from output: "
            f"{result.output.strip()}",
            tool=tool,
        )
    return match.group(1)
