"""Output formatting utilities for the buildreqs CLI."""

from __future__ import annotations

import json
from collections.abc import Sequence
from enum import Enum
from typing import Any

from rich.text import Text

from buildreqs.requirements import Requirement

__all__ = [
    "OutputFormat",
    "format_error",
    "format_json",
    "format_requirement_line",
    "format_requirements_json",
    "INCOMPLETE_NOTICE",
]

INCOMPLETE_NOTICE = (
    "Remaining requirements were not checked because a fatal requirement failed."
)


class OutputFormat(str, Enum):
    """Supported output formats for CLI commands.

    Values:
        TEXT: Human-readable checklist.
        JSON: Machine-readable JSON array of requirement records.
    """

    TEXT = "text"
    JSON = "json"


def format_error(
    message: str, details: list[str] | None = None, suggestion: str | None = None
) -> str:
    """Format an error message with optional details and suggestion.

    Example:
        >>> print(format_error("spawn failed", suggestion="Check PATH"))
        Error: spawn failed
        Suggestion: Check PATH
    """
    lines = [f"Error: {message}"]

    if details:
        for detail in details:
            lines.append(f"  {detail}")

    if suggestion:
        lines.append(f"Suggestion: {suggestion}")

    return "\n".join(lines)


def format_json(data: Any) -> str:
    """Format data as indented JSON."""
    return json.dumps(data, indent=2)


def format_requirements_json(requirements: Sequence[Requirement]) -> str:
    """Serialize evaluated requirements as a JSON array."""
    return format_json([r.to_dict() for r in requirements])


def format_requirement_line(requirement: Requirement) -> Text:
    """Render one checklist line.

    Example output:
        ✓ Xcode: installed 7.2.1
        ✗ Apple OS X (fatal): Cordova tooling for OSX requires Apple OS X
    """
    label = requirement.name
    if requirement.is_fatal:
        label += " (fatal)"

    if requirement.installed:
        line = Text("✓ ", style="green")
        line.append(f"{label}: installed {requirement.metadata['version']}")
    else:
        line = Text("✗ ", style="red")
        line.append(f"{label}: {requirement.metadata.get('reason', 'not checked')}")
    return line
