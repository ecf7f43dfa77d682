"""Build requirement checks.

Public API:
    check_all: evaluate the default requirements in order
    check_os: OS gate (Apple OS X only)
    check_xcodebuild / run: Xcode build tool probe
    check_tool: generic tool probe
"""

from __future__ import annotations

from buildreqs.requirements.host import check_os
from buildreqs.requirements.models import (
    Installed,
    Missing,
    Outcome,
    Requirement,
    RequirementDeclaration,
    RequirementsReport,
)
from buildreqs.requirements.orchestrator import (
    RequirementOrchestrator,
    check_all,
    default_declarations,
)
from buildreqs.requirements.probe import check_tool, check_xcodebuild
from buildreqs.requirements.versions import compare_versions, get_tool_version

run = check_xcodebuild

__all__ = [
    # Models
    "Installed",
    "Missing",
    "Outcome",
    "Requirement",
    "RequirementDeclaration",
    "RequirementsReport",
    # Checks
    "check_os",
    "check_tool",
    "check_xcodebuild",
    "run",
    # Versions
    "compare_versions",
    "get_tool_version",
    # Orchestration
    "RequirementOrchestrator",
    "default_declarations",
    "check_all",
]
