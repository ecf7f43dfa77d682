"""Dataclass models for requirement checks.

This module defines:
- Installed / Missing: the tagged outcome of one evaluated requirement
- Requirement: one checkable precondition and its outcome slot
- RequirementDeclaration: a requirement paired with the check that evaluates it
- RequirementsReport: the ordered result of one check run plus summary data
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, TypeAlias

from buildreqs.exceptions import RequirementStateError

__all__ = [
    "Installed",
    "Missing",
    "Outcome",
    "CheckFn",
    "Requirement",
    "RequirementDeclaration",
    "RequirementsReport",
]


@dataclass(frozen=True, slots=True)
class Installed:
    """Requirement is satisfied.

    Attributes:
        version: Version (or platform identifier) reported by the check.
    """

    version: str


@dataclass(frozen=True, slots=True)
class Missing:
    """Requirement is not satisfied.

    Attributes:
        reason: Human-readable diagnostic explaining the failure.
    """

    reason: str


Outcome: TypeAlias = Installed | Missing

#: A check resolves with a version string or raises a RequirementError.
CheckFn: TypeAlias = Callable[[], Awaitable[str]]


@dataclass(slots=True)
class Requirement:
    """One precondition for building.

    Created unevaluated; the orchestrator records its outcome exactly once.

    Attributes:
        id: Stable identifier, unique within a check run (e.g., "xcode").
        name: Human-readable label for display (e.g., "Xcode").
        is_fatal: If True and this requirement fails, no later requirement
            is evaluated.
        outcome: Installed or Missing once evaluated, None before.

    Example:
        >>> req = Requirement("xcode", "Xcode")
        >>> req.record(Installed("7.2.1"))
        >>> req.installed, req.metadata
        (True, {'version': '7.2.1'})
    """

    id: str
    name: str
    is_fatal: bool = False
    outcome: Outcome | None = None

    @property
    def evaluated(self) -> bool:
        return self.outcome is not None

    @property
    def installed(self) -> bool:
        """True only when the requirement was evaluated and satisfied."""
        return isinstance(self.outcome, Installed)

    @property
    def metadata(self) -> dict[str, str]:
        """Outcome as a mapping holding either ``version`` or ``reason``."""
        if isinstance(self.outcome, Installed):
            return {"version": self.outcome.version}
        if isinstance(self.outcome, Missing):
            return {"reason": self.outcome.reason}
        return {}

    def record(self, outcome: Outcome) -> None:
        """Store the result of evaluating this requirement.

        Raises:
            RequirementStateError: If an outcome was already recorded.
        """
        if self.outcome is not None:
            raise RequirementStateError(
                f"Requirement '{self.id}' has already been evaluated"
            )
        self.outcome = outcome

    def to_dict(self) -> dict[str, Any]:
        """Serialize in the shape consumed by build orchestrators."""
        return {
            "id": self.id,
            "name": self.name,
            "installed": self.installed,
            "isFatal": self.is_fatal,
            "metadata": self.metadata,
        }


@dataclass(frozen=True, slots=True)
class RequirementDeclaration:
    """A requirement to evaluate and the check that evaluates it.

    Attributes:
        id: Identifier copied onto the Requirement.
        name: Display name copied onto the Requirement.
        check: Async callable returning the installed version.
        is_fatal: Whether failure halts the remaining checks.
    """

    id: str
    name: str
    check: CheckFn
    is_fatal: bool = False

    def create(self) -> Requirement:
        """Build a fresh, unevaluated Requirement."""
        return Requirement(id=self.id, name=self.name, is_fatal=self.is_fatal)


@dataclass(frozen=True, slots=True)
class RequirementsReport:
    """Ordered results of a check run.

    When a fatal requirement fails, the requirements declared after it are
    not evaluated and do not appear in ``requirements``; ``complete`` is
    then False. Renderers should present such a report as incomplete
    rather than as an error.

    Attributes:
        requirements: Evaluated requirements in declaration order.
        declared: Number of requirements the orchestrator declares.
        duration_ms: Total time for the run in milliseconds.
    """

    requirements: tuple[Requirement, ...]
    declared: int
    duration_ms: int = 0

    @property
    def missing(self) -> tuple[str, ...]:
        """Ids of evaluated requirements that are not installed."""
        return tuple(r.id for r in self.requirements if not r.installed)

    @property
    def complete(self) -> bool:
        """True if every declared requirement was evaluated."""
        return len(self.requirements) == self.declared

    @property
    def fatal_hit(self) -> bool:
        """True if a fatal requirement failed."""
        return any(r.is_fatal and not r.installed for r in self.requirements)

    @property
    def success(self) -> bool:
        """True if every declared requirement was evaluated and installed."""
        return self.complete and not self.missing

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "complete": self.complete,
            "declared": self.declared,
            "duration_ms": self.duration_ms,
            "requirements": [r.to_dict() for r in self.requirements],
        }
