"""Tests for requirement data models.

Tests cover:
- Installed / Missing: tagged outcome values
- Requirement: outcome slot, metadata view, single recording
- RequirementDeclaration: creating fresh requirements
- RequirementsReport: completeness and success summary
"""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from buildreqs.exceptions import RequirementStateError
from buildreqs.requirements.models import (
    Installed,
    Missing,
    Requirement,
    RequirementDeclaration,
    RequirementsReport,
)

# =============================================================================
# Requirement Tests
# =============================================================================


class TestRequirement:
    """Tests for Requirement dataclass."""

    def test_defaults_before_evaluation(self) -> None:
        req = Requirement("xcode", "Xcode")

        assert req.is_fatal is False
        assert req.outcome is None
        assert req.evaluated is False
        assert req.installed is False
        assert req.metadata == {}

    def test_record_installed(self) -> None:
        req = Requirement("xcode", "Xcode")
        req.record(Installed("7.2.1"))

        assert req.installed is True
        assert req.metadata == {"version": "7.2.1"}

    def test_record_missing(self) -> None:
        req = Requirement("os", "Apple OS X", is_fatal=True)
        req.record(Missing("Cordova tooling for OSX requires Apple OS X"))

        assert req.installed is False
        assert req.evaluated is True
        assert req.metadata == {"reason": "Cordova tooling for OSX requires Apple OS X"}

    def test_metadata_holds_exactly_one_key(self) -> None:
        """Version and reason are mutually exclusive."""
        installed = Requirement("a", "A")
        installed.record(Installed("1.0"))
        missing = Requirement("b", "B")
        missing.record(Missing("nope"))

        assert list(installed.metadata) == ["version"]
        assert list(missing.metadata) == ["reason"]

    def test_record_twice_raises(self) -> None:
        req = Requirement("xcode", "Xcode")
        req.record(Installed("7.2.1"))

        with pytest.raises(RequirementStateError, match="already been evaluated"):
            req.record(Missing("late failure"))

        assert req.metadata == {"version": "7.2.1"}

    def test_to_dict_uses_consumer_field_names(self) -> None:
        req = Requirement("os", "Apple OS X", is_fatal=True)
        req.record(Installed("darwin"))

        assert req.to_dict() == {
            "id": "os",
            "name": "Apple OS X",
            "installed": True,
            "isFatal": True,
            "metadata": {"version": "darwin"},
        }


class TestOutcomes:
    """Tests for Installed and Missing outcome values."""

    def test_outcomes_are_frozen(self) -> None:
        outcome = Installed("7.2.1")

        with pytest.raises(AttributeError):
            outcome.version = "8.0"  # type: ignore[misc]

    def test_outcomes_compare_by_value(self) -> None:
        assert Missing("x") == Missing("x")
        assert Installed("1.0") != Missing("1.0")


# =============================================================================
# RequirementDeclaration Tests
# =============================================================================


class TestRequirementDeclaration:
    def test_create_returns_fresh_requirement(self) -> None:
        declaration = RequirementDeclaration(
            "os", "Apple OS X", AsyncMock(return_value="darwin"), is_fatal=True
        )

        first = declaration.create()
        first.record(Installed("darwin"))
        second = declaration.create()

        assert second is not first
        assert second.outcome is None
        assert (second.id, second.name, second.is_fatal) == ("os", "Apple OS X", True)


# =============================================================================
# RequirementsReport Tests
# =============================================================================


def _evaluated(req_id: str, outcome: Installed | Missing, fatal: bool = False):
    req = Requirement(req_id, req_id.title(), is_fatal=fatal)
    req.record(outcome)
    return req


class TestRequirementsReport:
    def test_all_installed_is_success(self) -> None:
        report = RequirementsReport(
            requirements=(
                _evaluated("os", Installed("darwin"), fatal=True),
                _evaluated("xcode", Installed("7.2.1")),
            ),
            declared=2,
        )

        assert report.complete is True
        assert report.success is True
        assert report.fatal_hit is False
        assert report.missing == ()

    def test_non_fatal_failure_is_complete_but_unsuccessful(self) -> None:
        report = RequirementsReport(
            requirements=(
                _evaluated("os", Installed("darwin"), fatal=True),
                _evaluated("xcode", Missing("xcodebuild was not found. ")),
            ),
            declared=2,
        )

        assert report.complete is True
        assert report.success is False
        assert report.fatal_hit is False
        assert report.missing == ("xcode",)

    def test_fatal_failure_leaves_report_incomplete(self) -> None:
        report = RequirementsReport(
            requirements=(_evaluated("os", Missing("unsupported"), fatal=True),),
            declared=2,
        )

        assert report.complete is False
        assert report.fatal_hit is True
        assert report.success is False

    def test_to_dict(self) -> None:
        report = RequirementsReport(
            requirements=(_evaluated("os", Installed("darwin"), fatal=True),),
            declared=1,
            duration_ms=5,
        )

        assert report.to_dict() == {
            "success": True,
            "complete": True,
            "declared": 1,
            "duration_ms": 5,
            "requirements": [
                {
                    "id": "os",
                    "name": "Os",
                    "installed": True,
                    "isFatal": True,
                    "metadata": {"version": "darwin"},
                }
            ],
        }
