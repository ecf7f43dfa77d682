"""Requirement orchestrator.

Runs the declared requirement checks strictly one after another. A failing
check is recorded as data on its Requirement; a failing *fatal* check stops
the run, and the requirements after it are left out of the result.
"""

from __future__ import annotations

import time
import uuid
from typing import TYPE_CHECKING

from buildreqs.exceptions import BuildReqsError
from buildreqs.logging import get_logger, log_context
from buildreqs.requirements.host import check_os
from buildreqs.requirements.models import (
    Installed,
    Missing,
    Requirement,
    RequirementDeclaration,
    RequirementsReport,
)
from buildreqs.requirements.probe import check_xcodebuild

if TYPE_CHECKING:
    from collections.abc import Sequence

__all__ = [
    "RequirementOrchestrator",
    "default_declarations",
    "check_all",
]

logger = get_logger(__name__)


def default_declarations() -> tuple[RequirementDeclaration, ...]:
    """Requirements for building OS X apps, in evaluation order.

    The OS gate comes first and is fatal: probing Xcode is pointless on a
    host that cannot run it.
    """
    return (
        RequirementDeclaration("os", "Apple OS X", check_os, is_fatal=True),
        RequirementDeclaration("xcode", "Xcode", check_xcodebuild),
    )


class RequirementOrchestrator:
    """Evaluates an ordered list of requirements with fatal short-circuit.

    Example:
        ```python
        orchestrator = RequirementOrchestrator()
        for req in await orchestrator.check_all():
            print(req.name, req.installed, req.metadata)
        ```
    """

    def __init__(
        self,
        declarations: Sequence[RequirementDeclaration] | None = None,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            declarations: Requirements to evaluate, in order. Defaults to
                default_declarations().

        Raises:
            ValueError: If two declarations share an id.
        """
        self._declarations = (
            tuple(declarations)
            if declarations is not None
            else default_declarations()
        )
        ids = [d.id for d in self._declarations]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"Duplicate requirement ids: {', '.join(duplicates)}")

    @property
    def declarations(self) -> tuple[RequirementDeclaration, ...]:
        return self._declarations

    async def check_all(self) -> list[Requirement]:
        """Run every check in order and return the evaluated requirements.

        Never raises for an unmet requirement: RequirementError and other
        BuildReqsError failures become ``Missing(reason)``. Exceptions outside
        that hierarchy propagate unchanged.

        Returns:
            Evaluated requirements in declaration order. Shorter than the
            declaration list when a fatal requirement failed.
        """
        requirements = [d.create() for d in self._declarations]
        result: list[Requirement] = []
        fatal_hit = False

        for declaration, requirement in zip(
            self._declarations, requirements, strict=True
        ):
            if fatal_hit:
                break

            log = logger.bind(requirement_id=requirement.id)
            log.debug("requirement_check_started", is_fatal=requirement.is_fatal)

            try:
                version = await declaration.check()
            except BuildReqsError as e:
                requirement.record(Missing(reason=str(e)))
                log.info("requirement_missing", reason=str(e))
                if requirement.is_fatal:
                    fatal_hit = True
                    log.info("fatal_requirement_failed")
            else:
                requirement.record(Installed(version=version))
                log.info("requirement_installed", version=version)

            result.append(requirement)

        return result

    async def run(self) -> RequirementsReport:
        """Run check_all() and wrap the outcome for renderers.

        Events logged during the run carry a ``check_run_id``.
        """
        with log_context(check_run_id=uuid.uuid4().hex[:8]):
            start = time.monotonic()
            requirements = await self.check_all()
            report = RequirementsReport(
                requirements=tuple(requirements),
                declared=len(self._declarations),
                duration_ms=int((time.monotonic() - start) * 1000),
            )
            logger.debug("requirements_checked", report=report.to_dict())
        return report


async def check_all() -> list[Requirement]:
    """Evaluate the default requirements. See RequirementOrchestrator.check_all."""
    return await RequirementOrchestrator().check_all()
