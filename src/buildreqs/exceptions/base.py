from __future__ import annotations


class BuildReqsError(Exception):
    """Base exception class for all buildreqs errors.

    All custom exceptions in buildreqs inherit from this class. Requirement
    checks signal a failed requirement by raising a subclass; the
    orchestrator converts those into data, while anything outside this
    hierarchy is treated as a programming fault and propagates.

    Attributes:
        message: Human-readable error message describing what went wrong.
    """

    def __init__(self, message: str) -> None:
        """Initialize the BuildReqsError.

        Args:
            message: Human-readable error message.
        """
        self.message = message
        super().__init__(message)
