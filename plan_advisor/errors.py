"""Typed failures surfaced by the plan service."""

from typing import Optional


class PlanServiceError(RuntimeError):
    """Base class for failures callers are expected to branch on."""

    default_message = "Something went wrong. Please try again later."

    def __init__(self, message: Optional[str] = None, cause: Optional[BaseException] = None):
        self.message = message or self.default_message
        self.cause = cause
        super().__init__(self.message)


class FetchFailure(PlanServiceError):
    """Raised when plan or provider data could not be retrieved."""

    default_message = "Failed to fetch insurance plans. Please try again later."


class PlanNotFound(PlanServiceError):
    """Raised when a detail lookup references an id absent from the catalog."""

    default_message = "Plan not found."


class SubmissionFailure(PlanServiceError):
    """Raised when a plan selection could not be submitted."""

    default_message = "Failed to submit your selection. Please try again later."
