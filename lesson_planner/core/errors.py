"""
Lesson plan generation errors.

Two failure kinds reach the caller:
- GenerationTransportError: the final generation attempt failed (network,
  quota, empty response). Earlier attempts are not consulted.
- QualityUnattainableError: the retry loop finished without a single usable
  attempt and without a transport error to report.

A quality shortfall is NOT an error when the final attempt produced text:
the best attempt is returned together with its score and issues.
"""


class PlanGenerationError(Exception):
    """Base class for lesson plan generation failures."""


class GenerationTransportError(PlanGenerationError):
    """The generation callable failed on the final attempt."""

    def __init__(self, message: str, attempts: int):
        super().__init__(message)
        self.attempts = attempts


class QualityUnattainableError(PlanGenerationError):
    """No attempt produced text that could be scored."""
