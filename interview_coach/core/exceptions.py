"""
Error taxonomy for the evaluation core.

Validation, transport and not-found errors reach the caller.
Contract errors stay inside the voice evaluator, which turns them
into its fallback result.
"""


class CoachError(Exception):
    """Base class for evaluation core errors."""
    pass


class ValidationError(CoachError):
    """Raised for bad input before any external call is made."""
    pass


class TransportError(CoachError):
    """Raised when the transcription or completion service fails."""

    def __init__(self, service: str, message: str, status_code: int | None = None):
        super().__init__(message)
        self.service = service
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        if self.status_code is None:
            return f"{self.service} failed: {self.message}"
        return f"{self.service} failed ({self.status_code}): {self.message}"


class ContractError(CoachError):
    """Raised when a completion response does not match the expected JSON shape."""
    pass


class NotFoundError(CoachError):
    """Raised for role, session or question IDs that do not exist."""
    pass
