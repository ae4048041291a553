"""Error taxonomy for investor interest submissions."""

from typing import Optional

from fastapi import status


class InvestorInterestError(Exception):
    """Base class for errors that are reported back to the submitter."""
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid request."

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class RateLimited(InvestorInterestError):
    """Client identifier exceeded the submission cap for the current window."""
    status_code = status.HTTP_429_TOO_MANY_REQUESTS
    message = "Too many submissions. Try again later."

    def __init__(self, retry_after: Optional[int] = None):
        super().__init__()
        self.retry_after = retry_after


class ValidationFailed(InvestorInterestError):
    status_code = status.HTTP_400_BAD_REQUEST


class MissingField(ValidationFailed):
    message = "Name and email are required."


class InvalidEmail(ValidationFailed):
    message = "Invalid email address."


class DispatchFailed(Exception):
    """
    A notification or contact registration step failed.

    Internal only: recorded on the per-request DispatchResult and logged,
    never returned to the submitter.
    """

    def __init__(self, step: str, error):
        super().__init__(f"{step} failed: {error}")
        self.step = step
        self.error = error
