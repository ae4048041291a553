"""
Input validation and sanitization for investor interest submissions.
The email check is a syntactic sanity check only, not RFC validation.
"""

import html
import re
from typing import Optional, Tuple

from src.shared.investor.errors import InvalidEmail, MissingField
from src.shared.investor.schemas import InvestorInterestRequest


EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def validate_submission(submission: InvestorInterestRequest) -> InvestorInterestRequest:
    """
    Validate required fields and email syntax.

    Args:
        submission: Parsed form submission

    Returns:
        The same submission, unchanged

    Raises:
        MissingField if name or email is absent or empty
        InvalidEmail if email does not look like an address
    """
    if not submission.name or not submission.email:
        raise MissingField()
    if not is_valid_email(submission.email):
        raise InvalidEmail()
    return submission


def is_valid_email(email: str) -> bool:
    return bool(email and EMAIL_PATTERN.match(email))


def split_name(name: str) -> Tuple[str, str]:
    """Split a full name into (first, last); last is "" for a single token."""
    parts = name.split()
    if not parts:
        return "", ""
    return parts[0], " ".join(parts[1:])


def sanitize_text(text: Optional[str]) -> str:
    """Escape text for embedding in an HTML email body."""
    if not text:
        return ""
    return html.escape(text)
