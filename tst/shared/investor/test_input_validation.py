"""Unit tests for submission validation and name splitting."""

import pytest

from src.shared.investor.errors import InvalidEmail, MissingField, ValidationFailed
from src.shared.investor.input_validation import (
    is_valid_email,
    sanitize_text,
    split_name,
    validate_submission,
)
from src.shared.investor.schemas import InvestorInterestRequest


class TestValidateSubmission:

    def test_empty_name_is_missing_field(self) -> None:
        with pytest.raises(MissingField) as exc_info:
            validate_submission(InvestorInterestRequest(name="", email="a@b.com"))
        assert exc_info.value.message == "Name and email are required."
        assert exc_info.value.status_code == 400

    def test_absent_email_is_missing_field(self) -> None:
        with pytest.raises(MissingField):
            validate_submission(InvestorInterestRequest(name="A"))

    def test_whitespace_name_is_accepted(self) -> None:
        submission = InvestorInterestRequest(name="   ", email="a@b.com")
        assert validate_submission(submission) is submission

    def test_whitespace_email_is_invalid_not_missing(self) -> None:
        with pytest.raises(InvalidEmail):
            validate_submission(InvestorInterestRequest(name="A", email="   "))

    def test_malformed_email_is_invalid(self) -> None:
        with pytest.raises(InvalidEmail) as exc_info:
            validate_submission(InvestorInterestRequest(name="A", email="not-an-email"))
        assert exc_info.value.message == "Invalid email address."
        assert isinstance(exc_info.value, ValidationFailed)

    def test_valid_submission_passes(self) -> None:
        submission = InvestorInterestRequest(name="Jane Doe", email="jane@x.com")
        assert validate_submission(submission) is submission

    def test_optional_fields_are_not_validated(self) -> None:
        submission = InvestorInterestRequest(
            name="Jane", email="jane@x.com", investment_range="", source="<b>", timestamp="whenever"
        )
        assert validate_submission(submission) is submission


class TestEmailPattern:

    @pytest.mark.parametrize("email", ["a@b.co", "first.last+tag@sub.example.org", "x@y.z"])
    def test_accepts_loose_addresses(self, email: str) -> None:
        assert is_valid_email(email)

    @pytest.mark.parametrize("email", ["a@b", "@b.com", "a b@c.com", "a@@b.com", "a@b.", ""])
    def test_rejects_malformed(self, email: str) -> None:
        assert not is_valid_email(email)


class TestSplitName:

    def test_first_and_last(self) -> None:
        assert split_name("Jane Doe") == ("Jane", "Doe")

    def test_single_token(self) -> None:
        assert split_name("Cher") == ("Cher", "")

    def test_multiple_tokens_joined_with_single_spaces(self) -> None:
        assert split_name("Mary  Ann   van Dyke") == ("Mary", "Ann van Dyke")


def test_sanitize_text_escapes_html() -> None:
    assert sanitize_text("<script>x</script>") == "&lt;script&gt;x&lt;/script&gt;"
    assert sanitize_text(None) == ""


class TestSubmissionCoercion:
    """Non-string JSON values are accepted as text."""

    def test_numbers_become_text(self) -> None:
        submission = InvestorInterestRequest(
            name="Jane", email="jane@x.com", investment_range=50000, timestamp=1700000000000
        )
        assert submission.investment_range == "50000"
        assert submission.timestamp == "1700000000000"

    def test_falsy_values_count_as_absent(self) -> None:
        submission = InvestorInterestRequest(name=0, email=False, source=0.0)
        assert submission.name is None
        assert submission.email is None
        assert submission.source is None

    def test_numeric_name_passes_numeric_email_is_invalid(self) -> None:
        assert validate_submission(InvestorInterestRequest(name=42, email="a@b.com")).name == "42"
        with pytest.raises(InvalidEmail):
            validate_submission(InvestorInterestRequest(name="A", email=12345))
