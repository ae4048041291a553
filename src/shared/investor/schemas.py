"""Pydantic schemas for the investor interest API."""

import json
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


class InvestorInterestRequest(BaseModel):
    """Schema for an investor interest form submission.

    Every field is optional at the schema level so that missing values
    are reported with the form's own error message rather than a 422.
    Non-string JSON values are accepted as text: falsy numbers and false
    count as absent, anything else is rendered as JSON (1700000000000,
    true, [..]).
    """
    name: Optional[str] = Field(None, description="Submitter's full name")
    email: Optional[str] = Field(None, description="Submitter's email address")
    investment_range: Optional[str] = Field(None, description="Intended investment range")
    source: Optional[str] = Field(None, description="Where the submitter came from")
    timestamp: Optional[str] = Field(None, description="Client-side submission time")

    @field_validator("*", mode="before")
    @classmethod
    def coerce_to_text(cls, v: Any) -> Optional[str]:
        if v is None or isinstance(v, str):
            return v
        if isinstance(v, (bool, int, float)) and not v:
            return None
        return json.dumps(v)


class InvestorInterestResponse(BaseModel):
    """Schema for a successful submission response."""
    success: bool
    message: str


class ErrorResponse(BaseModel):
    error: str
