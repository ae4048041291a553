"""Investor interest routes for the landing page form."""

import logging
from functools import lru_cache
from typing import Optional

from fastapi import APIRouter, Depends, Request, status

from src.shared.config import Settings, get_settings
from src.shared.investor.email_utils import dispatch_submission
from src.shared.investor.errors import RateLimited
from src.shared.investor.input_validation import validate_submission
from src.shared.investor.rate_limit import RateLimiter
from src.shared.investor.resend_client import ResendEmailClient
from src.shared.investor.schemas import (
    ErrorResponse,
    InvestorInterestRequest,
    InvestorInterestResponse,
)

router = APIRouter(prefix="/api", tags=["investor"])

SUCCESS_MESSAGE = "Interest received. We'll be in touch within 48 hours."


@lru_cache()
def get_rate_limiter() -> RateLimiter:
    """Process-wide rate limiter shared by all requests."""
    settings = get_settings()
    return RateLimiter(
        max_requests=settings.rate_limit_max_requests,
        window_seconds=settings.rate_limit_window_seconds,
    )


def get_email_client(settings: Settings = Depends(get_settings)) -> Optional[ResendEmailClient]:
    """Resend client, or None when RESEND_API_KEY is not set."""
    if not settings.resend_api_key:
        return None
    return ResendEmailClient(settings.resend_api_key)


def get_client_ip(request: Request) -> str:
    """Get client IP address for rate limiting."""
    # Check for forwarded IP (from proxy/load balancer)
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        # Take the first IP in the chain
        return forwarded.split(",")[0].strip()
    # Fallback to direct connection
    return request.client.host if request.client else "unknown"


def enforce_rate_limit(request: Request, limiter: RateLimiter = Depends(get_rate_limiter)) -> str:
    """Admit or reject the caller before the body is validated; returns the client IP."""
    client_ip = get_client_ip(request)
    if not limiter.allow(client_ip):
        logging.warning(f"Rate limit exceeded for {client_ip}")
        raise RateLimited(retry_after=limiter.retry_after(client_ip))
    return client_ip


@router.post(
    "/investor-interest",
    response_model=InvestorInterestResponse,
    status_code=status.HTTP_200_OK,
    responses={400: {"model": ErrorResponse}, 429: {"model": ErrorResponse}},
)
def submit_investor_interest(
    submission: InvestorInterestRequest,
    client_ip: str = Depends(enforce_rate_limit),
    settings: Settings = Depends(get_settings),
    client: Optional[ResendEmailClient] = Depends(get_email_client),
):
    """
    Accept an investor interest submission from the landing page.

    - Rate limited per client IP (default 5 per hour)
    - Requires name and a plausible email address
    - Notifies the operator and, when an audience is configured, registers
      the submitter as a contact

    Once the submission validates the response is always a success:
    notification and contact failures are logged, never reported back.
    """
    validate_submission(submission)
    logging.info(f"Investor interest received from {client_ip}")

    dispatch_submission(submission, settings, client)

    return InvestorInterestResponse(success=True, message=SUCCESS_MESSAGE)
