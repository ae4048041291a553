"""Email utilities for investor interest (operator notification, contact registration)."""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, List, Optional

from src.shared.config import Settings
from src.shared.investor.errors import DispatchFailed
from src.shared.investor.input_validation import sanitize_text, split_name
from src.shared.investor.resend_client import DeliveryResult, ResendEmailClient
from src.shared.investor.schemas import InvestorInterestRequest


NOTIFICATION_STEP = "notification"
CONTACT_STEP = "contact"

_ROW_LABEL_STYLE = "padding: 12px 0; color: #b0b0c2; font-size: 13px; text-transform: uppercase; letter-spacing: 0.1em;"
_ROW_BORDER = " border-bottom: 1px solid rgba(255,255,255,0.06);"


@dataclass
class DispatchResult:
    """Per-request record of the notification and contact steps."""
    notification: Optional[Any] = None
    contact: Optional[Any] = None
    errors: List[DispatchFailed] = field(default_factory=list)


def current_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds, e.g. 2025-01-01T12:00:00.000Z."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_subject(submission: InvestorInterestRequest) -> str:
    return f"🟢 New Investor Interest: {submission.name} ({submission.investment_range or 'not specified'})"


def build_notification_html(submission: InvestorInterestRequest) -> str:
    """Render the operator notification email body."""
    name = sanitize_text(submission.name)
    email = sanitize_text(submission.email)
    investment_range = sanitize_text(submission.investment_range) or "—"
    source = sanitize_text(submission.source) or "direct"
    timestamp = sanitize_text(submission.timestamp) or current_timestamp()

    return f"""
<div style="font-family: 'Helvetica Neue', -apple-system, sans-serif; max-width: 520px; background: #0a0a0f; border-radius: 16px; padding: 32px; border: 1px solid rgba(255,255,255,0.06);">
    <div style="font-size: 22px; font-weight: 800; color: #e8e8ef; margin-bottom: 4px;">List<span style="color: #5cff95;">well</span></div>
    <div style="font-size: 11px; text-transform: uppercase; letter-spacing: 0.15em; color: #5cff95; margin-bottom: 24px;">New Investor Interest</div>
    <table style="width: 100%; border-collapse: collapse;">
        <tr><td style="{_ROW_LABEL_STYLE} width: 100px;{_ROW_BORDER}">Name</td><td style="padding: 12px 0; font-weight: 600; color: #e8e8ef; font-size: 15px;{_ROW_BORDER}">{name}</td></tr>
        <tr><td style="{_ROW_LABEL_STYLE}{_ROW_BORDER}">Email</td><td style="padding: 12px 0;{_ROW_BORDER}"><a href="mailto:{email}" style="color: #5ca8ff; text-decoration: none; font-size: 15px;">{email}</a></td></tr>
        <tr><td style="{_ROW_LABEL_STYLE}{_ROW_BORDER}">Range</td><td style="padding: 12px 0; font-weight: 700; color: #5cff95; font-size: 15px;{_ROW_BORDER}">{investment_range}</td></tr>
        <tr><td style="{_ROW_LABEL_STYLE}{_ROW_BORDER}">Source</td><td style="padding: 12px 0; color: #e8e8ef; font-size: 15px;{_ROW_BORDER}">{source}</td></tr>
        <tr><td style="{_ROW_LABEL_STYLE}">Time</td><td style="padding: 12px 0; color: #e8e8ef; font-size: 15px;">{timestamp}</td></tr>
    </table>
    <div style="margin-top: 20px; padding: 12px 16px; background: rgba(92,255,149,0.12); border-radius: 10px; font-size: 13px; color: #b0b0c2;">Reply directly to this email to reach <strong style="color: #e8e8ef;">{email}</strong></div>
</div>
"""


def send_notification_email(
    submission: InvestorInterestRequest,
    settings: Settings,
    client: Optional[ResendEmailClient],
) -> DeliveryResult:
    """
    Send the new-interest notification to the operator address.

    Best-effort: failures are returned as a failed DeliveryResult, never raised.

    Args:
        submission: Validated form submission
        settings: Provides the from/notify addresses
        client: Resend client, or None when no API key is configured

    Returns:
        DeliveryResult with the provider response or the error
    """
    if client is None:
        logging.error("Notification error: RESEND_API_KEY not configured")
        return DeliveryResult(error="email client not configured")

    try:
        result = client.send_email(
            from_email=settings.from_email,
            to=settings.notify_email,
            subject=build_subject(submission),
            html=build_notification_html(submission),
            reply_to=submission.email,
        )
    except Exception as e:
        logging.error(f"Notification exception: {str(e)}", exc_info=True)
        return DeliveryResult(error=str(e))

    if result.ok:
        logging.info(f"Notification sent for {submission.name} ({submission.email})")
    else:
        logging.error(f"Notification error: {result.error}")
    return result


def register_contact(
    submission: InvestorInterestRequest,
    audience_id: str,
    client: Optional[ResendEmailClient],
) -> DeliveryResult:
    """Add the submitter to the marketing audience. Best-effort, like the notification."""
    if client is None:
        logging.error("Contact error: RESEND_API_KEY not configured")
        return DeliveryResult(error="email client not configured")

    first_name, last_name = split_name(submission.name)
    try:
        result = client.create_contact(
            email=submission.email,
            first_name=first_name,
            last_name=last_name,
            unsubscribed=False,
            audience_id=audience_id,
        )
    except Exception as e:
        logging.error(f"Contact exception: {str(e)}", exc_info=True)
        return DeliveryResult(error=str(e))

    if result.ok:
        logging.info(f"Contact added: {submission.email} -> audience {audience_id}")
    else:
        logging.error(f"Contact error: {result.error}")
    return result


def dispatch_submission(
    submission: InvestorInterestRequest,
    settings: Settings,
    client: Optional[ResendEmailClient],
) -> DispatchResult:
    """
    Run the notification step, then the contact step when an audience is configured.

    Each step is attempted exactly once; a failure in one never stops the other.
    """
    results = DispatchResult()

    notification = send_notification_email(submission, settings, client)
    if notification.ok:
        results.notification = notification.data
    else:
        results.errors.append(DispatchFailed(NOTIFICATION_STEP, notification.error))

    if settings.audience_id:
        contact = register_contact(submission, settings.audience_id, client)
        if contact.ok:
            results.contact = contact.data
        else:
            results.errors.append(DispatchFailed(CONTACT_STEP, contact.error))

    if results.errors:
        steps = ", ".join(error.step for error in results.errors)
        logging.warning(f"Investor interest from {submission.email} completed with errors in: {steps}")
    return results
