"""Thin wrapper around the Resend SDK for sending email and creating contacts."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

import resend
from resend.exceptions import ResendError


@dataclass
class DeliveryResult:
    """Outcome of one collaborator call: data on success, error otherwise."""
    data: Optional[Dict[str, Any]] = None
    error: Optional[Any] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ResendEmailClient:
    """
    Resend client used by the notification and contact steps.

    Errors reported by the Resend API come back as a failed DeliveryResult.
    Anything else (network failures, bad configuration) is raised so the
    caller can record it as a transport exception.
    """

    def __init__(self, api_key: str):
        # Resend SDK v2.x uses a module-level api_key
        resend.api_key = api_key

    def send_email(self, from_email: str, to: str, subject: str, html: str, reply_to: str) -> DeliveryResult:
        params: resend.Emails.SendParams = {
            "from": from_email,
            "to": [to],
            "subject": subject,
            "html": html,
            "reply_to": reply_to,
        }
        try:
            response = resend.Emails.send(params)
        except ResendError as e:
            return DeliveryResult(error=_error_payload(e))
        return DeliveryResult(data=dict(response))

    def create_contact(self, email: str, first_name: str, last_name: str,
                       unsubscribed: bool, audience_id: str) -> DeliveryResult:
        params: resend.Contacts.CreateParams = {
            "audience_id": audience_id,
            "email": email,
            "first_name": first_name,
            "last_name": last_name,
            "unsubscribed": unsubscribed,
        }
        try:
            response = resend.Contacts.create(params)
        except ResendError as e:
            return DeliveryResult(error=_error_payload(e))
        return DeliveryResult(data=dict(response))


def _error_payload(e: ResendError) -> Dict[str, Any]:
    return {
        "name": getattr(e, "error_type", type(e).__name__),
        "message": getattr(e, "message", str(e)),
        "status_code": getattr(e, "code", None),
    }
