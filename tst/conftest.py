"""Pytest configuration and shared fixtures."""

from typing import Any, Dict, List

import pytest
from fastapi.testclient import TestClient

from src.app import app
from src.shared.config import Settings, get_settings
from src.shared.investor.rate_limit import RateLimiter
from src.shared.investor.resend_client import DeliveryResult
from src.shared.investor.routes import get_email_client, get_rate_limiter


class FakeClock:
    """Controllable clock for rate limiter tests."""

    def __init__(self, start: float = 1_700_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeEmailClient:
    """Records calls and returns configurable results instead of calling Resend."""

    def __init__(self):
        self.sent: List[Dict[str, Any]] = []
        self.contacts: List[Dict[str, Any]] = []
        self.send_error = None
        self.contact_error = None
        self.send_exception = None
        self.contact_exception = None

    def send_email(self, from_email, to, subject, html, reply_to) -> DeliveryResult:
        self.sent.append({
            "from": from_email,
            "to": to,
            "subject": subject,
            "html": html,
            "reply_to": reply_to,
        })
        if self.send_exception:
            raise self.send_exception
        if self.send_error:
            return DeliveryResult(error=self.send_error)
        return DeliveryResult(data={"id": f"email-{len(self.sent)}"})

    def create_contact(self, email, first_name, last_name, unsubscribed, audience_id) -> DeliveryResult:
        self.contacts.append({
            "email": email,
            "first_name": first_name,
            "last_name": last_name,
            "unsubscribed": unsubscribed,
            "audience_id": audience_id,
        })
        if self.contact_exception:
            raise self.contact_exception
        if self.contact_error:
            return DeliveryResult(error=self.contact_error)
        return DeliveryResult(data={"object": "contact", "id": f"contact-{len(self.contacts)}"})


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def limiter(clock) -> RateLimiter:
    return RateLimiter(max_requests=5, window_seconds=3600, clock=clock)


@pytest.fixture
def email_client() -> FakeEmailClient:
    return FakeEmailClient()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        resend_api_key="re_test",
        audience_id="aud_123",
        notify_email="ops@example.com",
        from_email="Listwell <invest@example.com>",
    )


@pytest.fixture
def client(settings, limiter, email_client):
    """TestClient with settings, limiter and email client overridden."""
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_rate_limiter] = lambda: limiter
    app.dependency_overrides[get_email_client] = lambda: email_client
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def sample_submission() -> Dict[str, Any]:
    return {
        "name": "Jane Doe",
        "email": "jane@x.com",
        "investment_range": "$50k - $250k",
        "source": "twitter",
        "timestamp": "2025-01-01T12:00:00.000Z",
    }
