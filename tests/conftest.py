from __future__ import annotations

from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from digilima.main import app
from digilima.schemas.email import OutboundEmail
from digilima.utils.email_resend import EmailDeliveryError, get_email_provider


class FakeEmailProvider:
    """Records every send; optionally fails on the n-th call (1-based)."""

    def __init__(self, fail_on: Optional[int] = None) -> None:
        self.sent: List[OutboundEmail] = []
        self.calls = 0
        self.fail_on = fail_on

    async def send(self, email: OutboundEmail) -> str:
        self.calls += 1
        if self.fail_on == self.calls:
            raise EmailDeliveryError("Resend API error 500: upstream unavailable")
        self.sent.append(email)
        return f"email-{self.calls}"


@pytest.fixture
def provider() -> FakeEmailProvider:
    return FakeEmailProvider()


@pytest.fixture
def client(provider: FakeEmailProvider):
    app.dependency_overrides[get_email_provider] = lambda: provider
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def valid_payload() -> dict:
    return {
        "name": "Jane",
        "email": "jane@x.com",
        "message": "Hi",
        "consent": True,
        "website": "",
    }
