"""Shared fixtures: the app with its email gateway swapped for a fake."""

import pytest
from fastapi.testclient import TestClient

from keyskeeper.main import app
from keyskeeper.models.email import OutboundEmail, SendResult
from keyskeeper.services.email_gateway import get_email_gateway


class FakeGateway:
    """Records every email instead of calling Resend."""

    def __init__(self, configured: bool = True, result: SendResult | None = None, exc: Exception | None = None):
        self.configured = configured
        self.result = result or SendResult(data={"id": "email_123"})
        self.exc = exc
        self.sent: list[OutboundEmail] = []

    async def send(self, email: OutboundEmail) -> SendResult:
        self.sent.append(email)
        if self.exc is not None:
            raise self.exc
        return self.result


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def client(gateway):
    app.dependency_overrides[get_email_gateway] = lambda: gateway
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def make_client():
    """Client around a custom fake: ``client, gw = make_client(configured=False)``."""

    def _make(**kwargs):
        gw = FakeGateway(**kwargs)
        app.dependency_overrides[get_email_gateway] = lambda: gw
        return TestClient(app), gw

    yield _make
    app.dependency_overrides.clear()
