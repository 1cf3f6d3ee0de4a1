import httpx
import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings, get_settings
from app.core.email_dispatch import get_http_client
from app.main import app


class FakeResend:
    """Stands in for the Resend API; records every request it receives."""

    def __init__(self, status_code=200, body=None, error=None):
        self.status_code = status_code
        self.body = body if body is not None else {"id": "email-123"}
        self.error = error
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, json=self.body)


def make_settings(**overrides):
    values = {
        "resend_api_key": "re_test_key",
        "admin_email": "owner@acme-plumbing.com",
        "business_name": "Acme Plumbing",
        "brand_color": "#0f766e",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def fake_resend():
    return FakeResend()


@pytest.fixture
def make_client(fake_resend):
    """Build a TestClient wired to the given settings and the fake Resend API."""

    def _make(settings=None, resend=None):
        transport = httpx.MockTransport(resend or fake_resend)

        async def _http_client():
            async with httpx.AsyncClient(transport=transport) as client:
                yield client

        app.dependency_overrides[get_settings] = lambda: settings or make_settings()
        app.dependency_overrides[get_http_client] = _http_client
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()
