"""Shared test fixtures for forge_oauth.

Provides an isolated Forge environment, providers wired to stub HTTP
transports, and sample Forge API payloads.
"""

import json
from typing import Any, Callable, Dict, List

import httpx
import pytest

from forge_oauth.core.http import reset_default_client
from forge_oauth.providers.autodeskforge import AutodeskForgeProvider


class RecordingHandler:
    """Stub transport handler that records every request it answers."""

    def __init__(self, respond: Callable[[httpx.Request], httpx.Response]):
        self.respond = respond
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.respond(request)

    @property
    def count(self) -> int:
        return len(self.requests)


def json_response(status_code: int, payload: Any) -> Callable[[httpx.Request], httpx.Response]:
    def respond(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, content=json.dumps(payload).encode())

    return respond


# ---------------------------------------------------------------------------
# Global state
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_default_client() -> None:
    """Drop the process-wide HTTP client after every test."""
    yield
    reset_default_client()


@pytest.fixture
def forge_env(monkeypatch: pytest.MonkeyPatch) -> Dict[str, str]:
    """Forge credentials in the environment, as a deployment would set them."""
    values = {
        "ADSK_FORGE_CLIENT_ID": "forge-client-id",
        "ADSK_FORGE_CLIENT_SECRET": "forge-client-secret",
    }
    for key, value in values.items():
        monkeypatch.setenv(key, value)
    for key in ("ADSK_FORGE_CALLBACK_URL", "ADSK_FORGE_SCOPES"):
        monkeypatch.delenv(key, raising=False)
    return values


# ---------------------------------------------------------------------------
# Providers
# ---------------------------------------------------------------------------


@pytest.fixture
def provider(forge_env: Dict[str, str]) -> AutodeskForgeProvider:
    return AutodeskForgeProvider(
        forge_env["ADSK_FORGE_CLIENT_ID"],
        forge_env["ADSK_FORGE_CLIENT_SECRET"],
        "/foo",
    )


@pytest.fixture
def stub_provider(forge_env: Dict[str, str]):
    """Factory for a provider whose HTTP client answers with ``respond``.

    Returns the provider and the handler recording its requests.
    """
    clients = []

    def make(respond: Callable[[httpx.Request], httpx.Response], *scopes: str):
        handler = RecordingHandler(respond)
        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        p = AutodeskForgeProvider(
            forge_env["ADSK_FORGE_CLIENT_ID"],
            forge_env["ADSK_FORGE_CLIENT_SECRET"],
            "/foo",
            *scopes,
            http_client=client,
        )
        return p, handler

    yield make

    for client in clients:
        client.close()


# ---------------------------------------------------------------------------
# Payloads
# ---------------------------------------------------------------------------


@pytest.fixture
def respond_json():
    """Build a transport response callback returning ``payload`` as JSON."""
    return json_response


@pytest.fixture
def profile_payload() -> Dict[str, Any]:
    """User profile as returned by the Forge user endpoint."""
    return {
        "userId": "5RLQ7XBAHZ6P",
        "userName": "jdoe",
        "firstName": "Jane",
        "lastName": "Doe",
        "countryCode": "US",
        "emailId": "jane.doe@example.com",
        "statusMessage": "Modelling",
        "profileImages": {
            "sizeX120": "https://images.profile.autodesk.com/5RLQ7XBAHZ6P/profilepictures/x120.jpg",
        },
    }


@pytest.fixture
def token_payload() -> Dict[str, Any]:
    return {
        "token_type": "Bearer",
        "access_token": "new-access-token",
        "refresh_token": "new-refresh-token",
        "expires_in": 3599,
    }
