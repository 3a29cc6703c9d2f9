"""Tests for forge_oauth.core.http and forge_oauth.core.oauth2."""

import httpx

from forge_oauth.core.http import (
    ClientTransport,
    client_with_fallback,
    get_default_client,
    reset_default_client,
    set_default_client,
)
from forge_oauth.core.oauth2 import Endpoint, OAuth2Config


class TestDefaultClient:
    def test_created_once(self) -> None:
        assert get_default_client() is get_default_client()

    def test_reset_creates_new_client(self) -> None:
        first = get_default_client()
        reset_default_client()
        assert get_default_client() is not first
        assert first.is_closed

    def test_set_default(self) -> None:
        client = httpx.Client()
        set_default_client(client)
        assert get_default_client() is client

    def test_fallback(self) -> None:
        client = httpx.Client()
        assert client_with_fallback(client) is client
        assert client_with_fallback(None) is get_default_client()
        client.close()


class TestClientTransport:
    def test_sends_through_client(self) -> None:
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"ok": True})

        inner = httpx.Client(transport=httpx.MockTransport(handler))
        with httpx.Client(transport=ClientTransport(inner)) as outer:
            response = outer.get("https://example.com/ping")

        assert response.json() == {"ok": True}
        assert len(seen) == 1
        assert not inner.is_closed
        inner.close()

    def test_applies_client_auth_not_default_headers(self) -> None:
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200)

        inner = httpx.Client(
            transport=httpx.MockTransport(handler),
            auth=("proxy-user", "proxy-pass"),
            headers={"X-Inner": "1"},
        )
        with httpx.Client(transport=ClientTransport(inner)) as outer:
            outer.get("https://example.com/ping")

        assert seen[0].headers["Authorization"].startswith("Basic ")
        assert "X-Inner" not in seen[0].headers
        inner.close()


class TestOAuth2Config:
    def test_auth_code_url(self) -> None:
        config = OAuth2Config(
            client_id="client",
            client_secret="secret",
            redirect_url="https://app.example.com/callback",
            endpoint=Endpoint(
                auth_url="https://auth.example.com/authorize",
                token_url="https://auth.example.com/token",
            ),
            scopes=["read", "write"],
        )
        url = config.auth_code_url("xyz")
        assert url.startswith("https://auth.example.com/authorize?")
        assert "state=xyz" in url
        assert "scope=read+write" in url
        assert "client_id=client" in url
