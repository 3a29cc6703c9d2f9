"""HTTP client fallback shared by providers."""

import logging
from typing import Optional

import httpx

logger = logging.getLogger(__name__)

_default_client: Optional[httpx.Client] = None


def get_default_client() -> httpx.Client:
    """Get or create the process-wide default HTTP client."""
    global _default_client
    if _default_client is None:
        logger.debug("Creating default HTTP client")
        _default_client = httpx.Client()
    return _default_client


def set_default_client(client: httpx.Client) -> None:
    """Replace the process-wide default HTTP client."""
    global _default_client
    _default_client = client


def reset_default_client() -> None:
    """Close and forget the default client; the next lookup creates a new one."""
    global _default_client
    if _default_client is not None:
        _default_client.close()
    _default_client = None


def client_with_fallback(client: Optional[httpx.Client]) -> httpx.Client:
    """Return ``client`` or the default client when none is given."""
    if client is not None:
        return client
    return get_default_client()


class ClientTransport(httpx.BaseTransport):
    """Transport that sends every request through an existing client.

    Lets an OAuth2 session reuse the timeouts, proxies and mocks configured on
    a provider's HTTP client. Closing the transport leaves the client open.

    Requests are already built, so the client's default headers, cookies and
    ``base_url`` do not apply; its transport, auth and timeout do.
    """

    def __init__(self, client: httpx.Client):
        self.client = client

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        return self.client.send(request, stream=True)
