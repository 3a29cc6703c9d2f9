"""OAuth2 client configuration backed by Authlib."""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

import httpx
from authlib.integrations.httpx_client import OAuth2Client
from authlib.oauth2.rfc6749 import OAuth2Token

from .http import ClientTransport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Endpoint:
    """Authorization and token URLs of an OAuth2 server."""

    auth_url: str
    token_url: str


@dataclass
class OAuth2Config:
    """Static OAuth2 client settings for one provider.

    Every operation opens a short-lived Authlib session; the actual grant
    handling (URL building, code exchange, refresh) is left to Authlib.
    """

    client_id: str
    client_secret: str
    redirect_url: str
    endpoint: Endpoint
    scopes: List[str] = field(default_factory=list)
    token_endpoint_auth_method: str = "client_secret_post"

    def session(
        self,
        http_client: Optional[httpx.Client] = None,
        include_scope: bool = True
    ) -> OAuth2Client:
        """Open an Authlib OAuth2 session.

        Args:
            http_client: Client to send token requests through. Without one
                the session uses its own connection pool.
            include_scope: Whether requests carry the configured scopes

        Returns:
            OAuth2Client configured with these settings
        """
        kwargs = {}
        if http_client is not None:
            kwargs["transport"] = ClientTransport(http_client)

        return OAuth2Client(
            client_id=self.client_id,
            client_secret=self.client_secret,
            token_endpoint_auth_method=self.token_endpoint_auth_method,
            scope=(" ".join(self.scopes) or None) if include_scope else None,
            redirect_uri=self.redirect_url,
            **kwargs,
        )

    def auth_code_url(self, state: str) -> str:
        """Build the URL that asks the user to grant access."""
        with self.session() as oauth:
            url, _ = oauth.create_authorization_url(self.endpoint.auth_url, state=state)
        return url

    def exchange(self, code: str, http_client: Optional[httpx.Client] = None) -> OAuth2Token:
        """Exchange an authorization code for a token."""
        logger.debug(f"Exchanging authorization code at {self.endpoint.token_url}")
        with self.session(http_client) as oauth:
            return oauth.fetch_token(
                self.endpoint.token_url,
                grant_type="authorization_code",
                code=code,
            )

    def refresh(self, refresh_token: str, http_client: Optional[httpx.Client] = None) -> OAuth2Token:
        """Exchange a refresh token for a new token pair.

        The refresh keeps the scopes already granted, so none are sent.
        """
        logger.debug(f"Refreshing token at {self.endpoint.token_url}")
        with self.session(http_client, include_scope=False) as oauth:
            return oauth.refresh_token(self.endpoint.token_url, refresh_token=refresh_token)
