"""Autodesk Forge OAuth identity provider.

Authenticates users through forge.autodesk.com and maps the Forge user
profile onto :class:`~forge_oauth.core.auth.User`.
"""

import logging
from typing import Any, Dict, Optional

import httpx
from authlib.oauth2.rfc6749 import OAuth2Token

from .base import Provider
from .session import ForgeSession
from ..config.settings import ForgeSettings
from ..core.auth import User
from ..core.http import client_with_fallback
from ..core.oauth2 import Endpoint, OAuth2Config
from ..exceptions.auth import DecodeError, MissingTokenError, ProviderError

logger = logging.getLogger(__name__)

BASE_AUTH_URL = "https://developer.api.autodesk.com/authentication/v1/authorize"
TOKEN_URL = "https://developer.api.autodesk.com/authentication/v1/gettoken"
USER_ENDPOINT = "https://developer.api.autodesk.com/userprofile/v1/users/@me"


class AutodeskForgeProvider(Provider):
    """Autodesk Forge OAuth2 identity provider."""

    def __init__(
        self,
        client_key: str,
        secret: str,
        callback_url: str,
        *scopes: str,
        http_client: Optional[httpx.Client] = None
    ):
        """Initialize the Forge provider.

        Args:
            client_key: Forge application client ID
            secret: Forge application client secret
            callback_url: OAuth callback URL registered with the application
            *scopes: Scopes for the OAuth2 client configuration
            http_client: Client for requests to Forge, defaults to the
                process-wide client
        """
        self.client_key = client_key
        self.secret = secret
        self.callback_url = callback_url
        self.http_client = http_client
        self._name = "autodeskforge"
        self.config = self._new_config(list(scopes))

    @classmethod
    def from_env(cls, prefix: str = "ADSK_FORGE_", **kwargs) -> "AutodeskForgeProvider":
        """Create the provider from environment variables.

        Reads ``{prefix}CLIENT_ID``, ``{prefix}CLIENT_SECRET``,
        ``{prefix}CALLBACK_URL`` and ``{prefix}SCOPES``.
        """
        settings = ForgeSettings.from_env(prefix)
        return cls(
            settings.client_id,
            settings.client_secret,
            settings.callback_url,
            *settings.scopes,
            **kwargs
        )

    def _new_config(self, scopes) -> OAuth2Config:
        # Forge always asks for data:read here, whatever scopes were given
        auth_url = (
            f"{BASE_AUTH_URL}?response_type=code&client_id={self.client_key}"
            f"&redirect_uri={self.callback_url}&scope=data:read"
        )
        return OAuth2Config(
            client_id=self.client_key,
            client_secret=self.secret,
            redirect_url=self.callback_url,
            endpoint=Endpoint(auth_url=auth_url, token_url=TOKEN_URL),
            scopes=scopes,
        )

    @property
    def name(self) -> str:
        return self._name

    def set_name(self, name: str) -> None:
        self._name = name

    def client(self) -> httpx.Client:
        return client_with_fallback(self.http_client)

    def begin_auth(self, state: str) -> ForgeSession:
        """Ask Forge for an authentication end-point."""
        logger.debug(f"Starting {self.name} authentication")
        return ForgeSession(auth_url=self.config.auth_code_url(state))

    def unmarshal_session(self, data: str) -> ForgeSession:
        return ForgeSession.from_json(data)

    def fetch_user(self, session: ForgeSession) -> User:
        """Get basic information about the user from Forge.

        Args:
            session: Session that went through ``authorize``

        Returns:
            User with the Forge profile and the session's tokens

        Raises:
            MissingTokenError: If the session has no access token yet
            ProviderError: If Forge does not answer with 200
            DecodeError: If the profile is not a JSON object of string fields
        """
        user = User(
            provider=self.name,
            access_token=session.access_token,
            refresh_token=session.refresh_token,
            expires_at=session.expires_at,
        )

        if not user.access_token:
            raise MissingTokenError(self.name)

        headers = {"Authorization": f"Bearer {session.access_token}"}
        logger.debug(f"Fetching {self.name} user profile")
        response = self.client().get(USER_ENDPOINT, headers=headers)

        if response.status_code != 200:
            raise ProviderError(
                f"{self.name} responded with a {response.status_code} trying to fetch user information",
                provider=self.name,
                provider_error=response.text,
                status_code=response.status_code,
            )

        try:
            user_data = response.json()
        except ValueError as e:
            raise DecodeError(f"{self.name} returned invalid user information: {e}") from e

        if not isinstance(user_data, dict):
            raise DecodeError(f"{self.name} returned invalid user information: expected a JSON object")

        _populate_user(user, user_data)
        return user

    def refresh_token_available(self) -> bool:
        return True

    def refresh_token(self, refresh_token: str) -> OAuth2Token:
        """Get a new access token based on the refresh token."""
        return self.config.refresh(refresh_token, http_client=self.client())


def _populate_user(user: User, data: Dict[str, Any]) -> None:
    images = data.get("profileImages")
    if images is None:
        images = {}
    elif not isinstance(images, dict):
        raise DecodeError("Invalid user information: profileImages must be an object")

    user.raw_data = data
    user.user_id = _profile_string(data, "userId")
    user.nick_name = _profile_string(data, "userName")
    user.first_name = _profile_string(data, "firstName")
    user.last_name = _profile_string(data, "lastName")
    user.email = _profile_string(data, "emailId")
    user.location = _profile_string(data, "countryCode")
    user.avatar_url = _profile_string(images, "sizeX120")


def _profile_string(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DecodeError(f"Invalid user information: {key} must be a string")
    return value
