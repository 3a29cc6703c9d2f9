"""Base identity provider interface."""

from abc import ABC, abstractmethod
from typing import Mapping

import httpx
from authlib.oauth2.rfc6749 import OAuth2Token

from ..core.auth import User


class Session(ABC):
    """State of a single login attempt, persisted across the redirect."""

    @abstractmethod
    def get_auth_url(self) -> str:
        """URL the user is sent to in order to grant access."""
        pass

    @abstractmethod
    def marshal(self) -> str:
        """Serialize the session for storage between requests."""
        pass

    @abstractmethod
    def authorize(self, provider: "Provider", params: Mapping[str, str]) -> str:
        """Complete the flow with the callback parameters, return the access token."""
        pass


class Provider(ABC):
    """Base class for OAuth2 identity providers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name used to look the provider up later."""
        pass

    @abstractmethod
    def set_name(self, name: str) -> None:
        """Rename the provider (several instances of one provider type)."""
        pass

    @abstractmethod
    def client(self) -> httpx.Client:
        """HTTP client used for requests to the provider."""
        pass

    @abstractmethod
    def begin_auth(self, state: str) -> Session:
        """Start a login attempt."""
        pass

    @abstractmethod
    def unmarshal_session(self, data: str) -> Session:
        """Restore a session produced by ``Session.marshal``."""
        pass

    @abstractmethod
    def fetch_user(self, session: Session) -> User:
        """Get user information with the tokens held by ``session``."""
        pass

    @abstractmethod
    def refresh_token_available(self) -> bool:
        """Whether the provider hands out refresh tokens."""
        pass

    @abstractmethod
    def refresh_token(self, refresh_token: str) -> OAuth2Token:
        """Get a new access token from a refresh token."""
        pass
