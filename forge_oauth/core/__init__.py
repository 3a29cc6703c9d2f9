"""Core building blocks shared by identity providers."""

from .auth import User
from .http import ClientTransport, client_with_fallback, get_default_client, reset_default_client, set_default_client
from .oauth2 import Endpoint, OAuth2Config

__all__ = [
    "User",
    "ClientTransport",
    "client_with_fallback",
    "get_default_client",
    "set_default_client",
    "reset_default_client",
    "Endpoint",
    "OAuth2Config",
]
