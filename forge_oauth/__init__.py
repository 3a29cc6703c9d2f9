"""
Forge OAuth - Autodesk Forge identity provider for OAuth2 login flows

This package plugs Autodesk Forge into an authentication framework: it builds
the authorization URL, completes the code exchange, refreshes tokens and
fetches the signed-in user's profile.

Quick Start:
    from forge_oauth import AutodeskForgeProvider

    provider = AutodeskForgeProvider(client_id, client_secret, callback_url)
    session = provider.begin_auth(state)
    # redirect the user to session.get_auth_url(), then in the callback:
    session.authorize(provider, request.query_params)
    user = provider.fetch_user(session)
"""

__version__ = "1.0.0"
__license__ = "MIT"

# Core exports
from .core.auth import User
from .core.oauth2 import Endpoint, OAuth2Config

# Providers
from .providers.base import Provider, Session
from .providers.session import ForgeSession
from .providers.autodeskforge import AutodeskForgeProvider

# Exceptions
from .exceptions.auth import (
    OAuthError,
    ConfigurationError,
    ProviderError,
    MissingTokenError,
    DecodeError,
    SessionError,
)

# Configuration
from .config.settings import ForgeSettings

__all__ = [
    # Core
    "User",
    "Endpoint",
    "OAuth2Config",

    # Providers
    "Provider",
    "Session",
    "ForgeSession",
    "AutodeskForgeProvider",

    # Exceptions
    "OAuthError",
    "ConfigurationError",
    "ProviderError",
    "MissingTokenError",
    "DecodeError",
    "SessionError",

    # Config
    "ForgeSettings",
]
