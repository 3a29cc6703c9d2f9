"""OAuth provider exceptions."""

from .auth import (
    OAuthError,
    ConfigurationError,
    ProviderError,
    MissingTokenError,
    DecodeError,
    SessionError,
)

__all__ = [
    "OAuthError",
    "ConfigurationError",
    "ProviderError",
    "MissingTokenError",
    "DecodeError",
    "SessionError",
]
