"""OAuth provider exceptions."""

from typing import Optional


class OAuthError(Exception):
    """Base exception for provider errors."""

    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.error_code = error_code


class ConfigurationError(OAuthError):
    """Raised when provider configuration is invalid."""

    def __init__(self, message: str, missing_config: Optional[str] = None):
        super().__init__(message, "configuration_error")
        self.missing_config = missing_config


class ProviderError(OAuthError):
    """Raised when the identity provider answers with an error."""

    def __init__(
        self,
        message: str,
        provider: str,
        provider_error: Optional[str] = None,
        status_code: Optional[int] = None,
        error_code: str = "provider_error",
    ):
        super().__init__(message, error_code)
        self.provider = provider
        self.provider_error = provider_error
        self.status_code = status_code


class MissingTokenError(ProviderError):
    """Raised when user data is requested before an access token is known."""

    def __init__(self, provider: str):
        super().__init__(
            f"{provider} cannot get user information without accessToken",
            provider=provider,
            error_code="missing_access_token",
        )


class DecodeError(OAuthError, ValueError):
    """Raised when a profile response or a stored session is not valid JSON."""

    def __init__(self, message: str):
        super().__init__(message, "decode_error")


class SessionError(OAuthError):
    """Raised when a session is used before the flow has populated it."""

    def __init__(self, message: str):
        super().__init__(message, "session_error")
