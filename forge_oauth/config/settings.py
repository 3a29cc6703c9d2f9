"""Provider configuration settings."""

import os
from dataclasses import dataclass, field
from typing import List

from ..exceptions.auth import ConfigurationError

DEFAULT_CALLBACK_URL = "/auth/autodeskforge/callback"


@dataclass
class ForgeSettings:
    """Credentials and callback for the Autodesk Forge provider."""

    client_id: str = ""
    client_secret: str = ""
    callback_url: str = DEFAULT_CALLBACK_URL
    scopes: List[str] = field(default_factory=list)

    @classmethod
    def from_env(cls, prefix: str = "ADSK_FORGE_") -> "ForgeSettings":
        """Create settings from environment variables.

        Required environment variables:
            ADSK_FORGE_CLIENT_ID: Forge application client ID
            ADSK_FORGE_CLIENT_SECRET: Forge application client secret

        Optional:
            ADSK_FORGE_CALLBACK_URL: OAuth callback URL
            ADSK_FORGE_SCOPES: Comma-separated OAuth scopes
        """
        scopes = os.getenv(f"{prefix}SCOPES", "")

        settings = cls(
            client_id=os.getenv(f"{prefix}CLIENT_ID", ""),
            client_secret=os.getenv(f"{prefix}CLIENT_SECRET", ""),
            callback_url=os.getenv(f"{prefix}CALLBACK_URL", DEFAULT_CALLBACK_URL),
            scopes=[scope.strip() for scope in scopes.split(",") if scope.strip()],
        )
        settings.validate(prefix)
        return settings

    def validate(self, prefix: str = "ADSK_FORGE_"):
        """Validate configuration."""
        if not self.client_id:
            raise ConfigurationError(
                f"{prefix}CLIENT_ID is required",
                missing_config=f"{prefix}CLIENT_ID",
            )

        if not self.client_secret:
            raise ConfigurationError(
                f"{prefix}CLIENT_SECRET is required",
                missing_config=f"{prefix}CLIENT_SECRET",
            )
