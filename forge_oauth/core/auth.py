"""Normalized user information returned by providers."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional


@dataclass
class User:
    """User information from an identity provider.

    Profile fields come from the provider's user endpoint, token fields are
    copied from the session the user was fetched with.
    """

    provider: str
    user_id: str = ""
    nick_name: str = ""
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    location: str = ""
    avatar_url: str = ""
    access_token: str = ""
    refresh_token: str = ""
    expires_at: Optional[datetime] = None
    raw_data: Dict[str, Any] = field(default_factory=dict)

    @property
    def name(self) -> str:
        """Full name built from first and last name."""
        return " ".join(part for part in (self.first_name, self.last_name) if part)

    def __str__(self) -> str:
        return f"{self.nick_name} <{self.email}> ({self.provider})"
