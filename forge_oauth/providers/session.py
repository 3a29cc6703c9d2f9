"""Login session state for the Autodesk Forge provider."""

import json
import logging
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional

from .base import Session
from ..exceptions.auth import DecodeError, SessionError

if TYPE_CHECKING:
    from .autodeskforge import AutodeskForgeProvider

logger = logging.getLogger(__name__)

# Serialized form of an unset expiry, kept for compatibility with stored sessions
ZERO_TIME = "0001-01-01T00:00:00Z"
_ZERO_DATETIME = datetime(1, 1, 1, tzinfo=timezone.utc)

_TIMESTAMP = re.compile(
    r"^(\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})(?:\.(\d+))?(Z|[+-]\d{2}:\d{2})$"
)


def format_timestamp(value: Optional[datetime]) -> str:
    """Format an expiry as an RFC 3339 UTC timestamp."""
    if value is None:
        return ZERO_TIME
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    # strftime("%Y") does not zero-pad years below 1000 on every platform
    text = (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    )
    if value.microsecond:
        text += f".{value.microsecond:06d}".rstrip("0")
    return text + "Z"


def parse_timestamp(text: str) -> Optional[datetime]:
    """Parse an RFC 3339 timestamp; the zero time and empty string give None."""
    if not text or text == ZERO_TIME:
        return None

    match = _TIMESTAMP.match(text)
    if match is None:
        raise DecodeError(f"Invalid timestamp: {text!r}")

    base, fraction, offset = match.groups()
    try:
        value = datetime.strptime(base, "%Y-%m-%dT%H:%M:%S")
        if offset != "Z":
            offset_value = datetime.strptime(offset.replace(":", ""), "%z").tzinfo
        else:
            offset_value = timezone.utc
    except ValueError as e:
        raise DecodeError(f"Invalid timestamp: {text!r}") from e

    if fraction:
        value = value.replace(microsecond=int(fraction[:6].ljust(6, "0")))
    try:
        value = value.replace(tzinfo=offset_value).astimezone(timezone.utc)
    except (OverflowError, ValueError) as e:
        raise DecodeError(f"Invalid timestamp: {text!r}") from e

    if value == _ZERO_DATETIME:
        return None
    return value


@dataclass
class ForgeSession(Session):
    """Per-login state: authorization URL, then tokens once authorized."""

    auth_url: str = ""
    access_token: str = ""
    refresh_token: str = ""
    expires_at: Optional[datetime] = None

    def get_auth_url(self) -> str:
        if not self.auth_url:
            raise SessionError("an AuthURL has not been set")
        return self.auth_url

    def authorize(self, provider: "AutodeskForgeProvider", params: Mapping[str, str]) -> str:
        """Exchange the callback's authorization code for tokens.

        Args:
            provider: Provider that started this session
            params: Callback query parameters, must contain ``code``

        Returns:
            The new access token
        """
        token = provider.config.exchange(params.get("code", ""), http_client=provider.client())

        self.access_token = token.get("access_token", "")
        self.refresh_token = token.get("refresh_token", "")
        expires_at = token.get("expires_at")
        self.expires_at = (
            datetime.fromtimestamp(expires_at, tz=timezone.utc) if expires_at else None
        )
        logger.debug(f"Session authorized with {provider.name}")
        return self.access_token

    def to_dict(self) -> Dict[str, Any]:
        return {
            "AuthURL": self.auth_url,
            "AccessToken": self.access_token,
            "RefreshToken": self.refresh_token,
            "ExpiresAt": format_timestamp(self.expires_at),
        }

    def marshal(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"))

    def __str__(self) -> str:
        return self.marshal()

    @classmethod
    def from_json(cls, data: str) -> "ForgeSession":
        """Restore a session from ``marshal`` output.

        Raises:
            DecodeError: If ``data`` is not a JSON object of the expected shape
        """
        try:
            values = json.loads(data)
        except (TypeError, ValueError) as e:
            raise DecodeError(f"Invalid session data: {e}") from e

        if not isinstance(values, dict):
            raise DecodeError("Invalid session data: expected a JSON object")

        return cls(
            auth_url=_string_field(values, "AuthURL"),
            access_token=_string_field(values, "AccessToken"),
            refresh_token=_string_field(values, "RefreshToken"),
            expires_at=parse_timestamp(_string_field(values, "ExpiresAt")),
        )


def _string_field(values: Dict[str, Any], key: str) -> str:
    value = values.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DecodeError(f"Invalid session data: {key} must be a string")
    return value
