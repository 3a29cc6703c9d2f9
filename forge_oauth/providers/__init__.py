"""OAuth identity providers."""

from .base import Provider, Session
from .session import ForgeSession
from .autodeskforge import AutodeskForgeProvider

__all__ = [
    "Provider",
    "Session",
    "ForgeSession",
    "AutodeskForgeProvider",
]
