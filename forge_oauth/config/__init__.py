"""Provider configuration."""

from .settings import ForgeSettings

__all__ = ["ForgeSettings"]
