"""Signer configuration using pydantic-settings.

Settings only shape how the module-level ``sign()`` builds its default
dispatcher. Callers constructing ``SigningDispatcher`` directly pass
options (including ``default_definitions`` for a codec that understands
them) explicitly and never touch the environment.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SignerSettings(BaseSettings):
    """Settings loaded from ``XRPL_SIGNER_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="XRPL_SIGNER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    strict_combine: bool = Field(
        default=False,
        description="Reject partial signatures that do not sign the same transaction",
    )


@lru_cache
def get_settings() -> SignerSettings:
    """Get cached settings instance."""
    return SignerSettings()


def reset_settings() -> None:
    """Drop the cached settings (for testing)."""
    get_settings.cache_clear()
