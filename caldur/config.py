"""Configuration management using Pydantic Settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CALDUR_",
        extra="ignore",
    )

    # IANA timezone used by the default clock when no time is given
    default_timezone: str = "UTC"

    # Locale for the human-readable connectors ("1 month and 1 day")
    locale: str = "en"

    # Raise DeprecatedUsageWarning instead of warning
    strict_deprecations: bool = False


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def reset_settings() -> None:
    """Drop the cached settings so the environment is read again."""
    get_settings.cache_clear()
