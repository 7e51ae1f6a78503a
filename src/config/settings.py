"""
Application settings - pydantic-settings configuration.

This module defines application configuration using pydantic-settings
for environment variable loading with validation and defaults.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

SUPABASE_URL_ENV = "SUPABASE_URL"
SUPABASE_ANON_KEY_ENV = "SUPABASE_ANON_KEY"

# Values shipped in .env.example; they count as unset
PLACEHOLDERS = {
    SUPABASE_URL_ENV: "your-project-url",
    SUPABASE_ANON_KEY_ENV: "your-anon-key",
}


def configured_value(env_name: str, raw: str | None) -> str | None:
    """Stripped value, or None when empty or still the .env.example placeholder."""
    if raw is None:
        return None
    raw = raw.strip()
    if not raw or raw == PLACEHOLDERS.get(env_name):
        return None
    return raw


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Auth provider (Supabase) - both required for the sign-up flow
    supabase_url: str | None = None
    supabase_anon_key: str | None = None

    # Public origin used to build the email confirmation redirect target.
    # Falls back to the request's base URL when unset.
    site_url: str | None = None

    # Session cookie holding the provider access token
    session_cookie_name: str = "sb-access-token"
    session_cookie_secure: bool = False

    http_timeout_seconds: float = 10.0  # Provider HTTP client timeout
    banner_dismiss_seconds: float = 5.0  # Sign-up success banner lifetime

    @property
    def provider_url(self) -> str | None:
        return configured_value(SUPABASE_URL_ENV, self.supabase_url)

    @property
    def provider_anon_key(self) -> str | None:
        return configured_value(SUPABASE_ANON_KEY_ENV, self.supabase_anon_key)

    @property
    def auth_configured(self) -> bool:
        """True when both provider values are present and not placeholders."""
        return bool(self.provider_url) and bool(self.provider_anon_key)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
