"""
Unit tests for application settings.
"""

import pytest

from src.config.settings import (
    SUPABASE_ANON_KEY_ENV,
    SUPABASE_URL_ENV,
    Settings,
    configured_value,
)


class TestConfiguredValue:
    @pytest.mark.parametrize(
        "env_name,raw",
        [
            (SUPABASE_URL_ENV, None),
            (SUPABASE_URL_ENV, ""),
            (SUPABASE_URL_ENV, "   "),
            (SUPABASE_URL_ENV, "your-project-url"),
            (SUPABASE_ANON_KEY_ENV, " your-anon-key "),
        ],
    )
    def test_unset_values(self, env_name: str, raw: str | None) -> None:
        assert configured_value(env_name, raw) is None

    def test_real_value_is_stripped(self) -> None:
        assert configured_value(SUPABASE_URL_ENV, " https://x.supabase.co ") == "https://x.supabase.co"

    def test_placeholder_only_matches_its_own_key(self) -> None:
        assert configured_value(SUPABASE_URL_ENV, "your-anon-key") == "your-anon-key"


class TestAuthConfigured:
    def test_real_values(self, settings: Settings) -> None:
        assert settings.auth_configured
        assert settings.provider_url == "https://project.supabase.co"

    def test_placeholders_are_not_configured(self) -> None:
        settings = Settings(
            _env_file=None,
            supabase_url="your-project-url",
            supabase_anon_key="your-anon-key",
        )
        assert not settings.auth_configured
        assert settings.provider_url is None
        assert settings.provider_anon_key is None
