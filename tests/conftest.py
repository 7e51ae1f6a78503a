"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- A scriptable fake of the auth provider port
- A recording navigator
- Settings that never read the developer's .env file
"""

import pytest

from src.config.settings import Settings
from src.domain.ports import AuthSession, AuthUser, SignUpResult


class FakeAuthProvider:
    """AuthProvider double: returns a scripted result or raises."""

    def __init__(self) -> None:
        self.result = SignUpResult()
        self.error: BaseException | None = None
        self.users: dict[str, AuthUser] = {}
        self.sign_up_calls: list[tuple[str, str, str]] = []
        self.on_sign_up = None

    async def sign_up(self, email: str, password: str, redirect_to: str) -> SignUpResult:
        self.sign_up_calls.append((email, password, redirect_to))
        if self.on_sign_up is not None:
            self.on_sign_up()
        if self.error is not None:
            raise self.error
        return self.result

    async def get_user(self, access_token: str) -> AuthUser | None:
        return self.users.get(access_token)


class RecordingNavigator:
    """Navigator double recording requested navigation."""

    def __init__(self) -> None:
        self.pushed: list[str] = []
        self.refreshed = 0

    def push(self, path: str) -> None:
        self.pushed.append(path)

    def refresh(self) -> None:
        self.refreshed += 1


@pytest.fixture
def provider() -> FakeAuthProvider:
    return FakeAuthProvider()


@pytest.fixture
def navigator() -> RecordingNavigator:
    return RecordingNavigator()


@pytest.fixture
def confirmed_user() -> AuthUser:
    return AuthUser(id="user-1", email="a@b.com", email_confirmed_at="2026-10-18T09:00:00Z")


@pytest.fixture
def unconfirmed_user() -> AuthUser:
    return AuthUser(id="user-2", email="a@b.com", email_confirmed_at=None)


@pytest.fixture
def session() -> AuthSession:
    return AuthSession(access_token="access-token-1", refresh_token="refresh-1", expires_in=3600)


@pytest.fixture
def settings() -> Settings:
    """Configured settings, isolated from any local .env file."""
    return Settings(
        _env_file=None,
        supabase_url="https://project.supabase.co",
        supabase_anon_key="anon-key",
        site_url="http://testserver",
    )
