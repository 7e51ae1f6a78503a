"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure, and the value types that cross them. Adapters
implement these protocols.
"""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class AuthUser:
    """
    User record as reported by the auth provider.

    email_confirmed_at is the provider's confirmation timestamp
    (ISO 8601 string); None while the address is unverified.
    """

    id: str
    email: str
    email_confirmed_at: str | None = None

    @property
    def is_confirmed(self) -> bool:
        return self.email_confirmed_at is not None


@dataclass(frozen=True)
class AuthSession:
    """Session issued by the provider when sign-up needs no confirmation."""

    access_token: str
    refresh_token: str | None = None
    expires_in: int | None = None


@dataclass(frozen=True)
class AuthApiError:
    """Error reported by the provider in a non-2xx response."""

    message: str | None
    status: int
    code: str | None = None


@dataclass(frozen=True)
class SignUpResult:
    """
    Result of a provider sign-up call.

    Exactly one of these shapes is produced:
    - error set: the provider rejected the request
    - user set, session set: account is immediately active
    - user set, session None: confirmation email pending
    - all None: provider answered success without a user
    """

    user: AuthUser | None = None
    session: AuthSession | None = None
    error: AuthApiError | None = None


@dataclass(frozen=True)
class Anonymous:
    """No authenticated user for this request."""


@dataclass(frozen=True)
class Authenticated:
    """An authenticated user for this request."""

    user: AuthUser


Identity = Anonymous | Authenticated


class AuthProvider(Protocol):
    """Port interface for the external authentication service."""

    async def sign_up(self, email: str, password: str, redirect_to: str) -> SignUpResult:
        """
        Register a new account with the provider.

        Args:
            email: Address entered by the user
            password: Plaintext password (never stored locally)
            redirect_to: URL the confirmation link sends the user to

        Returns:
            SignUpResult describing the provider's answer

        Raises:
            ConfigurationError: Provider location or key missing; raised
                before any network call is attempted
        """
        ...

    async def get_user(self, access_token: str) -> AuthUser | None:
        """
        Resolve the user owning an access token.

        Returns:
            AuthUser, or None if the token is not (or no longer) valid
        """
        ...


class Navigator(Protocol):
    """Port interface for UI navigation."""

    def push(self, path: str) -> None:
        """Request navigation to path."""
        ...

    def refresh(self) -> None:
        """Request a refresh of any cached authentication state."""
        ...
