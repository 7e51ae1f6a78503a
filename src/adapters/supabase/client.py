"""
Supabase Auth adapter - Implements AuthProvider protocol.

This module talks to the Supabase Auth (GoTrue) REST API over a shared
httpx.AsyncClient:

- POST {url}/auth/v1/signup?redirect_to=...  create an account
- GET  {url}/auth/v1/user                    resolve an access token

Sign-up answers come in two shapes. With auto-confirm enabled the
provider returns a session (access_token, refresh_token, user); when
email confirmation is required it returns the bare user object with
email_confirmed_at unset.
"""

import logging
from typing import Any

import httpx

from src.config.settings import SUPABASE_ANON_KEY_ENV, SUPABASE_URL_ENV, configured_value
from src.domain.exceptions import ConfigurationError, ProviderResponseError
from src.domain.ports import AuthApiError, AuthSession, AuthUser, SignUpResult

logger = logging.getLogger(__name__)

MISSING_CONFIG_MESSAGE = (
    "Supabase環境変数が設定されていません。.envファイルを確認してください。"
)


class SupabaseAuthClient:
    """
    Implements AuthProvider protocol via the Supabase Auth REST API.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Missing configuration, including the .env.example placeholders, is
    reported as ConfigurationError before any request is built.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        url: str | None,
        anon_key: str | None,
    ) -> None:
        """
        Initialize the adapter.

        Args:
            http_client: Shared client owned by the application lifespan
            url: Supabase project URL (https://<ref>.supabase.co)
            anon_key: Project anon (public) API key
        """
        self._http = http_client
        url = configured_value(SUPABASE_URL_ENV, url)
        self._url = url.rstrip("/") if url else None
        self._anon_key = configured_value(SUPABASE_ANON_KEY_ENV, anon_key)

    @property
    def is_configured(self) -> bool:
        return bool(self._url) and bool(self._anon_key)

    def _require_config(self) -> tuple[str, str]:
        if not self._url or not self._anon_key:
            raise ConfigurationError(MISSING_CONFIG_MESSAGE)
        return self._url, self._anon_key

    def _headers(self, anon_key: str, bearer: str | None = None) -> dict[str, str]:
        return {
            "apikey": anon_key,
            "Authorization": f"Bearer {bearer or anon_key}",
        }

    async def sign_up(self, email: str, password: str, redirect_to: str) -> SignUpResult:
        """
        Create an account with email and password.

        Args:
            email: Address to register
            password: Plaintext password
            redirect_to: Target of the confirmation link

        Returns:
            SignUpResult with the provider's answer

        Raises:
            ConfigurationError: URL or anon key missing
            ProviderResponseError: Success status with an unreadable body
            httpx.HTTPError: Transport failure
        """
        url, anon_key = self._require_config()

        response = await self._http.post(
            f"{url}/auth/v1/signup",
            params={"redirect_to": redirect_to},
            json={"email": email, "password": password},
            headers=self._headers(anon_key),
        )

        if response.is_error:
            return SignUpResult(error=_parse_error(response))

        body = _json_object(response)
        if "access_token" in body:
            user_data = body.get("user")
            return SignUpResult(
                user=_parse_user(user_data) if isinstance(user_data, dict) else None,
                session=AuthSession(
                    access_token=body["access_token"],
                    refresh_token=body.get("refresh_token"),
                    expires_in=body.get("expires_in"),
                ),
            )
        if body.get("id"):
            return SignUpResult(user=_parse_user(body))
        return SignUpResult()

    async def get_user(self, access_token: str) -> AuthUser | None:
        """
        Resolve the user owning access_token.

        Returns:
            AuthUser, or None when the provider rejects the token

        Raises:
            ConfigurationError: URL or anon key missing
            httpx.HTTPStatusError: Provider server error
        """
        url, anon_key = self._require_config()

        response = await self._http.get(
            f"{url}/auth/v1/user",
            headers=self._headers(anon_key, bearer=access_token),
        )
        if response.is_client_error:
            logger.debug("Access token rejected by provider (status=%s)", response.status_code)
            return None
        response.raise_for_status()

        body = _json_object(response)
        if not body.get("id"):
            return None
        return _parse_user(body)


def _json_object(response: httpx.Response) -> dict[str, Any]:
    try:
        body = response.json()
    except ValueError as exc:
        raise ProviderResponseError(
            f"Auth provider returned non-JSON body (status={response.status_code})"
        ) from exc
    if not isinstance(body, dict):
        raise ProviderResponseError("Auth provider returned an unexpected JSON shape")
    return body


def _parse_user(data: dict[str, Any]) -> AuthUser:
    return AuthUser(
        id=str(data["id"]),
        email=data.get("email") or "",
        email_confirmed_at=data.get("email_confirmed_at"),
    )


def _parse_error(response: httpx.Response) -> AuthApiError:
    """Read GoTrue's error body; field names vary across API versions."""
    try:
        body = response.json()
    except ValueError:
        body = {}
    if not isinstance(body, dict):
        body = {}

    message = body.get("msg") or body.get("message") or body.get("error_description")
    code = body.get("error_code") or body.get("error")
    return AuthApiError(
        message=message,
        status=response.status_code,
        code=str(code) if code is not None else None,
    )
