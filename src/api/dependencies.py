"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting the auth
provider adapter, the per-request navigator, the sign-up form and the
request identity into routes.
"""

import logging

import httpx
from fastapi import Depends, Request

from src.adapters.supabase.client import SupabaseAuthClient
from src.api.navigation import RedirectNavigator
from src.config.settings import Settings, get_settings
from src.domain.exceptions import SignUpError
from src.domain.ports import Anonymous, Authenticated, AuthProvider, Identity
from src.domain.registration import RegistrationSubmitter, SignUpForm, build_redirect_target

logger = logging.getLogger(__name__)


def get_http_client(request: Request) -> httpx.AsyncClient:
    """
    Get the shared HTTP client from app state.

    The client is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.http_client


def get_auth_provider(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> AuthProvider:
    """Create the Supabase adapter around the shared HTTP client."""
    return SupabaseAuthClient(
        get_http_client(request),
        url=settings.provider_url,
        anon_key=settings.provider_anon_key,
    )


def get_navigator() -> RedirectNavigator:
    """Fresh navigator per request (FastAPI caches it within the request)."""
    return RedirectNavigator()


def resolve_origin(request: Request, settings: Settings) -> str:
    """Public origin of the site: SITE_URL if set, else the request's base URL."""
    return (settings.site_url or str(request.base_url)).rstrip("/")


def get_signup_form(
    request: Request,
    provider: AuthProvider = Depends(get_auth_provider),
    navigator: RedirectNavigator = Depends(get_navigator),
    settings: Settings = Depends(get_settings),
) -> SignUpForm:
    """
    Create the sign-up form for this request.

    Wires the provider and navigator into the submitter; the confirmation
    link points back at this site's callback path.
    """
    submitter = RegistrationSubmitter(
        provider=provider,
        navigator=navigator,
        redirect_to=build_redirect_target(resolve_origin(request, settings)),
    )
    return SignUpForm(submitter=submitter)


async def get_current_identity(
    request: Request,
    provider: AuthProvider = Depends(get_auth_provider),
    settings: Settings = Depends(get_settings),
) -> Identity:
    """
    Resolve the request identity from the session cookie.

    Any provider or transport failure degrades to Anonymous; the home
    page must render even when the provider is unreachable.
    """
    token = request.cookies.get(settings.session_cookie_name)
    if not token:
        return Anonymous()

    try:
        user = await provider.get_user(token)
    except (SignUpError, httpx.HTTPError) as exc:
        logger.warning("Could not resolve identity from session cookie: %s", exc)
        return Anonymous()

    if user is None:
        return Anonymous()
    return Authenticated(user)
