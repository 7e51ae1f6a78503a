"""
HTTP navigation adapter - Implements Navigator protocol.

Records the navigation requested by the domain during a request so the
route can answer with a redirect, and turns an identity refresh into a
session cookie update.
"""

from fastapi import Response

from src.config.settings import Settings
from src.domain.ports import AuthSession


class RedirectNavigator:
    """
    Implements Navigator protocol for one HTTP request.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self) -> None:
        self.target: str | None = None
        self.refresh_requested = False

    def push(self, path: str) -> None:
        self.target = path

    def refresh(self) -> None:
        self.refresh_requested = True

    def apply_session(
        self, response: Response, session: AuthSession | None, settings: Settings
    ) -> None:
        """
        Replace the cached identity on the client if a refresh was requested.

        A new session overwrites the access token cookie; without one the
        stale cookie is dropped so the next page load resolves identity
        from scratch.
        """
        if not self.refresh_requested:
            return
        if session is None:
            response.delete_cookie(settings.session_cookie_name, path="/")
            return
        response.set_cookie(
            settings.session_cookie_name,
            session.access_token,
            max_age=session.expires_in,
            path="/",
            httponly=True,
            secure=settings.session_cookie_secure,
            samesite="lax",
        )
