"""
Home page view model.

Branches on the request identity (Anonymous / Authenticated) and
carries the transient sign-up success banner.
"""

import asyncio
from collections.abc import Callable
from dataclasses import dataclass

from .ports import Anonymous, Authenticated, Identity

SIGNUP_SUCCESS_VALUE = "success"
DEFAULT_DISMISS_SECONDS = 5.0


class SuccessBanner:
    """
    Sign-up success message that dismisses itself after a fixed delay.

    The delay is a single delayed callback on the running event loop.
    unmount() cancels it, so a torn-down view never receives a late
    update.

    In the served page the browser owns the timer: home.html reads
    dismiss_after_ms and runs the same one-shot, cancellable dismissal
    in an inline script. mount(), unmount() and on_dismiss drive that
    lifecycle for in-process renderers and tests.
    """

    def __init__(
        self,
        text: str,
        dismiss_after: float = DEFAULT_DISMISS_SECONDS,
        on_dismiss: Callable[[], None] | None = None,
    ) -> None:
        self.text = text
        self.dismiss_after = dismiss_after
        self.visible = True
        self._on_dismiss = on_dismiss
        self._handle: asyncio.TimerHandle | None = None

    @property
    def dismiss_after_ms(self) -> int:
        return int(self.dismiss_after * 1000)

    @property
    def is_scheduled(self) -> bool:
        return self._handle is not None

    def mount(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        """Start the dismiss timer. Must run inside an event loop."""
        if self._handle is not None or not self.visible:
            return
        loop = loop or asyncio.get_running_loop()
        self._handle = loop.call_later(self.dismiss_after, self._dismiss)

    def unmount(self) -> None:
        """Cancel a pending dismiss timer."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _dismiss(self) -> None:
        self._handle = None
        self.visible = False
        # Drop ?signup=success from the address
        if self._on_dismiss is not None:
            self._on_dismiss()


@dataclass
class HomeView:
    """Everything the home template needs."""

    identity: Identity
    banner: SuccessBanner | None = None

    @property
    def is_authenticated(self) -> bool:
        return isinstance(self.identity, Authenticated)

    @property
    def email(self) -> str | None:
        if isinstance(self.identity, Authenticated):
            return self.identity.user.email
        return None

    @property
    def greeting(self) -> str:
        if isinstance(self.identity, Authenticated):
            return f"ようこそ、{self.identity.user.email}さん"
        return "英語学習を始めるには、アカウントが必要です"


def success_banner_text(identity: Identity) -> str:
    if isinstance(identity, Authenticated):
        return f"✅ 登録が完了しました！ようこそ、{identity.user.email}さん"
    return "✅ 登録が完了しました！ログインして学習を始めましょう"


def is_signup_success(value: str | None) -> bool:
    """True when the signup query marker says the user just registered."""
    return value == SIGNUP_SUCCESS_VALUE


def build_home_view(
    identity: Identity | None,
    show_signup_success: bool,
    dismiss_after: float = DEFAULT_DISMISS_SECONDS,
    on_dismiss: Callable[[], None] | None = None,
) -> HomeView:
    """
    Assemble the home view for an identity.

    Args:
        identity: Resolved identity; None is treated as Anonymous
        show_signup_success: Request carried the signup=success marker
        dismiss_after: Banner lifetime in seconds
        on_dismiss: Called when the banner timer fires
    """
    identity = identity if identity is not None else Anonymous()
    banner = None
    if show_signup_success:
        banner = SuccessBanner(
            success_banner_text(identity),
            dismiss_after=dismiss_after,
            on_dismiss=on_dismiss,
        )
    return HomeView(identity=identity, banner=banner)
