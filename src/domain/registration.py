"""
Registration domain service - sign-up submission and form state.

This module contains the decision logic of the sign-up flow: calling
the auth provider, interpreting its answer, and moving the form through
its states.

Form State Machine
==================

Phases:
- IDLE: Interactive, no message
- SUBMITTING: Provider call in flight (form busy, submit disabled)
- FAILED: Interactive, error message shown
- PENDING_CONFIRMATION: Interactive, "check your email" message shown
- REDIRECTING: Navigation to the home page requested

Transitions:
    IDLE/FAILED/PENDING_CONFIRMATION -> FAILED        (validation error)
    IDLE/FAILED/PENDING_CONFIRMATION -> SUBMITTING    (valid credentials)
    SUBMITTING -> FAILED                (provider, config or unexpected error)
    SUBMITTING -> PENDING_CONFIRMATION  (user created, email unconfirmed)
    SUBMITTING -> REDIRECTING           (user created and confirmed)

SUBMITTING is left on every exit path, including exceptions escaping
the submitter.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum

from .exceptions import ConfigurationError, SubmissionInProgress
from .ports import AuthProvider, AuthSession, AuthUser, Navigator, SignUpResult
from .validation import Credentials, validate_credentials

logger = logging.getLogger(__name__)

SUCCESS_PATH = "/?signup=success"
CALLBACK_PATH = "/auth/callback"

SIGN_UP_FAILED = "登録に失敗しました"
CONFIRMATION_SENT = (
    "確認メールを送信しました。メール内のリンクをクリックしてアカウントを有効化してください。"
)
USER_MISSING = "ユーザー情報の取得に失敗しました"
UNEXPECTED_ERROR = "予期しないエラーが発生しました"


class OutcomeStatus(Enum):
    """Result of a registration attempt."""

    CONFIRMED = "confirmed"
    PENDING_CONFIRMATION = "pending_confirmation"
    FAILED = "failed"


@dataclass(frozen=True)
class RegistrationOutcome:
    """Interpreted provider answer for one submission."""

    status: OutcomeStatus
    message: str | None = None
    user: AuthUser | None = None
    session: AuthSession | None = None

    @classmethod
    def failed(cls, message: str) -> "RegistrationOutcome":
        return cls(OutcomeStatus.FAILED, message=message)


class FormPhase(Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    FAILED = "failed"
    PENDING_CONFIRMATION = "pending_confirmation"
    REDIRECTING = "redirecting"


@dataclass(frozen=True)
class FormState:
    """
    Transient UI state of the sign-up form.

    Build instances through the classmethods so a message only ever
    accompanies the FAILED and PENDING_CONFIRMATION phases.
    """

    phase: FormPhase = FormPhase.IDLE
    message: str | None = None

    @property
    def is_busy(self) -> bool:
        return self.phase is FormPhase.SUBMITTING

    @classmethod
    def idle(cls) -> "FormState":
        return cls()

    @classmethod
    def submitting(cls) -> "FormState":
        return cls(FormPhase.SUBMITTING)

    @classmethod
    def failed(cls, message: str) -> "FormState":
        return cls(FormPhase.FAILED, message)

    @classmethod
    def pending_confirmation(cls, message: str) -> "FormState":
        return cls(FormPhase.PENDING_CONFIRMATION, message)

    @classmethod
    def redirecting(cls) -> "FormState":
        return cls(FormPhase.REDIRECTING)

    @classmethod
    def after(cls, outcome: RegistrationOutcome) -> "FormState":
        """State the form settles in once a submission has finished."""
        if outcome.status is OutcomeStatus.CONFIRMED:
            return cls.redirecting()
        if outcome.status is OutcomeStatus.PENDING_CONFIRMATION:
            return cls.pending_confirmation(outcome.message or CONFIRMATION_SENT)
        return cls.failed(outcome.message or UNEXPECTED_ERROR)


def build_redirect_target(origin: str) -> str:
    """Confirmation link target for the given site origin."""
    return origin.rstrip("/") + CALLBACK_PATH


@dataclass
class RegistrationSubmitter:
    """
    Orchestrates the provider sign-up call.

    Expects credentials that already passed validate_credentials();
    does not validate again.
    """

    provider: AuthProvider
    navigator: Navigator
    redirect_to: str

    async def submit(self, credentials: Credentials) -> RegistrationOutcome:
        """
        Sign up with the provider and decide the next UI step.

        Never raises for provider, configuration or network failures;
        these come back as a FAILED outcome carrying the message to show.

        Args:
            credentials: Pre-validated form values

        Returns:
            RegistrationOutcome for the attempt
        """
        try:
            result = await self.provider.sign_up(
                credentials.email, credentials.password, self.redirect_to
            )
        except ConfigurationError as exc:
            logger.error("Sign up aborted, auth provider not configured: %s", exc)
            return RegistrationOutcome.failed(str(exc) or UNEXPECTED_ERROR)
        except Exception:
            logger.exception("Unexpected sign up failure")
            return RegistrationOutcome.failed(UNEXPECTED_ERROR)

        return self._interpret(result)

    def _interpret(self, result: SignUpResult) -> RegistrationOutcome:
        if result.error is not None:
            logger.warning(
                "Sign up rejected by provider (status=%s code=%s): %s",
                result.error.status,
                result.error.code,
                result.error.message,
            )
            return RegistrationOutcome.failed(result.error.message or SIGN_UP_FAILED)

        user = result.user
        if user is None:
            logger.warning("Sign up succeeded without a user object")
            return RegistrationOutcome.failed(USER_MISSING)

        if not user.is_confirmed:
            logger.info("Sign up pending email confirmation for user %s", user.id)
            return RegistrationOutcome(
                OutcomeStatus.PENDING_CONFIRMATION,
                message=CONFIRMATION_SENT,
                user=user,
            )

        logger.info("Sign up confirmed for user %s", user.id)
        self.navigator.push(SUCCESS_PATH)
        self.navigator.refresh()
        return RegistrationOutcome(OutcomeStatus.CONFIRMED, user=user, session=result.session)


@dataclass
class SignUpForm:
    """
    Sign-up form controller.

    Owns the FormState and runs validation before handing credentials
    to the submitter.
    """

    submitter: RegistrationSubmitter
    state: FormState = field(default_factory=FormState.idle)

    async def submit(self, credentials: Credentials) -> RegistrationOutcome | None:
        """
        Handle a form submission.

        Returns:
            The RegistrationOutcome, or None when validation blocked the
            submission (the error is then in self.state.message)

        Raises:
            SubmissionInProgress: A previous submission is still in flight
        """
        if self.state.is_busy:
            raise SubmissionInProgress("Sign up already in progress")

        self.state = FormState.idle()

        validation = validate_credentials(credentials)
        if not validation.is_valid:
            self.state = FormState.failed(validation.error.value)
            return None

        self.state = FormState.submitting()
        outcome: RegistrationOutcome | None = None
        try:
            outcome = await self.submitter.submit(credentials)
        finally:
            self.state = FormState.after(outcome) if outcome else FormState.idle()
        return outcome
