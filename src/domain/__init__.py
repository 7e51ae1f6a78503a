"""
Domain layer - Pure sign-up logic with zero framework imports.

This package contains the decision logic of the sign-up flow and the
home page branch. It defines its own port interfaces for the auth
provider and navigation so the web layer stays a thin adapter.
"""

from .exceptions import ConfigurationError, ProviderResponseError, SignUpError, SubmissionInProgress
from .home import HomeView, SuccessBanner, build_home_view
from .ports import (
    Anonymous,
    Authenticated,
    AuthApiError,
    AuthProvider,
    AuthSession,
    AuthUser,
    Identity,
    Navigator,
    SignUpResult,
)
from .registration import (
    FormPhase,
    FormState,
    OutcomeStatus,
    RegistrationOutcome,
    RegistrationSubmitter,
    SignUpForm,
)
from .validation import Credentials, FormError, ValidationResult, validate_credentials

__all__ = [
    "Anonymous",
    "AuthApiError",
    "AuthProvider",
    "AuthSession",
    "AuthUser",
    "Authenticated",
    "ConfigurationError",
    "Credentials",
    "FormError",
    "FormPhase",
    "FormState",
    "HomeView",
    "Identity",
    "Navigator",
    "OutcomeStatus",
    "ProviderResponseError",
    "RegistrationOutcome",
    "RegistrationSubmitter",
    "SignUpError",
    "SignUpForm",
    "SignUpResult",
    "SuccessBanner",
    "ValidationResult",
    "build_home_view",
    "validate_credentials",
]
