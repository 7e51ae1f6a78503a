"""
Domain exceptions - Semantic error types for sign-up.

This module defines domain-specific exceptions that communicate
failures of the sign-up flow without leaking transport details.
"""


class SignUpError(Exception):
    """Base class for sign-up domain errors."""

    pass


class ConfigurationError(SignUpError):
    """Auth provider URL or anon key is missing."""

    pass


class ProviderResponseError(SignUpError):
    """Auth provider answered with a body we cannot interpret."""

    pass


class SubmissionInProgress(SignUpError):
    """A submission is already in flight for this form."""

    pass
