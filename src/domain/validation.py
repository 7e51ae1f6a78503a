"""
Sign-up form validation.

Rules are applied in a fixed order and the first failing rule wins,
so at most one error is ever reported:

1. email must be non-empty
2. email must contain "@" (minimal syntactic check, not RFC 5322)
3. password must be non-empty
4. password must be at least MIN_PASSWORD_LENGTH characters
5. password must equal confirm_password
"""

from dataclasses import dataclass
from enum import Enum

MIN_PASSWORD_LENGTH = 6


@dataclass(frozen=True)
class Credentials:
    """Values entered in the sign-up form. Held only for one submission."""

    email: str
    password: str
    confirm_password: str

    def __repr__(self) -> str:
        return f"Credentials(email={self.email!r}, password=***, confirm_password=***)"


class FormError(str, Enum):
    """Validation failures, valued by the message shown to the user."""

    EMAIL_REQUIRED = "メールアドレスを入力してください"
    EMAIL_INVALID = "有効なメールアドレスを入力してください"
    PASSWORD_REQUIRED = "パスワードを入力してください"
    PASSWORD_TOO_SHORT = "パスワードは6文字以上で入力してください"
    PASSWORD_MISMATCH = "パスワードが一致しません"


@dataclass(frozen=True)
class ValidationResult:
    """Either valid (error is None) or a single FormError."""

    error: FormError | None = None

    @property
    def is_valid(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str | None:
        return self.error.value if self.error else None


def validate_credentials(credentials: Credentials) -> ValidationResult:
    """Check credentials against the sign-up rules. Pure function."""
    if not credentials.email:
        return ValidationResult(FormError.EMAIL_REQUIRED)
    if "@" not in credentials.email:
        return ValidationResult(FormError.EMAIL_INVALID)
    if not credentials.password:
        return ValidationResult(FormError.PASSWORD_REQUIRED)
    if len(credentials.password) < MIN_PASSWORD_LENGTH:
        return ValidationResult(FormError.PASSWORD_TOO_SHORT)
    if credentials.password != credentials.confirm_password:
        return ValidationResult(FormError.PASSWORD_MISMATCH)
    return ValidationResult()
