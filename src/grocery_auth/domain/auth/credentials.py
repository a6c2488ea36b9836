"""Registration input rules for user credentials."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

MIN_NAME_LENGTH = 2
MIN_PASSWORD_LENGTH = 6

_EMAIL_PATTERN = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s]+")


class ValidationReason(StrEnum):
    """Reasons reported for rejected registration input, in evaluation order."""

    NAME_REQUIRED = "name required"
    NAME_TOO_SHORT = "name too short"
    EMAIL_REQUIRED = "email required"
    INVALID_EMAIL_FORMAT = "invalid email format"
    PASSWORD_REQUIRED = "password required"
    PASSWORD_TOO_SHORT = "password too short"
    CONFIRMATION_REQUIRED = "confirmation required"
    PASSWORDS_DO_NOT_MATCH = "passwords do not match"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of registration input validation.

    ``reason`` is ``None`` exactly when the input is valid.
    """

    reason: ValidationReason | None = None

    @property
    def is_valid(self) -> bool:
        return self.reason is None

    @classmethod
    def valid(cls) -> ValidationResult:
        return cls(reason=None)

    @classmethod
    def invalid(cls, reason: ValidationReason) -> ValidationResult:
        return cls(reason=reason)


def is_valid_email(email: str) -> bool:
    """Return whether one email matches the accepted ``local@domain.tld`` shape."""

    try:
        return _EMAIL_PATTERN.fullmatch(email) is not None
    except (TypeError, re.error):
        return False


def validate_registration(
    *,
    name: str,
    email: str,
    password: str,
    confirm_password: str,
) -> ValidationResult:
    """Validate registration input and report only the first failing rule."""

    trimmed_name = name.strip()
    if not trimmed_name:
        return ValidationResult.invalid(ValidationReason.NAME_REQUIRED)
    if len(trimmed_name) < MIN_NAME_LENGTH:
        return ValidationResult.invalid(ValidationReason.NAME_TOO_SHORT)

    if not email.strip():
        return ValidationResult.invalid(ValidationReason.EMAIL_REQUIRED)
    if not is_valid_email(email):
        return ValidationResult.invalid(ValidationReason.INVALID_EMAIL_FORMAT)

    if not password.strip():
        return ValidationResult.invalid(ValidationReason.PASSWORD_REQUIRED)
    if len(password) < MIN_PASSWORD_LENGTH:
        return ValidationResult.invalid(ValidationReason.PASSWORD_TOO_SHORT)

    if not confirm_password.strip():
        return ValidationResult.invalid(ValidationReason.CONFIRMATION_REQUIRED)
    if password != confirm_password:
        return ValidationResult.invalid(ValidationReason.PASSWORDS_DO_NOT_MATCH)

    return ValidationResult.valid()
