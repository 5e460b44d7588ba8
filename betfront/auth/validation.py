"""Submit-time validation of the auth form."""

from __future__ import annotations

import re
from enum import Enum

from betfront.auth import messages
from betfront.auth.mode import Mode
from betfront.auth.state import FormData

MIN_PASSWORD_LENGTH = 8

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class ValidationErrorKind(str, Enum):
    MISSING_FIELDS = "missing_fields"
    WEAK_PASSWORD = "weak_password"
    PASSWORD_MISMATCH = "password_mismatch"
    AGREEMENT_REQUIRED = "agreement_required"

    @property
    def message(self) -> str:
        return _MESSAGES[self]

    @property
    def targets_agreement(self) -> bool:
        """True when the error belongs under the agreement checkbox."""
        return self is ValidationErrorKind.AGREEMENT_REQUIRED


_MESSAGES = {
    ValidationErrorKind.MISSING_FIELDS: messages.MISSING_FIELDS,
    ValidationErrorKind.WEAK_PASSWORD: messages.WEAK_PASSWORD,
    ValidationErrorKind.PASSWORD_MISMATCH: messages.PASSWORD_MISMATCH,
    ValidationErrorKind.AGREEMENT_REQUIRED: messages.AGREEMENT_REQUIRED,
}


def is_valid_email(email: str) -> bool:
    """Loose ``local@domain.tld`` shape check.

    Not part of ``validate_submission``: email format is left to the server.
    """
    return bool(EMAIL_RE.match(email))


def is_strong_password(password: str) -> bool:
    return len(password) >= MIN_PASSWORD_LENGTH


def validate_submission(data: FormData, mode: Mode, agreed: bool) -> ValidationErrorKind | None:
    """Return the first failing check, or None when the form may be sent.

    Checks run in order: required fields, password length, then for
    registration only password confirmation and agreement.
    """
    if not data.email or not data.password:
        return ValidationErrorKind.MISSING_FIELDS
    if not is_strong_password(data.password):
        return ValidationErrorKind.WEAK_PASSWORD
    if mode is Mode.REGISTER:
        if data.password != data.confirm_password:
            return ValidationErrorKind.PASSWORD_MISMATCH
        if not agreed:
            return ValidationErrorKind.AGREEMENT_REQUIRED
    return None
