"""Form state of the auth page: field values, flags, phase and message slot."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

from betfront.auth.mode import Mode

FIELD_NAMES = ("email", "password", "confirm_password")
AGREEMENT_TARGET = "agreement"


@dataclass(frozen=True)
class FormData:
    email: str = ""
    password: str = ""
    confirm_password: str = ""

    def with_field(self, name: str, value: str) -> FormData:
        if name not in FIELD_NAMES:
            raise KeyError(f"Unknown form field: {name}")
        return replace(self, **{name: value})


class SubmissionPhase(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


# Allowed phase changes of one submit; SUCCEEDED and FAILED re-arm to IDLE.
TRANSITIONS: dict[SubmissionPhase, frozenset[SubmissionPhase]] = {
    SubmissionPhase.IDLE: frozenset({SubmissionPhase.VALIDATING}),
    SubmissionPhase.VALIDATING: frozenset({SubmissionPhase.IDLE, SubmissionPhase.SUBMITTING}),
    SubmissionPhase.SUBMITTING: frozenset({SubmissionPhase.SUCCEEDED, SubmissionPhase.FAILED}),
    SubmissionPhase.SUCCEEDED: frozenset({SubmissionPhase.IDLE}),
    SubmissionPhase.FAILED: frozenset({SubmissionPhase.IDLE}),
}


@dataclass(frozen=True)
class FormError:
    text: str
    target: str | None = None


@dataclass(frozen=True)
class FormSuccess:
    text: str


FormMessage = FormError | FormSuccess


@dataclass
class FormState:
    """Single source of truth for rendering and validation.

    ``message`` holds at most one error or success text, so the two can
    never be shown together. ``is_loading`` is derived from ``phase``.
    """

    mode: Mode = Mode.LOGIN
    data: FormData = field(default_factory=FormData)
    agreed: bool = False
    show_password: bool = False
    show_confirm_password: bool = False
    phase: SubmissionPhase = SubmissionPhase.IDLE
    message: FormMessage | None = None
    focus_agreement: bool = False

    @property
    def is_loading(self) -> bool:
        return self.phase is SubmissionPhase.SUBMITTING

    @property
    def error(self) -> FormError | None:
        return self.message if isinstance(self.message, FormError) else None

    @property
    def success(self) -> FormSuccess | None:
        return self.message if isinstance(self.message, FormSuccess) else None

    def clear_message(self) -> None:
        self.message = None
        self.focus_agreement = False

    def reset_inputs(self) -> None:
        """Empty the fields and untick the agreement box."""
        self.data = FormData()
        self.agreed = False
