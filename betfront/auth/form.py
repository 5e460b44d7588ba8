"""Auth form controller: mode handling, input updates and the submit protocol.

One ``submit()`` walks the phases

    IDLE -> VALIDATING -> IDLE                       (validation failed)
    IDLE -> VALIDATING -> SUBMITTING -> SUCCEEDED -> IDLE
    IDLE -> VALIDATING -> SUBMITTING -> FAILED -> IDLE

so the form is always re-armed for another attempt. Every failure is turned
into a message on the form; nothing from the network layer escapes.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol

from pydantic import ValidationError

from betfront.auth import messages
from betfront.auth.mode import Mode, derive_mode
from betfront.auth.state import (
    AGREEMENT_TARGET,
    TRANSITIONS,
    FormError,
    FormState,
    FormSuccess,
    SubmissionPhase,
)
from betfront.auth.token_store import TokenPair, TokenStore
from betfront.auth.validation import ValidationErrorKind, validate_submission
from betfront.clients.base import APIException, TransportException

logger = logging.getLogger(__name__)


class FailureKind(str, Enum):
    REMOTE_REJECTION = "remote_rejection"
    TRANSPORT_FAILURE = "transport_failure"
    TOKEN_SHAPE = "token_shape"
    STORAGE_FAILURE = "storage_failure"


@dataclass(frozen=True)
class Success:
    tokens: TokenPair
    payload: Any


@dataclass(frozen=True)
class Failure:
    message: str
    kind: FailureKind


SubmissionOutcome = Success | Failure


class Authenticator(Protocol):
    def authenticate(self, mode: Mode, email: str, password: str) -> Any: ...


def _body_message(payload: Any) -> str | None:
    message = payload.get("message") if isinstance(payload, dict) else None
    return message if isinstance(message, str) and message else None


class AuthForm:
    """Drives a ``FormState`` through user events and submissions.

    The state object is passed in so a Streamlit page can keep it in
    ``st.session_state`` and rebuild the controller on every rerun.
    """

    def __init__(
            self,
            client: Authenticator,
            token_store: TokenStore,
            *,
            state: FormState | None = None,
            on_success: Callable[[Any], None] | None = None,
    ) -> None:
        self.client = client
        self.token_store = token_store
        self.state = state if state is not None else FormState()
        self.on_success = on_success or (lambda payload: None)

    # ------------------------------ mode ------------------------------ #
    @property
    def mode(self) -> Mode:
        return self.state.mode

    def sync_mode(self, query_value: str | None) -> Mode:
        """Adopt the mode named by the external query value."""
        new_mode = derive_mode(query_value)
        if new_mode is not self.state.mode:
            if self.state.is_loading:
                logger.info("Mode change ignored while a submission is in flight")
                return self.state.mode
            self.state.mode = new_mode
            self.state.clear_message()
        return self.state.mode

    def toggle_mode(self) -> str | None:
        """Switch login/register and reset the form.

        Returns the query value to publish, or None if the toggle was refused
        because a submission is in flight.
        """
        if self.state.is_loading:
            logger.info("Mode toggle ignored while a submission is in flight")
            return None
        self.state.mode = self.state.mode.toggled()
        self.state.reset_inputs()
        self.state.clear_message()
        return self.state.mode.value

    # ----------------------------- inputs ----------------------------- #
    def set_field(self, name: str, value: str) -> None:
        self.state.data = self.state.data.with_field(name, value)
        self.state.clear_message()

    def set_agreed(self, agreed: bool) -> None:
        self.state.agreed = agreed
        self.state.clear_message()

    def toggle_password_visibility(self, field: str) -> None:
        if field == "password":
            self.state.show_password = not self.state.show_password
        elif field == "confirm_password":
            self.state.show_confirm_password = not self.state.show_confirm_password

    @property
    def can_submit(self) -> bool:
        """Whether the submit button is enabled."""
        if self.state.is_loading:
            return False
        return self.state.mode is Mode.LOGIN or self.state.agreed

    # ----------------------------- submit ----------------------------- #
    def _transition(self, target: SubmissionPhase) -> None:
        current = self.state.phase
        if target not in TRANSITIONS[current]:
            raise RuntimeError(f"Illegal submission transition {current.value} -> {target.value}")
        logger.debug(f"Submission phase {current.value} -> {target.value}")
        self.state.phase = target

    def submit(self) -> SubmissionOutcome | ValidationErrorKind | None:
        """Validate and send the form.

        Returns the validation error, the submission outcome, or None when a
        submission is already running.
        """
        if self.state.phase is not SubmissionPhase.IDLE:
            logger.debug("Submit ignored: form is busy")
            return None

        self._transition(SubmissionPhase.VALIDATING)
        error = validate_submission(self.state.data, self.state.mode, self.state.agreed)
        if error is not None:
            target = AGREEMENT_TARGET if error.targets_agreement else None
            self.state.message = FormError(error.message, target)
            self.state.focus_agreement = error.targets_agreement
            self._transition(SubmissionPhase.IDLE)
            return error

        self.state.clear_message()
        self._transition(SubmissionPhase.SUBMITTING)
        try:
            return self._exchange()
        finally:
            if self.state.phase is SubmissionPhase.SUBMITTING:
                self._transition(SubmissionPhase.FAILED)
            self._transition(SubmissionPhase.IDLE)

    def _fail(self, message: str, kind: FailureKind) -> Failure:
        logger.info(f"{self.state.mode.value} failed ({kind.value})")
        self.state.message = FormError(message)
        self._transition(SubmissionPhase.FAILED)
        return Failure(message, kind)

    def _exchange(self) -> SubmissionOutcome:
        mode = self.state.mode
        data = self.state.data
        try:
            payload = self.client.authenticate(mode, data.email, data.password)
        except APIException as exc:
            return self._fail(exc.message or messages.REQUEST_FAILED, FailureKind.REMOTE_REJECTION)
        except TransportException:
            return self._fail(messages.TRANSPORT_FAILED, FailureKind.TRANSPORT_FAILURE)
        except Exception:
            logger.exception(f"Unexpected error during {mode.value}")
            return self._fail(messages.TRANSPORT_FAILED, FailureKind.TRANSPORT_FAILURE)

        try:
            tokens = TokenPair.model_validate(payload)
        except ValidationError:
            return self._fail(_body_message(payload) or messages.REQUEST_FAILED, FailureKind.TOKEN_SHAPE)

        try:
            self.token_store.save(tokens)
        except OSError:
            logger.exception("Could not persist tokens")
            return self._fail(messages.REQUEST_FAILED, FailureKind.STORAGE_FAILURE)

        self.state.message = FormSuccess(messages.SUCCESS[mode])
        self._transition(SubmissionPhase.SUCCEEDED)
        logger.info(f"{mode.value} succeeded")

        self.on_success(payload)
        if mode is Mode.REGISTER:
            self.state.reset_inputs()
        return Success(tokens, payload)
