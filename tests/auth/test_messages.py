"""Tests for the auth form input labels."""

from betfront.auth import messages


def test_input_placeholders():
    assert messages.EMAIL_PLACEHOLDER == "Email *"
    assert messages.PASSWORD_PLACEHOLDER == "Пароль *"
    assert messages.CONFIRM_PLACEHOLDER == "Подтвердите пароль *"
