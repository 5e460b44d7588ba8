"""Login / register mode and its query-parameter mapping."""

from __future__ import annotations

from enum import Enum

MODE_QUERY_PARAM = "mode"


class Mode(str, Enum):
    LOGIN = "login"
    REGISTER = "register"

    @property
    def is_login(self) -> bool:
        return self is Mode.LOGIN

    def toggled(self) -> Mode:
        return Mode.LOGIN if self is Mode.REGISTER else Mode.REGISTER


def derive_mode(query_value: str | None) -> Mode:
    """Map the ``mode`` query value to a Mode.

    Only the exact literal "register" selects registration; anything else,
    a missing parameter included, means login.
    """
    return Mode.REGISTER if query_value == Mode.REGISTER.value else Mode.LOGIN
