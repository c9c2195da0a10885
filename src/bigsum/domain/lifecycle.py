"""Addition session lifecycle.

A session collects two operands and then finishes:

    AWAITING_FIRST -> AWAITING_SECOND -> DONE

Rejected input never advances the session.  Under the ``restart``
policy a rejection while awaiting the second operand moves back to
``AWAITING_FIRST``; under ``retry`` the session stays put.
"""

from __future__ import annotations

from enum import StrEnum


class SessionState(StrEnum):
    """States of the interactive addition session."""

    AWAITING_FIRST = "awaiting_first"
    AWAITING_SECOND = "awaiting_second"
    DONE = "done"


class InvalidInputPolicy(StrEnum):
    """What a rejected line does to an already accepted operand."""

    RETRY = "retry"
    RESTART = "restart"


# --- Transition maps ---

ACCEPT_TRANSITIONS: dict[str, str] = {
    "awaiting_first": "awaiting_second",
    "awaiting_second": "done",
}

REJECT_TRANSITIONS: dict[str, dict[str, str]] = {
    "retry": {
        "awaiting_first": "awaiting_first",
        "awaiting_second": "awaiting_second",
    },
    "restart": {
        "awaiting_first": "awaiting_first",
        "awaiting_second": "awaiting_first",
    },
}


def next_on_accept(current: SessionState) -> SessionState:
    """State after a valid operand is accepted in *current*."""
    return SessionState(ACCEPT_TRANSITIONS[current])


def next_on_reject(current: SessionState, policy: InvalidInputPolicy) -> SessionState:
    """State after a line is rejected in *current* under *policy*."""
    return SessionState(REJECT_TRANSITIONS[policy][current])


def is_terminal(state: SessionState) -> bool:
    return state is SessionState.DONE
