"""Sign and ordering enums shared by the value model and the arithmetic."""

from __future__ import annotations

from enum import StrEnum


class Sign(StrEnum):
    """Sign of a :class:`~bigsum.domain.integers.SignedInteger`.

    Zero is always ``POSITIVE``.
    """

    POSITIVE = "positive"
    NEGATIVE = "negative"

    def flipped(self) -> Sign:
        return Sign.NEGATIVE if self is Sign.POSITIVE else Sign.POSITIVE


class Ordering(StrEnum):
    """Result of comparing two values."""

    GREATER = "greater"
    EQUAL = "equal"
    LESS = "less"

    def reversed(self) -> Ordering:
        if self is Ordering.GREATER:
            return Ordering.LESS
        if self is Ordering.LESS:
            return Ordering.GREATER
        return Ordering.EQUAL
