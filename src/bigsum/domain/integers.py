"""Signed integer literals: validation, normalization, and the value model.

A literal is an optional single ``+`` or ``-`` followed by one or more
ASCII digits and nothing else.  Validation is purely syntactic; the
significant-digit ceiling is a separate check applied to the normalized
magnitude by :func:`parse_integer`.

INVARIANT: A SignedInteger is always canonical. Its magnitude has no
leading zero unless it is exactly ``"0"``, and zero is always positive.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, model_validator

from bigsum.domain.types import Sign

MAX_DIGITS = 1000

# [0-9] rather than \d: Unicode digits are not part of the literal grammar.
LITERAL_PATTERN: re.Pattern[str] = re.compile(r"[+-]?[0-9]+")
MAGNITUDE_PATTERN: re.Pattern[str] = re.compile(r"0|[1-9][0-9]*")


class InvalidOperandFormat(ValueError):
    """Raised when a token is not an acceptable integer operand.

    Covers every rejection: empty input, stray characters, misplaced or
    repeated signs, whitespace, decimal points, and too many digits.
    """

    def __init__(self, token: str, message: str) -> None:
        super().__init__(message)
        self.token = token
        self.message = message


class SignedInteger(BaseModel):
    """Canonical signed-magnitude integer.

    Attributes:
        sign: ``Sign.POSITIVE`` or ``Sign.NEGATIVE``.
        magnitude: Decimal digits, most significant first.
    """

    model_config = {"frozen": True}

    sign: Sign = Sign.POSITIVE
    magnitude: str = "0"

    @model_validator(mode="after")
    def _check_canonical(self) -> SignedInteger:
        if MAGNITUDE_PATTERN.fullmatch(self.magnitude) is None:
            msg = f"magnitude must be canonical decimal digits, got {self.magnitude!r}"
            raise ValueError(msg)
        if self.magnitude == "0" and self.sign is not Sign.POSITIVE:
            raise ValueError("zero must be positive")
        return self

    @property
    def is_zero(self) -> bool:
        return self.magnitude == "0"

    @property
    def is_negative(self) -> bool:
        return self.sign is Sign.NEGATIVE

    @property
    def digit_count(self) -> int:
        """Number of significant digits (``1`` for zero)."""
        return len(self.magnitude)

    def negate(self) -> SignedInteger:
        if self.is_zero:
            return self
        return SignedInteger(sign=self.sign.flipped(), magnitude=self.magnitude)

    def format(self) -> str:
        """Canonical decimal text, ``-`` prefixed only when negative."""
        if self.is_negative:
            return f"-{self.magnitude}"
        return self.magnitude

    def __str__(self) -> str:
        return self.format()


ZERO = SignedInteger(sign=Sign.POSITIVE, magnitude="0")


def is_valid_integer(token: str) -> bool:
    """Check whether *token* is a syntactically legal integer literal.

    Examples:
        >>> is_valid_integer("-000123")
        True
        >>> is_valid_integer("+-3")
        False
        >>> is_valid_integer(" 12")
        False
    """
    if not token or not token.strip():
        return False
    return LITERAL_PATTERN.fullmatch(token) is not None


def strip_leading_zeros(digits: str) -> str:
    """Drop leading ``'0'`` characters, never the final digit."""
    stripped = digits.lstrip("0")
    return stripped or "0"


def normalize(token: str) -> SignedInteger:
    """Convert a valid literal into its canonical :class:`SignedInteger`.

    ``-0``, ``+0`` and ``000`` all normalize to :data:`ZERO`.

    Raises:
        InvalidOperandFormat: If *token* does not pass :func:`is_valid_integer`.
    """
    if not is_valid_integer(token):
        raise InvalidOperandFormat(token, _format_message(token))

    sign = Sign.POSITIVE
    digits = token
    if token[0] in "+-":
        if token[0] == "-":
            sign = Sign.NEGATIVE
        digits = token[1:]

    magnitude = strip_leading_zeros(digits)
    if magnitude == "0":
        return ZERO
    return SignedInteger(sign=sign, magnitude=magnitude)


def parse_integer(token: str, *, max_digits: int = MAX_DIGITS) -> SignedInteger:
    """Validate, normalize, and apply the significant-digit ceiling.

    The ceiling counts the normalized magnitude, so leading zeros and the
    sign never count against it.

    Raises:
        InvalidOperandFormat: On any rejection, malformed or too long.
    """
    value = normalize(token)
    if value.digit_count > max_digits:
        msg = (
            f"Invalid input: {value.digit_count} significant digits "
            f"exceeds the limit of {max_digits}."
        )
        raise InvalidOperandFormat(token, msg)
    return value


def _format_message(token: str) -> str:
    if not token.strip():
        return "Invalid input: empty line, please enter an integer."
    return (
        "Invalid input: expected an optional '+' or '-' followed by digits "
        "(no spaces, decimal points, or other characters)."
    )
