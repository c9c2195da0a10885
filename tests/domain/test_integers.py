"""Tests for literal validation, normalization, and the SignedInteger model."""

import pytest
from pydantic import ValidationError

from bigsum.domain.integers import (
    MAX_DIGITS,
    ZERO,
    InvalidOperandFormat,
    SignedInteger,
    is_valid_integer,
    normalize,
    parse_integer,
    strip_leading_zeros,
)
from bigsum.domain.types import Sign


class TestIsValidInteger:
    @pytest.mark.parametrize(
        "token",
        ["0", "7", "123", "+123", "-123", "000123", "-000", "+0", "9" * 1500],
    )
    def test_accepts(self, token: str) -> None:
        assert is_valid_integer(token)

    @pytest.mark.parametrize(
        "token",
        [
            "",
            " ",
            "\t",
            "+",
            "-",
            "++3",
            "--3",
            "+-3",
            "-+3",
            "3-",
            "12-3",
            "45+6",
            "1 2",
            " 12",
            "12 ",
            "12\n",
            "1.2",
            "1,000",
            "(3)",
            "[456]",
            "123#",
            "abc",
            "12a3",
            "١٢",  # Arabic-Indic digits
            "１",  # fullwidth one
        ],
    )
    def test_rejects(self, token: str) -> None:
        assert not is_valid_integer(token)


class TestStripLeadingZeros:
    def test_strips(self) -> None:
        assert strip_leading_zeros("000123") == "123"

    def test_all_zero_collapses(self) -> None:
        assert strip_leading_zeros("0000") == "0"

    def test_keeps_interior_zeros(self) -> None:
        assert strip_leading_zeros("1000") == "1000"


class TestNormalize:
    def test_unsigned_is_positive(self) -> None:
        assert normalize("42") == SignedInteger(sign=Sign.POSITIVE, magnitude="42")

    def test_explicit_plus(self) -> None:
        assert normalize("+42") == normalize("42")

    def test_negative(self) -> None:
        value = normalize("-000456")
        assert value.sign is Sign.NEGATIVE
        assert value.magnitude == "456"

    @pytest.mark.parametrize("token", ["0", "-0", "+0", "0000", "-0000", "+000"])
    def test_zero_forms_collapse(self, token: str) -> None:
        assert normalize(token) == ZERO

    def test_invalid_token_raises(self) -> None:
        with pytest.raises(InvalidOperandFormat) as excinfo:
            normalize("1.5")
        assert excinfo.value.token == "1.5"

    def test_empty_message_mentions_empty(self) -> None:
        with pytest.raises(InvalidOperandFormat, match="empty"):
            normalize("")

    @pytest.mark.parametrize("token", ["123", "-456", "+0007", "-0", "000"])
    def test_idempotent(self, token: str) -> None:
        once = normalize(token)
        assert normalize(once.format()) == once


class TestParseInteger:
    def test_limit_counts_significant_digits(self) -> None:
        token = "+" + "0" * 50 + "1" * MAX_DIGITS
        value = parse_integer(token)
        assert value.digit_count == MAX_DIGITS

    def test_exactly_at_limit(self) -> None:
        assert parse_integer("9" * MAX_DIGITS).digit_count == MAX_DIGITS

    def test_over_limit_rejected(self) -> None:
        with pytest.raises(InvalidOperandFormat, match="1001 significant digits"):
            parse_integer("1" * (MAX_DIGITS + 1))

    def test_custom_limit(self) -> None:
        with pytest.raises(InvalidOperandFormat):
            parse_integer("1234", max_digits=3)
        assert parse_integer("-0001234", max_digits=4).format() == "-1234"

    def test_malformed_is_same_error_type(self) -> None:
        with pytest.raises(InvalidOperandFormat):
            parse_integer("--1")


class TestSignedInteger:
    def test_default_is_zero(self) -> None:
        assert SignedInteger() == ZERO

    def test_format(self) -> None:
        assert SignedInteger(sign=Sign.NEGATIVE, magnitude="12").format() == "-12"
        assert str(SignedInteger(sign=Sign.POSITIVE, magnitude="12")) == "12"

    def test_negate(self) -> None:
        value = normalize("-77")
        assert value.negate() == normalize("77")
        assert value.negate().negate() == value

    def test_negate_zero_stays_positive(self) -> None:
        assert ZERO.negate() == ZERO

    def test_properties(self) -> None:
        value = normalize("-1000")
        assert value.is_negative
        assert not value.is_zero
        assert value.digit_count == 4
        assert ZERO.is_zero

    @pytest.mark.parametrize("magnitude", ["", "012", "1a", "-1", " 1"])
    def test_rejects_non_canonical_magnitude(self, magnitude: str) -> None:
        with pytest.raises(ValidationError):
            SignedInteger(sign=Sign.POSITIVE, magnitude=magnitude)

    def test_rejects_negative_zero(self) -> None:
        with pytest.raises(ValidationError):
            SignedInteger(sign=Sign.NEGATIVE, magnitude="0")

    def test_frozen(self) -> None:
        value = normalize("5")
        with pytest.raises(ValidationError):
            value.magnitude = "6"  # type: ignore[misc]

    def test_hashable(self) -> None:
        assert len({normalize("5"), normalize("+005"), normalize("-5")}) == 2
