"""Tests for CalculatorService one-shot operations."""

import pytest

from bigsum.domain.integers import InvalidOperandFormat
from bigsum.services.calculator import CalculatorService
from bigsum.services.result import INVALID_OPERAND_FORMAT


@pytest.fixture
def calc() -> CalculatorService:
    return CalculatorService()


class TestAdd:
    def test_sum(self, calc: CalculatorService) -> None:
        result = calc.add("123", "456")
        assert result.ok
        assert result.op == "sum"
        assert result.data == {"result": "579", "first": "123", "second": "456"}

    def test_operands_reported_canonical(self, calc: CalculatorService) -> None:
        result = calc.add("000123", "-000456")
        assert result.data["result"] == "-333"
        assert result.data["first"] == "123"
        assert result.data["second"] == "-456"

    @pytest.mark.parametrize("first,second", [("abc", "1"), ("1", "1.5"), ("", "2")])
    def test_rejects_invalid(self, calc: CalculatorService, first: str, second: str) -> None:
        result = calc.add(first, second)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == INVALID_OPERAND_FORMAT

    def test_digit_limit(self) -> None:
        calc = CalculatorService(max_digits=5)
        assert calc.add("99999", "1").data["result"] == "100000"
        result = calc.add("123456", "1")
        assert not result.ok
        assert result.error is not None
        assert result.error.detail["token"] == "123456"

    def test_no_meta_when_telemetry_disabled(self, calc: CalculatorService) -> None:
        assert calc.add("1", "2").meta is None


class TestValidate:
    def test_canonical(self, calc: CalculatorService) -> None:
        result = calc.validate("-000123")
        assert result.ok
        assert result.data == {"canonical": "-123", "sign": "negative", "digits": 3}

    def test_warns_when_normalized(self, calc: CalculatorService) -> None:
        assert calc.validate("+7").warnings
        assert calc.validate("7").warnings == []

    def test_negative_zero(self, calc: CalculatorService) -> None:
        result = calc.validate("-0")
        assert result.data["canonical"] == "0"
        assert result.data["sign"] == "positive"

    def test_invalid(self, calc: CalculatorService) -> None:
        result = calc.validate("+-3")
        assert not result.ok
        assert result.op == "validate"


class TestCompare:
    @pytest.mark.parametrize(
        "first,second,expected",
        [("1000", "999", "greater"), ("-5", "3", "less"), ("007", "+7", "equal")],
    )
    def test_ordering(
        self, calc: CalculatorService, first: str, second: str, expected: str
    ) -> None:
        assert calc.compare(first, second).data["ordering"] == expected

    def test_invalid(self, calc: CalculatorService) -> None:
        assert not calc.compare("1", "x").ok


class TestParse:
    def test_raises_on_invalid(self, calc: CalculatorService) -> None:
        with pytest.raises(InvalidOperandFormat):
            calc.parse("1 2")

    def test_returns_value(self, calc: CalculatorService) -> None:
        assert calc.parse("-0042").format() == "-42"
