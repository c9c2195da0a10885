"""CalculatorService: one-shot operations on operands given up front.

Used by ``bigsum add FIRST SECOND``, ``bigsum validate`` and
``bigsum compare``.  The interactive stdin path lives in
:mod:`bigsum.services.session` and shares the same parsing and
arithmetic.
"""

from __future__ import annotations

import logging

from bigsum.domain.arithmetic import add_signed, compare_signed
from bigsum.domain.integers import MAX_DIGITS, InvalidOperandFormat, SignedInteger, parse_integer
from bigsum.services.result import INVALID_OPERAND_FORMAT, ServiceResult
from bigsum.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)


class CalculatorService:
    """Parse operands with a shared digit ceiling and run domain arithmetic."""

    def __init__(self, *, max_digits: int = MAX_DIGITS) -> None:
        self.max_digits = max_digits

    def parse(self, token: str) -> SignedInteger:
        """Parse *token* under this service's digit ceiling.

        Raises:
            InvalidOperandFormat: On any rejection.
        """
        with trace_span("parse") as span:
            value = parse_integer(token, max_digits=self.max_digits)
            if span is not None:
                span.annotate("digits", value.digit_count)
        return value

    @traced
    def add(self, first: str, second: str) -> ServiceResult:
        """Sum two literals."""
        op = "sum"
        try:
            a = self.parse(first)
            b = self.parse(second)
        except InvalidOperandFormat as exc:
            return _rejected(op, exc)

        with trace_span("add_signed"):
            total = add_signed(a, b)
        logger.debug("Sum computed: %d + %d digits", a.digit_count, b.digit_count)
        return ServiceResult(
            ok=True,
            op=op,
            data={"result": total.format(), "first": a.format(), "second": b.format()},
        )

    @traced
    def validate(self, token: str) -> ServiceResult:
        """Report the canonical form of *token*, or why it was rejected."""
        op = "validate"
        try:
            value = self.parse(token)
        except InvalidOperandFormat as exc:
            return _rejected(op, exc)

        warnings: list[str] = []
        if value.format() != token:
            warnings.append(f"Literal {token!r} normalized to {value.format()!r}")
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "canonical": value.format(),
                "sign": str(value.sign),
                "digits": value.digit_count,
            },
            warnings=warnings,
        )

    @traced
    def compare(self, first: str, second: str) -> ServiceResult:
        """Order two literals as signed values."""
        op = "compare"
        try:
            a = self.parse(first)
            b = self.parse(second)
        except InvalidOperandFormat as exc:
            return _rejected(op, exc)

        ordering = compare_signed(a, b)
        return ServiceResult(
            ok=True,
            op=op,
            data={"ordering": str(ordering), "first": a.format(), "second": b.format()},
        )


def _rejected(op: str, exc: InvalidOperandFormat) -> ServiceResult:
    logger.debug("Operand rejected for %s: %r", op, exc.token)
    return ServiceResult.failure(op, INVALID_OPERAND_FORMAT, exc.message, token=exc.token)
