"""AdditionSession: the interactive two-operand read loop.

The session is an explicit state machine (see
:mod:`bigsum.domain.lifecycle`).  Each input line is parsed on its own;
nothing is computed until both operands have been accepted.  Input is
pulled from an iterator owned by :meth:`AdditionSession.run`, so the
session never buffers lines beyond the one it is handling.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

from bigsum.domain.arithmetic import add_signed
from bigsum.domain.integers import InvalidOperandFormat
from bigsum.domain.lifecycle import (
    InvalidInputPolicy,
    SessionState,
    is_terminal,
    next_on_accept,
    next_on_reject,
)
from bigsum.services.calculator import CalculatorService
from bigsum.services.result import INVALID_OPERAND_FORMAT, SESSION_COMPLETE, ServiceResult
from bigsum.services.telemetry import traced

if TYPE_CHECKING:
    from bigsum.domain.integers import SignedInteger

logger = logging.getLogger(__name__)


class AdditionSession:
    """Collect two operands line by line, then add them.

    Usage::

        session = AdditionSession(policy=InvalidInputPolicy.RETRY)
        result = session.run(sys.stdin, on_reject=report)
        if result is not None:
            print(result.data["result"])
    """

    def __init__(
        self,
        calculator: CalculatorService | None = None,
        *,
        policy: InvalidInputPolicy = InvalidInputPolicy.RETRY,
    ) -> None:
        self._calculator = calculator or CalculatorService()
        self.policy = InvalidInputPolicy(policy)
        self.state = SessionState.AWAITING_FIRST
        self._operands: list[SignedInteger] = []

    @property
    def operands(self) -> tuple[SignedInteger, ...]:
        """Operands accepted so far."""
        return tuple(self._operands)

    def feed(self, line: str) -> ServiceResult:
        """Handle one input line.

        Returns a failed ``INVALID_OPERAND_FORMAT`` result for a rejected
        line, an ``operand`` result when the first operand is accepted,
        and the ``sum`` result once the second one is.
        """
        if is_terminal(self.state):
            return ServiceResult.failure(
                "sum", SESSION_COMPLETE, "Session already produced a result."
            )

        token = line.strip()
        try:
            value = self._calculator.parse(token)
        except InvalidOperandFormat as exc:
            return self._reject(token, exc)

        self._operands.append(value)
        previous, self.state = self.state, next_on_accept(self.state)
        logger.debug("Operand accepted in %s (%d digits)", previous, value.digit_count)
        if not is_terminal(self.state):
            return ServiceResult(
                ok=True,
                op="operand",
                data={"accepted": value.format(), "slot": len(self._operands)},
            )
        return self._finish()

    def run(
        self,
        lines: Iterable[str],
        *,
        on_reject: Callable[[ServiceResult], None] | None = None,
        on_prompt: Callable[[SessionState], None] | None = None,
    ) -> ServiceResult | None:
        """Drive the session over *lines* until it is done or input ends.

        Returns the ``sum`` result, or None when *lines* is exhausted
        before two operands were accepted.
        """
        pending = iter(lines)
        result: ServiceResult | None = None
        while not is_terminal(self.state):
            if on_prompt is not None:
                on_prompt(self.state)
            line = next(pending, None)
            if line is None:
                logger.debug("Input closed in %s, no sum produced", self.state)
                return None
            result = self.feed(line)
            if not result.ok and on_reject is not None:
                on_reject(result)
        return result

    def _reject(self, token: str, exc: InvalidOperandFormat) -> ServiceResult:
        previous = self.state
        self.state = next_on_reject(previous, self.policy)
        if self.state is SessionState.AWAITING_FIRST:
            self._operands.clear()
        logger.debug("Line rejected in %s -> %s (policy %s)", previous, self.state, self.policy)
        return ServiceResult.failure(
            "sum",
            INVALID_OPERAND_FORMAT,
            exc.message,
            token=token,
            state=str(previous),
        )

    @traced
    def _finish(self) -> ServiceResult:
        first, second = self._operands
        total = add_signed(first, second)
        logger.debug("Session done (%d digit result)", total.digit_count)
        return ServiceResult(
            ok=True,
            op="sum",
            data={"result": total.format(), "first": first.format(), "second": second.format()},
        )
