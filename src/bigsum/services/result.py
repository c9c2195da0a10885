"""ServiceResult and ServiceError: the contract between services and the CLI.

INVARIANT: Every service operation returns a ServiceResult, including
rejected operands.  Only the CLI decides which stream a result lands on.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

INVALID_OPERAND_FORMAT = "INVALID_OPERAND_FORMAT"
SESSION_COMPLETE = "SESSION_COMPLETE"


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for every calculator and session operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (``"sum"``, ``"validate"``, ``"compare"``).
        data: Operation payload on success.  The human formatter prints
            only its primary value.
        warnings: Non-fatal notes about the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (telemetry spans in verbose mode).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(
        cls,
        op: str,
        code: str,
        message: str,
        **detail: Any,
    ) -> ServiceResult:
        """Build a failed result carrying a single :class:`ServiceError`."""
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))
