"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, bigsum.toml only contains
overrides.  An empty or missing file gives the standard 1000-digit,
retry-on-invalid behavior.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from bigsum.domain.integers import MAX_DIGITS
from bigsum.domain.lifecycle import InvalidInputPolicy


class LimitsConfig(BaseModel):
    """[limits] section."""

    model_config = {"frozen": True}

    max_digits: int = Field(default=MAX_DIGITS, ge=1)


class SessionConfig(BaseModel):
    """[session] section.

    ``on_invalid`` decides whether a rejected line after a good first
    operand keeps it (``retry``) or discards it (``restart``).
    """

    model_config = {"frozen": True}

    on_invalid: InvalidInputPolicy = InvalidInputPolicy.RETRY
    prompt: bool = True
    first_prompt: str = "Enter the first integer: "
    second_prompt: str = "Enter the second integer: "
