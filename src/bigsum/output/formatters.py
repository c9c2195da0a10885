"""Plain/JSON result formatting.

Human mode prints only the primary value of a successful result, so
``bigsum < input`` leaves exactly the sum on stdout.  JSON mode dumps the
whole ServiceResult.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bigsum.services.result import ServiceResult

# op -> data key printed in human mode
PRIMARY_KEYS: dict[str, str] = {
    "sum": "result",
    "validate": "canonical",
    "compare": "ordering",
}


@dataclass(frozen=True)
class OutputSettings:
    """Output-affecting flags taken from the CLI settings."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_error(result: ServiceResult) -> str:
    """One-line diagnostic for a failed result."""
    error_msg = result.error.message if result.error else "Unknown error"
    return f"ERROR: {result.op} - {error_msg}"


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        settings: Output flags; defaults to human, non-quiet output.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if not result.ok:
        return format_error(result)
    return str(result.data[PRIMARY_KEYS[result.op]])
