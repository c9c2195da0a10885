"""Rich Console factory and theme for bigsum diagnostics.

Only stderr output (prompts, rejection notices, warnings) goes through
Rich.  Results on stdout are written with ``click.echo`` so their bytes
are never touched by styling or wrapping.  In non-TTY environments
(tests, pipes) Rich drops the color codes.
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text
from rich.theme import Theme

BIGSUM_THEME = Theme(
    {
        "bigsum.error": "bold red",
        "bigsum.warning": "bold yellow",
        "bigsum.prompt": "bold cyan",
    }
)


def create_err_console(*, no_color: bool = False) -> Console:
    """Create a Console bound to the current ``sys.stderr``."""
    return Console(
        stderr=True,
        theme=BIGSUM_THEME,
        no_color=no_color,
        highlight=False,
    )


def print_error(console: Console, message: str) -> None:
    console.print(Text(message, style="bigsum.error"), soft_wrap=True)


def print_warning(console: Console, message: str) -> None:
    console.print(Text(f"WARNING: {message}", style="bigsum.warning"), soft_wrap=True)


def print_prompt(console: Console, prompt: str) -> None:
    """Write *prompt* without a trailing newline."""
    console.print(Text(prompt, style="bigsum.prompt"), end="", soft_wrap=True)
