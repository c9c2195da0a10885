"""Custom Click command class with --examples support.

When ``--examples`` is passed, the command prints usage examples and
exits, keeping ``--help`` short.  Every bigsum command also accepts
negative literals such as ``-999`` as plain arguments.
"""

from __future__ import annotations

from typing import Any

import click

# Lets "-999" through as an argument instead of an unknown option.
OPERAND_CONTEXT: dict[str, Any] = {"ignore_unknown_options": True}


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class BigsumCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        kwargs.setdefault("context_settings", dict(OPERAND_CONTEXT))
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)
