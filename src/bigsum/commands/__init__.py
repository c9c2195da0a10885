"""Subcommand modules for bigsum.

Provides register_commands() which uses deferred imports to keep
``bigsum --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from bigsum.commands.add import add
    from bigsum.commands.compare import compare
    from bigsum.commands.validate import validate

    cli.add_command(add)
    cli.add_command(validate)
    cli.add_command(compare)
