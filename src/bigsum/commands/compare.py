"""Command: order two integers."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bigsum.commands._base import BigsumCommand

if TYPE_CHECKING:
    from bigsum.commands._context import AppContext


@click.command(
    cls=BigsumCommand,
    examples="""\
  bigsum compare 1000 999
  bigsum compare -5 3
  bigsum compare 007 +7""",
)
@click.argument("first")
@click.argument("second")
@click.pass_obj
def compare(app: AppContext, first: str, second: str) -> None:
    """Print whether FIRST is greater than, equal to, or less than SECOND."""
    app.emit(app.calculator().compare(first, second))
