"""Command: check a single integer literal and show its canonical form."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bigsum.commands._base import BigsumCommand

if TYPE_CHECKING:
    from bigsum.commands._context import AppContext


@click.command(
    cls=BigsumCommand,
    examples="""\
  bigsum validate 42
  bigsum validate -000123
  bigsum --json validate +0""",
)
@click.argument("token")
@click.pass_obj
def validate(app: AppContext, token: str) -> None:
    """Validate TOKEN and print its canonical form."""
    app.emit(app.calculator().validate(token))
