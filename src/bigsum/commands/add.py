"""Command: add two integers, from arguments or interactively from stdin."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bigsum.commands._base import BigsumCommand

if TYPE_CHECKING:
    from bigsum.commands._context import AppContext


@click.command(
    cls=BigsumCommand,
    examples="""\
  bigsum add 123 456
  bigsum add -999 1000
  printf '123\\n456\\n' | bigsum add
  printf 'abc\\n123\\n456\\n' | bigsum
  bigsum --json add 999999999999999999999 1""",
)
@click.argument("operands", nargs=-1)
@click.pass_obj
def add(app: AppContext, operands: tuple[str, ...]) -> None:
    """Add two integers of up to 1000 digits each.

    With no OPERANDS, reads one integer per line from stdin, reporting
    invalid lines on stderr until two valid integers arrive, then prints
    their sum.
    """
    if len(operands) == 2:
        app.emit(app.calculator().add(*operands))
        return
    if operands:
        raise click.UsageError("Pass two operands, or none to read them from stdin.")

    from bigsum.services.session import AdditionSession

    session = AdditionSession(app.calculator(), policy=app.settings.session.on_invalid)
    # undecodable bytes become U+FFFD so the line is rejected, not fatal
    stdin = click.get_text_stream("stdin", errors="replace")
    result = session.run(
        stdin,
        on_reject=app.report,
        on_prompt=app.prompt if app.is_interactive() else None,
    )
    if result is None:
        # stdin closed before two valid operands; nothing to print
        return
    app.emit(result)
