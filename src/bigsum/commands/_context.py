"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Centralizes result emission: results to stdout,
rejections, prompts and warnings to stderr, exit codes on failure.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import click

from bigsum.domain.lifecycle import SessionState
from bigsum.output.console import create_err_console, print_error, print_prompt, print_warning
from bigsum.output.formatters import OutputSettings, format_error, format_result
from bigsum.services.calculator import CalculatorService

if TYPE_CHECKING:
    from rich.console import Console

    from bigsum.config.settings import BigsumSettings
    from bigsum.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: BigsumSettings) -> None:
        self.settings = settings
        self._err_console: Console | None = None

        from bigsum.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from bigsum.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    @property
    def err_console(self) -> Console:
        """Rich console on stderr (created lazily, after Click swaps streams)."""
        if self._err_console is None:
            self._err_console = create_err_console()
        return self._err_console

    def calculator(self) -> CalculatorService:
        return CalculatorService(max_digits=self.settings.limits.max_digits)

    def is_interactive(self) -> bool:
        """Return True when prompts should be written.

        Prompts require: prompts enabled in config, no ``--no-interact``,
        no ``--json``, and stdin is a TTY.
        """
        return (
            self.settings.session.prompt
            and not self.settings.no_interact
            and not self.settings.json_output
            and sys.stdin.isatty()
        )

    def prompt(self, state: SessionState) -> None:
        """Write the prompt for the operand *state* is waiting on."""
        session = self.settings.session
        if state is SessionState.AWAITING_FIRST:
            print_prompt(self.err_console, session.first_prompt)
        else:
            print_prompt(self.err_console, session.second_prompt)

    def report(self, result: ServiceResult) -> None:
        """Write a failed result to stderr without exiting."""
        if self.settings.json_output:
            click.echo(result.model_dump_json(), err=True)
        else:
            print_error(self.err_console, format_error(result))

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout, returns normally.  Warnings go to
          stderr (unless ``--quiet``) so they never pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = self.output_settings
        if result.ok:
            click.echo(format_result(result, settings=settings))
            if not settings.json_output and not settings.quiet:
                for warning in result.warnings:
                    print_warning(self.err_console, warning)
            return
        if settings.json_output:
            click.echo(format_result(result, settings=settings), err=True)
        else:
            print_error(self.err_console, format_error(result))
        raise SystemExit(1)
