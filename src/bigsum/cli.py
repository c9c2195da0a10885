"""Root CLI group for bigsum with global flags and command registration."""

from __future__ import annotations

import click

from bigsum import __version__
from bigsum.commands import register_commands
from bigsum.commands._context import AppContext
from bigsum.config.settings import BigsumSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="bigsum")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Suppress warnings on stderr.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and timing spans on stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--no-interact", is_flag=True, help="Never write input prompts.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    no_interact: bool,
    config_path: str | None,
) -> None:
    """bigsum: add arbitrarily long integers exactly.

    Run without a command to read two integers from stdin and print
    their sum.
    """
    flags = {
        "json_output": json_output,
        "quiet": quiet,
        "verbose": verbose,
        "log_json": log_json,
        "no_interact": no_interact,
    }
    # Unset flags stay out of init kwargs so env vars and TOML can enable them.
    settings = BigsumSettings.from_cli(
        config_path=config_path,
        **{name: value for name, value in flags.items() if value},
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        from bigsum.commands.add import add

        ctx.invoke(add, operands=())


register_commands(cli)
