"""Root CLI group for emailcheck with global flags and command registration."""

from __future__ import annotations

import click
from pydantic import ValidationError

from emailcheck import __version__
from emailcheck.commands import register_commands
from emailcheck.commands._base import EmailCheckGroup
from emailcheck.commands._context import AppContext
from emailcheck.config.settings import EmailCheckSettings


@click.group(
    cls=EmailCheckGroup,
    invoke_without_command=True,
    examples="""\
  emailcheck
  emailcheck check user@example.com
  emailcheck --json check a@b.c user@example.com
  emailcheck -c ./emailcheck.toml prompt""",
)
@click.version_option(version=__version__, prog_name="emailcheck")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """emailcheck — email address syntax validator.

    Without a command, asks for an address until a valid one is entered.
    """
    try:
        settings = EmailCheckSettings.from_cli(
            config_path=config_path,
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
        )
    except ValidationError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}") from exc
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        from emailcheck.commands.prompt import run_prompt

        run_prompt(ctx.obj, banner=True)


register_commands(cli)
