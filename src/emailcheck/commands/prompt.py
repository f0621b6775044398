"""Command: interactive prompt until a valid address is entered."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from emailcheck.commands._base import EmailCheckCommand
from emailcheck.commands._context import open_stdin

if TYPE_CHECKING:
    from emailcheck.commands._context import AppContext

BANNER = """\
=== Email Address Validation Program ===
This program will validate your email address format.
"""


def run_prompt(app: AppContext, *, banner: bool = False) -> None:
    """Run the prompt loop once on stdin and emit its result.

    Exits with status 1 when input runs out before a valid address.
    """
    from emailcheck.services.prompt import PromptService

    if banner and not app.settings.quiet:
        click.echo(BANNER, err=True)

    svc = PromptService(app.settings, stream=open_stdin())
    app.emit(svc.collect())


@click.command(
    cls=EmailCheckCommand,
    examples="""\
  emailcheck prompt
  echo "user@example.com" | emailcheck prompt
  emailcheck --json prompt
  EMAILCHECK_PROMPT__MAX_INPUT_LENGTH=64 emailcheck prompt""",
)
@click.pass_obj
def prompt(app: AppContext) -> None:
    """Ask for an email address until a valid one is entered."""
    run_prompt(app)
