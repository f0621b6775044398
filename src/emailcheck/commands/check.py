"""Command: non-interactive address validation."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from emailcheck.commands._base import EmailCheckCommand
from emailcheck.commands._context import open_stdin
from emailcheck.services.prompt import strip_terminator

if TYPE_CHECKING:
    from emailcheck.commands._context import AppContext


@click.command(
    cls=EmailCheckCommand,
    examples="""\
  emailcheck check user@example.com
  emailcheck check user@example.com "us er@example.com" a@b.c
  emailcheck -v check user@example.c
  cat addresses.txt | emailcheck --json check""",
)
@click.argument("addresses", nargs=-1)
@click.pass_obj
def check(app: AppContext, addresses: tuple[str, ...]) -> None:
    """Validate ADDRESSES.

    With no ADDRESSES, reads one address per line from piped stdin.
    """
    from emailcheck.services.validation import ValidationService

    svc = ValidationService(app.settings)

    if not addresses:
        stream = open_stdin()
        if stream.isatty():
            raise click.UsageError("No addresses given; pass ADDRESSES or pipe them on stdin.")
        addresses = tuple(strip_terminator(line) for line in stream)
        if not addresses:
            raise click.UsageError("No addresses given on the command line or stdin.")

    if len(addresses) == 1:
        app.emit(svc.validate(addresses[0]))
    else:
        app.emit(svc.validate_many(addresses))
