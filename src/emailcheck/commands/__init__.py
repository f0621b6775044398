"""Subcommand modules for emailcheck.

Provides register_commands() which uses deferred imports to keep
``emailcheck --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from emailcheck.commands.check import check
    from emailcheck.commands.prompt import prompt

    cli.add_command(prompt)
    cli.add_command(check)
