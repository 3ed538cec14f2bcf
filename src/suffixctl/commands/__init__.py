"""Subcommand modules for suffixctl.

Provides register_commands() which uses deferred imports to keep
``suffixctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from suffixctl.commands.domain import domain
    from suffixctl.commands.match import match
    from suffixctl.commands.normalize import normalize
    from suffixctl.commands.parse import parse
    from suffixctl.commands.rules import rules
    from suffixctl.commands.valid import valid

    cli.add_command(parse)
    cli.add_command(valid)
    cli.add_command(domain)
    cli.add_command(normalize)
    cli.add_command(match)
    cli.add_command(rules)
