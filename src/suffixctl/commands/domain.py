"""Command: print the registrable domain of a name."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from suffixctl.commands._base import SuffixCommand

if TYPE_CHECKING:
    from suffixctl.commands._context import AppContext


@click.command(
    cls=SuffixCommand,
    examples="""\
  suffixctl domain www.example.co.uk
  suffixctl -q domain a.b.example.com
  suffixctl --ignore-private domain foo.blogspot.com""",
)
@click.argument("name")
@click.pass_obj
def domain(app: AppContext, name: str) -> None:
    """Show the registrable domain of NAME (empty when there is none)."""
    app.emit(app.lookup.domain(name))
