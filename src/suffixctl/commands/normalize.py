"""Command: canonicalize a name."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from suffixctl.commands._base import SuffixCommand

if TYPE_CHECKING:
    from suffixctl.commands._context import AppContext


@click.command(
    cls=SuffixCommand,
    examples="""\
  suffixctl normalize "  Example.COM. "
  suffixctl -q normalize WWW.Example.org""",
)
@click.argument("name")
@click.pass_obj
def normalize(app: AppContext, name: str) -> None:
    """Trim, drop the trailing dot and lowercase NAME."""
    app.emit(app.lookup.normalize(name))
