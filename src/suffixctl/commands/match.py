"""Command: show which list rules match a name."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from suffixctl.commands._base import SuffixCommand

if TYPE_CHECKING:
    from suffixctl.commands._context import AppContext


@click.command(
    cls=SuffixCommand,
    examples="""\
  suffixctl match www.city.kobe.jp
  suffixctl --ignore-private match foo.blogspot.com
  suffixctl --json match a.b.c.ck""",
)
@click.argument("name")
@click.pass_obj
def match(app: AppContext, name: str) -> None:
    """List the rules matching NAME and the one that prevails."""
    app.emit(app.lookup.match(name))
