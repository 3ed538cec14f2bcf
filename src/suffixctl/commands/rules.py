"""Command: summarize the loaded rule list."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from suffixctl.commands._base import SuffixCommand

if TYPE_CHECKING:
    from suffixctl.commands._context import AppContext


@click.command(
    cls=SuffixCommand,
    examples="""\
  suffixctl rules
  suffixctl --no-private rules
  suffixctl --list-file ./my_list.dat --json rules""",
)
@click.pass_obj
def rules(app: AppContext) -> None:
    """Count the loaded rules by section and kind."""
    app.emit(app.lookup.describe_list())
