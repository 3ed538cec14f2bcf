"""Command: check whether a name is a registrable domain (or below one)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from suffixctl.commands._base import SuffixCommand

if TYPE_CHECKING:
    from suffixctl.commands._context import AppContext


@click.command(
    cls=SuffixCommand,
    examples="""\
  suffixctl valid example.com
  suffixctl -q valid co.uk || echo "not registrable"
  suffixctl --ignore-private valid blogspot.com""",
)
@click.argument("name")
@click.pass_obj
def valid(app: AppContext, name: str) -> None:
    """Validate NAME. Exits 1 when it is not valid."""
    result = app.lookup.valid(name)
    app.emit(result)
    if not result.data.get("valid"):
        raise SystemExit(1)
