"""Command: split a name into subdomain, domain and public suffix."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from suffixctl.commands._base import SuffixCommand

if TYPE_CHECKING:
    from suffixctl.commands._context import AppContext


@click.command(
    cls=SuffixCommand,
    examples="""\
  suffixctl parse www.example.co.uk
  suffixctl --ignore-private parse foo.blogspot.com
  suffixctl --strict parse example.tldnotlisted
  suffixctl --json parse www.example.com.""",
)
@click.argument("name")
@click.pass_obj
def parse(app: AppContext, name: str) -> None:
    """Parse NAME into trd, sld and tld."""
    app.emit(app.lookup.parse(name))
