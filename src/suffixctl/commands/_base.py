"""Click base classes that add an on-demand ``--examples`` flag.

``--help`` stays short; ``suffixctl parse --examples`` prints the sample
invocations declared on the command and exits 0.
"""

from __future__ import annotations

from typing import Any

import click


class ExamplesMixin:
    """Accepts ``examples=...`` and turns it into an eager ``--examples`` option."""

    params: list[click.Parameter]

    def _init_examples(self, examples: str | None) -> None:
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._show_examples,
                    help="Show usage examples.",
                )
            )

    def _show_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(self.examples)
        ctx.exit(0)


class SuffixCommand(ExamplesMixin, click.Command):
    """A command with optional ``--examples``."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)


class SuffixGroup(ExamplesMixin, click.Group):
    """A group with optional ``--examples``; its subcommands default to SuffixCommand."""

    command_class = SuffixCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)
