"""Rich consoles for suffixctl output.

Renderers draw into an in-memory console and hand back a plain string, so
``format_result`` stays a pure function. Rich drops colour on its own when
the real stdout is not a terminal.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DEFAULT_WIDTH = 120

SUFFIX_THEME = Theme(
    {
        "sfx.ok": "bold green",
        "sfx.error": "bold red",
        "sfx.op": "bold cyan",
        "sfx.key": "dim",
        "sfx.trd": "yellow",
        "sfx.sld": "bold",
        "sfx.tld": "blue",
        "sfx.rule.normal": "green",
        "sfx.rule.wildcard": "magenta",
        "sfx.rule.exception": "red",
    }
)

_KIND_STYLES: dict[str, str] = {
    "normal": "sfx.rule.normal",
    "wildcard": "sfx.rule.wildcard",
    "exception": "sfx.rule.exception",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Return a themed console that writes into a fresh buffer.

    Tests pass ``no_color=True`` and a fixed *width* for stable output.
    """
    buffer = StringIO()
    return Console(
        file=buffer,
        theme=SUFFIX_THEME,
        no_color=no_color,
        highlight=False,
        width=width or DEFAULT_WIDTH,
    )


def get_output(console: Console) -> str:
    buffer = console.file
    assert isinstance(buffer, StringIO)
    return buffer.getvalue()


def style_for_kind(kind: str) -> str:
    """Theme style for a rule kind; empty for anything unknown."""
    return _KIND_STYLES.get(kind, "")
