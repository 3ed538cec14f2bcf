"""Human-readable rendering of ServiceResult, one renderer per op.

:func:`render_result` looks the renderer up by ``result.op``; ops without
one get every data field as ``key: value``. Renderers draw into the buffer
console from :mod:`suffixctl.output.console`.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from suffixctl.output.console import create_console, get_output, style_for_kind

if TYPE_CHECKING:
    from rich.console import Console

    from suffixctl.services.result import ServiceResult

# Field printed by --quiet for each op.
_QUIET_FIELDS: dict[str, str] = {
    "parse": "domain",
    "domain": "domain",
    "normalize": "name",
    "valid": "valid",
    "match": "prevailing",
    "describe_list": "rules",
}


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Styled text for *result*; plain when stdout is not a terminal."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """The op's primary value alone, for ``--quiet`` and shell pipelines."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    key = _QUIET_FIELDS.get(result.op)
    if key is None:
        return f"OK: {result.op}"
    value = result.data.get(key)
    if value is None:
        return ""
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    line = Text("OK", style="sfx.ok")
    line.append(f"  {result.op}", style="sfx.op")
    console.print(line)


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}:", style="sfx.key")
    if isinstance(value, (dict, list)):
        v = Text(_json.dumps(value, separators=(",", ":")))
    elif key in ("trd", "sld", "tld"):
        v = Text(str(value), style=f"sfx.{key}")
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Lookup options in effect, shown under ``--verbose``."""
    for key, value in (result.meta or {}).items():
        _field(console, f"meta.{key}", value)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="sfx.error")
    op = Text(f"  {result.op}", style="sfx.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    if verbose and err:
        console.print(Text(f"  code: {err.code}", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Op renderers ──────────────────────────────────────────────────────


def _render_parse(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Status line, the coloured split name, then its components."""
    d = result.data
    _status_line(console, result)

    split = Text("  ")
    for key in ("trd", "sld"):
        if d.get(key):
            split.append(d[key], style=f"sfx.{key}")
            split.append(".")
    split.append(str(d.get("tld", "")), style="sfx.tld")
    console.print(split)

    for key in ("trd", "sld", "tld", "domain", "subdomain", "rule"):
        value = d.get(key)
        if value is not None:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


def _render_match(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Table of matching rules, narrowest first, and the prevailing one."""
    d = result.data
    _status_line(console, result)
    _field(console, "name", d.get("name"))

    matches: list[dict[str, Any]] = d.get("matches", [])
    if matches:
        table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
        table.add_column("Rule", no_wrap=True)
        table.add_column("Kind")
        table.add_column("Labels", justify="right")
        table.add_column("Section")
        for item in matches:
            kind = str(item.get("kind", ""))
            table.add_row(
                Text(str(item.get("rule", "")), style=style_for_kind(kind)),
                kind,
                str(item.get("length", "")),
                "private" if item.get("private") else "icann",
            )
        console.print(table)
    else:
        console.print(Text("  no listed rule matches", style="dim"))

    prevailing = d.get("prevailing")
    _field(console, "prevailing", prevailing if prevailing is not None else "none")
    if verbose:
        _render_meta(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "parse": _render_parse,
    "match": _render_match,
}
