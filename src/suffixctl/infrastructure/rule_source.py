"""Rule list sources: the bundled snapshot or a file on disk.

The bundled ``public_suffix_list.dat`` ships inside the package
(``suffixctl/data``) and is read through :mod:`importlib.resources`, so the
default list works from a wheel, a zip or a source checkout alike.
"""

from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path

from suffixctl.core.rule_list import RuleList, parse_rules

logger = logging.getLogger(__name__)

BUNDLED_LIST = "public_suffix_list.dat"


class RuleSourceError(Exception):
    """Raised when a rule list file cannot be read."""


def read_list_text(path: Path | str | None = None) -> str:
    """Return list-format text from *path*, or the bundled snapshot if None."""
    if path is None:
        bundled = resources.files("suffixctl") / "data" / BUNDLED_LIST
        return bundled.read_text(encoding="utf-8")

    p = Path(path)
    try:
        return p.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        msg = f"rule list not found: {p}"
        raise RuleSourceError(msg) from exc
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"rule list unreadable: {p} ({exc})"
        raise RuleSourceError(msg) from exc


def load_rule_list(path: Path | str | None = None, private_domains: bool = True) -> RuleList:
    """Read and parse a rule list.

    Args:
        path: List file to load. None selects the bundled snapshot.
        private_domains: Keep the private-domains section. When False,
            parsing stops at the section marker.
    """
    text = read_list_text(path)
    rules = parse_rules(text, private_domains=private_domains)
    logger.debug(
        "Loaded %d rules from %s (private_domains=%s)",
        len(rules),
        path or BUNDLED_LIST,
        private_domains,
    )
    return rules
