"""The process-wide default rule list.

Facade calls that receive no explicit ``rule_list`` fall back to this list.
It is built lazily on first use from the bundled snapshot.

Replacing it (e.g. with a list parsed without private domains) is a
setup-time operation: readers racing a replacement see either list.
Tests use :func:`override_default_list` to swap it for a block and restore
it afterwards.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import TYPE_CHECKING

from suffixctl.infrastructure.rule_source import load_rule_list

if TYPE_CHECKING:
    from collections.abc import Iterator

    from suffixctl.core.rule_list import RuleList

logger = logging.getLogger(__name__)

_default: RuleList | None = None
_lock = threading.Lock()


def get_default_list() -> RuleList:
    """Return the default list, building it from the bundled snapshot once."""
    global _default
    current = _default
    if current is not None:
        return current
    with _lock:
        if _default is None:
            logger.debug("Building default rule list from bundled snapshot")
            _default = load_rule_list()
        return _default


def set_default_list(rule_list: RuleList | None) -> None:
    """Replace the default list. None drops it so the next use rebuilds it."""
    global _default
    with _lock:
        _default = rule_list


@contextmanager
def override_default_list(rule_list: RuleList) -> Iterator[RuleList]:
    """Use *rule_list* as the default inside the block, then restore."""
    global _default
    with _lock:
        previous = _default
        _default = rule_list
    try:
        yield rule_list
    finally:
        with _lock:
            _default = previous
