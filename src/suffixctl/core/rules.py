"""Public Suffix List rules: one tagged union, three kinds.

A rule is built from a single list declaration:

- ``com`` / ``co.uk``: NORMAL, matches exactly that suffix.
- ``*.ck`` / ``*``: WILDCARD, the suffix plus one more (any) label.
- ``!www.ck``: EXCEPTION, overrides a wildcard; the leftmost label is
  registrable, so the effective suffix is the rest (the *tail*).

INVARIANT: every kind decomposes a name with its own boundary logic.
``decompose`` dispatches on ``kind`` through ``_DECOMPOSERS``, one
function per kind.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from functools import cached_property

DOT = "."
STAR = "*"
BANG = "!"

Decomposition = tuple[str | None, str | None]
_NO_MATCH: Decomposition = (None, None)


class RuleKind(StrEnum):
    """The three rule kinds of the list format."""

    NORMAL = "normal"
    WILDCARD = "wildcard"
    EXCEPTION = "exception"


def label_count(value: str) -> int:
    """Number of dot-separated labels in *value* (``""`` counts as one)."""
    return value.count(DOT) + 1


@dataclass(frozen=True)
class Rule:
    """A single list rule.

    Attributes:
        kind: Which of the three rule kinds this is.
        value: Canonical suffix without ``*.`` or ``!``. For exceptions the
            excluded leftmost label is kept.
        length: Labels consumed from a matching name. A wildcard's starred
            label counts too.
        private: Declared under the private-domains section.
    """

    kind: RuleKind
    value: str
    length: int
    private: bool = False

    @cached_property
    def tail(self) -> str:
        """Suffix this rule actually matches.

        Same as ``value`` except for exceptions, which drop their leftmost label.
        """
        if self.kind is RuleKind.EXCEPTION:
            return DOT.join(self.value.split(DOT)[1:])
        return self.value

    @property
    def parts(self) -> list[str]:
        """Labels of the matched suffix, in the order they appear."""
        if self.kind is RuleKind.EXCEPTION:
            return self.value.split(DOT)[1:]
        return self.value.split(DOT)

    @property
    def text(self) -> str:
        """The rule as it would be declared in a list file."""
        if self.kind is RuleKind.WILDCARD:
            return f"{STAR}{DOT}{self.value}" if self.value else STAR
        if self.kind is RuleKind.EXCEPTION:
            return f"{BANG}{self.value}"
        return self.value

    def match(self, name: str) -> bool:
        """Check whether *name* ends with this rule's value on a label boundary.

        Examples:
            >>> factory("com").match("example.com")
            True
            >>> factory("com").match("example.net")
            False
            >>> factory("le.it").match("example.it")
            False
        """
        return name == self.value or name.endswith(DOT + self.value)

    def decompose(self, name: str) -> Decomposition:
        """Split *name* into ``(remainder, suffix)``.

        Returns ``(None, None)`` when the rule leaves no registrable
        label to the left of its suffix.

        Examples:
            >>> factory("com").decompose("www.google.com")
            ('www.google', 'com')
            >>> factory("com").decompose("com")
            (None, None)
        """
        return _DECOMPOSERS[self.kind](self, name)


# --- Decomposition, one function per kind ---


def _split_before(name: str, suffix: str) -> Decomposition:
    """Split where *suffix* starts, requiring a dot at a positive index."""
    if not name.endswith(suffix):
        return _NO_MATCH
    index = len(name) - len(suffix) - 1
    if index <= 0 or name[index] != DOT:
        return _NO_MATCH
    return name[:index], suffix


def _decompose_normal(rule: Rule, name: str) -> Decomposition:
    return _split_before(name, rule.value)


def _decompose_exception(rule: Rule, name: str) -> Decomposition:
    # The excluded label belongs to the remainder: match on the tail only.
    return _split_before(name, rule.tail)


def _decompose_wildcard(rule: Rule, name: str) -> Decomposition:
    value = rule.value
    if not name.endswith(value):
        return _NO_MATCH

    index = len(name) - len(value) - 1
    if value and (index <= 0 or name[index] != DOT):
        return _NO_MATCH

    # The starred label needs its own separator further left.
    split = name.rfind(DOT, 0, index)
    if split < 0:
        return _NO_MATCH
    return name[:split], name[split + 1 :]


_DECOMPOSERS: dict[RuleKind, Callable[[Rule, str], Decomposition]] = {
    RuleKind.NORMAL: _decompose_normal,
    RuleKind.WILDCARD: _decompose_wildcard,
    RuleKind.EXCEPTION: _decompose_exception,
}


# --- Construction ---


def factory(text: str, private: bool = False) -> Rule:
    """Build a rule from its list declaration, detecting the kind.

    Examples:
        >>> factory("ar").kind
        <RuleKind.NORMAL: 'normal'>
        >>> factory("*.ar").value
        'ar'
        >>> factory("!congresodelalengua3.ar").tail
        'ar'

    Raises:
        ValueError: If *text* is empty.
    """
    if not text:
        msg = "expected non-empty rule text"
        raise ValueError(msg)

    if text[0] == STAR:
        value = text[2:]
        return Rule(RuleKind.WILDCARD, value, label_count(value) + 1, private)
    if text[0] == BANG:
        value = text[1:]
        return Rule(RuleKind.EXCEPTION, value, label_count(value), private)
    return Rule(RuleKind.NORMAL, text, label_count(text), private)


# "If no rules match, the prevailing rule is '*'."
DEFAULT_RULE = Rule(RuleKind.WILDCARD, "", 2)
