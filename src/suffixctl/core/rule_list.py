"""Rule collection and the longest-match engine.

Rules are indexed by their full ``value`` string, so resolving a name
costs one dict lookup per label of the name, independent of list size.

Text format accepted by :func:`parse_rules`::

    // comment
    com
    *.ck
    !www.ck
    // ===BEGIN PRIVATE DOMAINS===
    blogspot.com
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from suffixctl.core.rules import DEFAULT_RULE, DOT, Rule, RuleKind, factory

COMMENT_TOKEN = "//"
PRIVATE_TOKEN = "===BEGIN PRIVATE DOMAINS==="


class RuleList:
    """A set of rules keyed by value, plus ``filter``/``find``.

    Single writer, many readers: build the list fully before querying it
    from several threads.

    Usage::

        rules = RuleList().add("com").add("*.uk").add("!bl.uk")
        rules.find("www.example.com")  # Rule(kind=NORMAL, value="com", ...)
    """

    def __init__(self, rules: Iterable[Rule] = ()) -> None:
        self._rules: dict[str, Rule] = {}
        for rule in rules:
            self.add(rule)

    @property
    def rules(self) -> Mapping[str, Rule]:
        """Read-only view of the index, keyed by rule value."""
        return MappingProxyType(self._rules)

    @property
    def default_rule(self) -> Rule:
        """Rule used when nothing in the list matches."""
        return DEFAULT_RULE

    def add(self, rule: Rule | str, private: bool = False) -> RuleList:
        """Insert *rule*, replacing any rule with the same value.

        Accepts a built :class:`Rule` or its declaration text; *private*
        only applies to text.
        """
        if isinstance(rule, str):
            rule = factory(rule, private=private)
        self._rules[rule.value] = rule
        return self

    def clear(self) -> RuleList:
        self._rules.clear()
        return self

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules.values())

    def __contains__(self, value: object) -> bool:
        return value in self._rules

    def __repr__(self) -> str:
        return f"RuleList(size={len(self._rules)})"

    def filter(self, name: str, ignore_private: bool = False) -> list[Rule]:
        """Return every rule whose value is a label-aligned suffix of *name*.

        Candidates are built right to left (``com``, ``example.com``, ...),
        so the result is ordered from fewest labels to most. With
        *ignore_private*, private rules are skipped but the walk continues.
        """
        labels = name.split(DOT)
        labels.reverse()

        matches: list[Rule] = []
        query = ""
        for position, label in enumerate(labels):
            query = label if position == 0 else label + DOT + query
            rule = self._rules.get(query)
            if rule is None:
                continue
            if ignore_private and rule.private:
                continue
            matches.append(rule)
        return matches

    def find(
        self,
        name: str,
        default: Rule | None = DEFAULT_RULE,
        ignore_private: bool = False,
    ) -> Rule | None:
        """Return the prevailing rule for *name*.

        An exception rule wins outright. Otherwise the rule consuming the
        most labels wins, the broader one on a tie. *default* is returned
        when nothing matches (pass None for strict lookups).
        """
        prevailing: Rule | None = None
        for rule in self.filter(name, ignore_private=ignore_private):
            if rule.kind is RuleKind.EXCEPTION:
                return rule
            if prevailing is None or rule.length >= prevailing.length:
                prevailing = rule
        return prevailing if prevailing is not None else default


def parse_rules(text: str, private_domains: bool = True) -> RuleList:
    """Build a :class:`RuleList` from list-format *text*.

    Lines after the private-section marker are flagged private. With
    *private_domains* False, parsing stops at that marker instead.
    """
    rules = RuleList()
    private = False

    for raw in text.splitlines():
        line = raw.strip()
        if not line:
            continue
        if PRIVATE_TOKEN in line:
            if not private_domains:
                break
            private = True
            continue
        if line.startswith(COMMENT_TOKEN):
            continue
        rules.add(factory(line, private=private))

    return rules
