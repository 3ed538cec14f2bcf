"""Facade over the rule engine: normalize, parse, valid, domain.

Every call takes the rule list explicitly; ``rule_list=None`` selects the
process-wide default from :mod:`suffixctl.infrastructure.defaults`.

Examples::

    >>> parse("www.example.co.uk").to_tuple()
    ('www', 'example', 'co.uk')
    >>> domain("blogspot.com") is None
    True
    >>> valid("http://google.com")
    False
"""

from __future__ import annotations

import string

from suffixctl.core.errors import (
    DomainNotAllowedError,
    InvalidDomainError,
    PublicSuffixError,
)
from suffixctl.core.names import Domain
from suffixctl.core.rule_list import RuleList
from suffixctl.core.rules import DEFAULT_RULE, DOT, Rule
from suffixctl.infrastructure.defaults import get_default_list

SCHEME_MARKER = "://"

# ASCII-only case folding: IDN labels are expected to be punycode already.
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def normalize(name: str) -> str:
    """Canonicalize user input into a lowercase, non-FQDN name.

    Trims whitespace, drops one trailing dot, and lowercases ASCII letters.
    The result is stable: ``normalize(normalize(x)) == normalize(x)``.

    Raises:
        InvalidDomainError: Blank name, dot at either edge, or a URL.
    """
    name = name.strip()
    if name.endswith(DOT):
        name = name[:-1].strip()
    name = name.translate(_ASCII_LOWER)

    if not name:
        raise InvalidDomainError("Name is blank")
    if name.startswith(DOT):
        raise InvalidDomainError("Name starts with a dot")
    if name.endswith(DOT):
        raise InvalidDomainError("Name ends with an empty label")
    if SCHEME_MARKER in name:
        msg = f"{name} is not expected to contain a scheme"
        raise InvalidDomainError(msg)
    return name


def _resolve(
    name: str,
    rule_list: RuleList | None,
    default_rule: Rule | None,
    ignore_private: bool,
) -> tuple[str, str | None, str | None]:
    """Normalize *name* and decompose it with its prevailing rule."""
    what = normalize(name)
    rules = rule_list if rule_list is not None else get_default_list()

    rule = rules.find(what, default=default_rule, ignore_private=ignore_private)
    if rule is None:
        msg = f"`{what}` is not a valid domain"
        raise InvalidDomainError(msg)

    remainder, suffix = rule.decompose(what)
    return what, remainder, suffix


def parse(
    name: str,
    rule_list: RuleList | None = None,
    default_rule: Rule | None = DEFAULT_RULE,
    ignore_private: bool = False,
) -> Domain:
    """Split *name* into subdomain, registrable label and public suffix.

    Args:
        name: Domain name, optionally fully qualified (trailing dot).
        rule_list: List to resolve against; None selects the default list.
        default_rule: Fallback when no rule matches. None makes unlisted
            suffixes an error.
        ignore_private: Skip rules from the private-domains section.

    Raises:
        InvalidDomainError: The name is malformed or no rule resolves.
        DomainNotAllowedError: The name is a bare public suffix.
    """
    what, remainder, suffix = _resolve(name, rule_list, default_rule, ignore_private)
    if suffix is None:
        msg = f"`{what}` is not allowed according to Registry policy"
        raise DomainNotAllowedError(msg)

    sld: str | None = None
    trd: str | None = None
    if remainder:
        labels = remainder.split(DOT)
        sld = labels.pop()
        trd = DOT.join(labels) or None
    return Domain(suffix, sld, trd)


def valid(
    name: str,
    rule_list: RuleList | None = None,
    default_rule: Rule | None = DEFAULT_RULE,
    ignore_private: bool = False,
) -> bool:
    """Check whether *name* resolves to a registrable domain or a subdomain of one."""
    try:
        _, _, suffix = _resolve(name, rule_list, default_rule, ignore_private)
    except InvalidDomainError:
        return False
    return suffix is not None


def domain(
    name: str,
    rule_list: RuleList | None = None,
    default_rule: Rule | None = DEFAULT_RULE,
    ignore_private: bool = False,
) -> str | None:
    """Return the registrable domain of *name*, or None for any parse failure."""
    try:
        return parse(name, rule_list, default_rule, ignore_private).domain
    except PublicSuffixError:
        return None
