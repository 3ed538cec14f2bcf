"""suffixctl: offline Public Suffix List parsing.

Quick use::

    import suffixctl

    suffixctl.parse("www.example.co.uk").to_tuple()  # ('www', 'example', 'co.uk')
    suffixctl.domain("foo.blogspot.com")             # 'foo.blogspot.com'
    suffixctl.valid("com")                           # False
"""

from __future__ import annotations

from suffixctl.api import domain, normalize, parse, valid
from suffixctl.core.errors import DomainNotAllowedError, InvalidDomainError, PublicSuffixError
from suffixctl.core.names import Domain
from suffixctl.core.rule_list import RuleList, parse_rules
from suffixctl.core.rules import DEFAULT_RULE, Rule, RuleKind, factory

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_RULE",
    "Domain",
    "DomainNotAllowedError",
    "InvalidDomainError",
    "PublicSuffixError",
    "Rule",
    "RuleKind",
    "RuleList",
    "__version__",
    "domain",
    "factory",
    "normalize",
    "parse",
    "parse_rules",
    "valid",
]
