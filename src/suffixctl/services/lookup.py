"""LookupService: name resolution against a rule list.

Wraps the :mod:`suffixctl.api` facade so the CLI gets ServiceResult
envelopes instead of exceptions. Error codes:

- ``INVALID_INPUT``: the name is malformed, or strict mode found no rule.
- ``NOT_ALLOWED``: the name is a bare public suffix.

A successful parse decided by the default ``*`` rule carries a warning.
"""

from __future__ import annotations

import logging
from collections import Counter

from suffixctl import api
from suffixctl.core.errors import DomainNotAllowedError, InvalidDomainError
from suffixctl.core.rules import DEFAULT_RULE, RuleKind
from suffixctl.services.base import BaseService
from suffixctl.services.result import ErrorCode, ServiceResult

logger = logging.getLogger(__name__)


class LookupService(BaseService):
    """Parse, validate and inspect names."""

    def parse(self, name: str) -> ServiceResult:
        """Split *name* into trd/sld/tld and report the prevailing rule."""
        op = "parse"
        try:
            parsed = api.parse(
                name,
                rule_list=self._rules,
                default_rule=self.default_rule,
                ignore_private=self._ignore_private,
            )
        except InvalidDomainError as exc:
            return self._fail(op, ErrorCode.INVALID_INPUT, str(exc), name=name)
        except DomainNotAllowedError as exc:
            return self._fail(op, ErrorCode.NOT_ALLOWED, str(exc), name=name)

        normalized = api.normalize(name)
        rule = self._rules.find(
            normalized,
            default=self.default_rule,
            ignore_private=self._ignore_private,
        )
        warnings: list[str] = []
        if rule == DEFAULT_RULE:
            warnings.append(
                f"`{parsed.tld}` is not a listed suffix; the default '*' rule applied"
            )
        return self._ok(
            op,
            {
                "name": normalized,
                "tld": parsed.tld,
                "sld": parsed.sld,
                "trd": parsed.trd,
                "domain": parsed.domain,
                "subdomain": parsed.subdomain,
                "rule": rule.text if rule is not None else None,
            },
            warnings,
        )

    def valid(self, name: str) -> ServiceResult:
        """Report whether *name* is a registrable domain or below one."""
        result = api.valid(
            name,
            rule_list=self._rules,
            default_rule=self.default_rule,
            ignore_private=self._ignore_private,
        )
        return self._ok("valid", {"name": name, "valid": result})

    def domain(self, name: str) -> ServiceResult:
        """Return the registrable domain of *name* (None when there is none)."""
        registrable = api.domain(
            name,
            rule_list=self._rules,
            default_rule=self.default_rule,
            ignore_private=self._ignore_private,
        )
        return self._ok("domain", {"name": name, "domain": registrable})

    def normalize(self, name: str) -> ServiceResult:
        op = "normalize"
        try:
            normalized = api.normalize(name)
        except InvalidDomainError as exc:
            return self._fail(op, ErrorCode.INVALID_INPUT, str(exc), name=name)
        return self._ok(op, {"input": name, "name": normalized})

    def match(self, name: str) -> ServiceResult:
        """List every rule matching *name* and the one that prevails.

        Matches come in lookup order, fewest labels first.
        """
        op = "match"
        try:
            normalized = api.normalize(name)
        except InvalidDomainError as exc:
            return self._fail(op, ErrorCode.INVALID_INPUT, str(exc), name=name)

        matches = self._rules.filter(normalized, ignore_private=self._ignore_private)
        prevailing = self._rules.find(
            normalized,
            default=self.default_rule,
            ignore_private=self._ignore_private,
        )
        return self._ok(
            op,
            {
                "name": normalized,
                "matches": [
                    {"rule": r.text, "kind": str(r.kind), "length": r.length, "private": r.private}
                    for r in matches
                ],
                "prevailing": prevailing.text if prevailing is not None else None,
            },
        )

    def describe_list(self) -> ServiceResult:
        """Summarize the loaded list by section and rule kind."""
        kinds = Counter(rule.kind for rule in self._rules)
        private = sum(1 for rule in self._rules if rule.private)
        total = len(self._rules)
        logger.debug("Describing rule list with %d rules", total)
        return self._ok(
            "describe_list",
            {
                "rules": total,
                "icann": total - private,
                "private": private,
                "normal": kinds[RuleKind.NORMAL],
                "wildcard": kinds[RuleKind.WILDCARD],
                "exception": kinds[RuleKind.EXCEPTION],
            },
        )
