"""BaseService: abstract foundation for suffixctl services.

Every service receives the :class:`RuleList` it resolves against, plus the
lookup options, at construction time. Nothing reaches for the process-wide
default list from inside a service.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from suffixctl.core.rules import DEFAULT_RULE
from suffixctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from suffixctl.core.rule_list import RuleList
    from suffixctl.core.rules import Rule

logger = logging.getLogger(__name__)


class BaseService:
    """Abstract base for service-layer classes.

    Usage::

        class LookupService(BaseService):
            def parse(self, name: str) -> ServiceResult:
                ...
                return self._ok("parse", {...})
    """

    def __init__(
        self,
        rule_list: RuleList,
        *,
        ignore_private: bool = False,
        strict: bool = False,
    ) -> None:
        self._rules = rule_list
        self._ignore_private = ignore_private
        self._strict = strict

    @property
    def default_rule(self) -> Rule | None:
        """Fallback rule, or None in strict mode."""
        return None if self._strict else DEFAULT_RULE

    def _options(self) -> dict[str, Any]:
        return {"ignore_private": self._ignore_private, "strict": self._strict}

    def _ok(
        self, op: str, data: dict[str, Any], warnings: list[str] | None = None
    ) -> ServiceResult:
        return ServiceResult(
            ok=True, op=op, data=data, warnings=warnings or [], meta=self._options()
        )

    def _fail(self, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        logger.debug("%s failed: %s (%s)", op, message, code)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=str(code), message=message, detail=detail),
            meta=self._options(),
        )
