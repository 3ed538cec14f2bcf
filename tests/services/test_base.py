"""Tests for BaseService and service inheritance."""

from suffixctl.core.rule_list import RuleList
from suffixctl.core.rules import DEFAULT_RULE
from suffixctl.services.base import BaseService
from suffixctl.services.lookup import LookupService


class TestBaseService:
    def test_rule_list_stored(self, sample_list: RuleList) -> None:
        service = BaseService(sample_list)
        assert service._rules is sample_list

    def test_default_rule(self, sample_list: RuleList) -> None:
        assert BaseService(sample_list).default_rule == DEFAULT_RULE
        assert BaseService(sample_list, strict=True).default_rule is None

    def test_ok_carries_options(self, sample_list: RuleList) -> None:
        service = BaseService(sample_list, ignore_private=True)
        result = service._ok("probe", {"x": 1})
        assert result.ok is True
        assert result.meta == {"ignore_private": True, "strict": False}

    def test_fail_carries_detail(self, sample_list: RuleList) -> None:
        result = BaseService(sample_list)._fail("probe", "E001", "bad", name="x")
        assert result.ok is False
        assert result.error is not None
        assert result.error.detail == {"name": "x"}

    def test_subclass_pattern(self, sample_list: RuleList) -> None:
        class CountService(BaseService):
            def count(self) -> int:
                return len(self._rules)

        assert CountService(sample_list).count() == 7

    def test_lookup_service_extends_base(self) -> None:
        assert issubclass(LookupService, BaseService)
