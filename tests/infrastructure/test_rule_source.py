"""Tests for rule list sources: bundled snapshot and files on disk."""

from __future__ import annotations

from pathlib import Path

import pytest

from suffixctl.core.rules import RuleKind, factory
from suffixctl.infrastructure.rule_source import (
    RuleSourceError,
    load_rule_list,
    read_list_text,
)


class TestReadListText:
    def test_bundled_snapshot(self) -> None:
        text = read_list_text()
        assert "===BEGIN ICANN DOMAINS===" in text
        assert "===BEGIN PRIVATE DOMAINS===" in text

    def test_reads_file(self, tmp_path: Path) -> None:
        path = tmp_path / "list.dat"
        path.write_text("com\n", encoding="utf-8")
        assert read_list_text(path) == "com\n"
        assert read_list_text(str(path)) == "com\n"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(RuleSourceError, match="not found"):
            read_list_text(tmp_path / "missing.dat")

    def test_undecodable_file(self, tmp_path: Path) -> None:
        path = tmp_path / "list.dat"
        path.write_bytes(b"\xff\xfe\xfa")
        with pytest.raises(RuleSourceError, match="unreadable"):
            read_list_text(path)


class TestLoadRuleList:
    def test_bundled_list_has_every_kind(self) -> None:
        rules = load_rule_list()
        assert len(rules) > 5000
        kinds = {rule.kind for rule in rules}
        assert kinds == {RuleKind.NORMAL, RuleKind.WILDCARD, RuleKind.EXCEPTION}

    def test_bundled_private_rules(self) -> None:
        rules = load_rule_list()
        assert rules.rules["blogspot.com"].private is True
        assert rules.rules["com"].private is False

    def test_without_private_domains(self) -> None:
        rules = load_rule_list(private_domains=False)
        assert "com" in rules
        assert "blogspot.com" not in rules
        assert not any(rule.private for rule in rules)

    def test_from_file(self, tmp_path: Path) -> None:
        path = tmp_path / "list.dat"
        path.write_text("// tiny\ncom\n*.ck\n!www.ck\n", encoding="utf-8")
        rules = load_rule_list(path)
        assert len(rules) == 3
        assert rules.rules["www.ck"] == factory("!www.ck")
