"""Tests for SuffixSettings: flags, env vars and TOML merged."""

from pathlib import Path

import click
import pytest

from suffixctl.config.discovery import CONFIG_ENV_VAR
from suffixctl.config.settings import SuffixSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ("SUFFIXCTL_QUIET", "SUFFIXCTL_JSON_OUTPUT", "SUFFIXCTL_LOOKUP__STRICT"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


class TestSuffixSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        """With no TOML and no env vars, all fields use code defaults."""
        settings = SuffixSettings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.log_json is False
        assert settings.rules.path is None
        assert settings.rules.private_domains is True
        assert settings.lookup.strict is False

    def test_frozen(self, tmp_path: Path) -> None:
        settings = SuffixSettings.from_cli(start=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / "suffixctl.toml"
        toml.write_text('[rules]\npath = "my.dat"\n[lookup]\nignore_private = true\n')
        settings = SuffixSettings.from_cli(start=tmp_path)
        assert settings.rules.path == "my.dat"
        assert settings.lookup.ignore_private is True
        assert settings.lookup.strict is False  # default preserved
        assert settings.config_path == toml

    def test_discovered_from_subdirectory(self, tmp_path: Path) -> None:
        (tmp_path / "suffixctl.toml").write_text("[lookup]\nstrict = true\n")
        child = tmp_path / "sub" / "deep"
        child.mkdir(parents=True)
        settings = SuffixSettings.from_cli(start=child)
        assert settings.lookup.strict is True

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text("[rules]\nprivate_domains = false\n")
        settings = SuffixSettings.from_cli(config_path=str(custom), start=tmp_path)
        assert settings.rules.private_domains is False
        assert settings.config_path == custom

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "suffixctl.toml").write_text("[rules\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            SuffixSettings.from_cli(start=tmp_path)


class TestCliFlags:
    def test_cli_flags_override(self, tmp_path: Path) -> None:
        settings = SuffixSettings.from_cli(
            start=tmp_path,
            json_output=True,
            quiet=True,
            verbose=True,
        )
        assert settings.json_output is True
        assert settings.quiet is True
        assert settings.verbose is True

    def test_cli_flags_override_toml(self, tmp_path: Path) -> None:
        """CLI flags take priority over TOML values."""
        (tmp_path / "suffixctl.toml").write_text("quiet = true\n")
        settings = SuffixSettings.from_cli(start=tmp_path, quiet=False)
        assert settings.quiet is False


class TestEnvVars:
    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SUFFIXCTL_QUIET", "true")
        settings = SuffixSettings.from_cli(start=tmp_path)
        assert settings.quiet is True

    def test_nested_env_var_override(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("SUFFIXCTL_LOOKUP__STRICT", "true")
        settings = SuffixSettings.from_cli(start=tmp_path)
        assert settings.lookup.strict is True


class TestSectionFlags:
    def test_absent_flags_keep_toml(self, tmp_path: Path) -> None:
        (tmp_path / "suffixctl.toml").write_text("[lookup]\nstrict = true\n")
        settings = SuffixSettings.from_cli(start=tmp_path, strict=False)
        assert settings.lookup.strict is True

    def test_flags_set_sections(self, tmp_path: Path) -> None:
        settings = SuffixSettings.from_cli(
            start=tmp_path,
            list_file="/lists/psl.dat",
            no_private=True,
            ignore_private=True,
            strict=True,
        )
        assert settings.rules.path == "/lists/psl.dat"
        assert settings.rules.private_domains is False
        assert settings.lookup.ignore_private is True
        assert settings.lookup.strict is True

    def test_list_file_overrides_toml_path(self, tmp_path: Path) -> None:
        (tmp_path / "suffixctl.toml").write_text('[rules]\npath = "a.dat"\n')
        settings = SuffixSettings.from_cli(start=tmp_path, list_file="/b.dat")
        assert settings.rules.path == "/b.dat"


class TestListPath:
    def test_none_without_path(self, tmp_path: Path) -> None:
        assert SuffixSettings.from_cli(start=tmp_path).list_path is None

    def test_relative_to_config(self, tmp_path: Path) -> None:
        (tmp_path / "suffixctl.toml").write_text('[rules]\npath = "tiny.dat"\n')
        child = tmp_path / "sub"
        child.mkdir()
        settings = SuffixSettings.from_cli(start=child)
        assert settings.list_path == tmp_path / "tiny.dat"
