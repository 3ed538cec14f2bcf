"""SuffixSettings: CLI flags, env vars and ``suffixctl.toml`` merged into one object.

Highest priority first:

1. Init kwargs: flags passed by Click through :meth:`SuffixSettings.from_cli`.
2. ``SUFFIXCTL_*`` env vars, sections nested with ``__``
   (``SUFFIXCTL_LOOKUP__STRICT=true``).
3. The TOML file found by :func:`suffixctl.config.discovery.find_config`.
4. Defaults baked into :mod:`suffixctl.config.models`.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from suffixctl.config.discovery import find_config, resolve_rules_path
from suffixctl.config.models import LookupConfig, RulesConfig


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        import click

        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by one TOML file (or nothing)."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = (
            _read_toml(toml_path) if toml_path is not None and toml_path.is_file() else {}
        )

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# The TOML path chosen by from_cli, visible to settings_customise_sources.
_tls = threading.local()


class SuffixSettings(BaseSettings):
    """Everything a CLI invocation needs, frozen once built.

    Attributes:
        config_path: The TOML file that was loaded, or None.
        rules: Which list to load (``[rules]``).
        lookup: How to match against it (``[lookup]``).
    """

    model_config = {
        "frozen": True,
        "env_prefix": "SUFFIXCTL_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- output flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    rules: RulesConfig = Field(default_factory=RulesConfig)
    lookup: LookupConfig = Field(default_factory=LookupConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Init kwargs, then env vars, then the TOML file; no dotenv or secrets."""
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, getattr(_tls, "toml_path", None)),
        )

    @property
    def list_path(self) -> Path | None:
        """Custom list file, anchored to the config file's directory when relative."""
        return resolve_rules_path(self.rules.path, self.config_path)

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        list_file: str | None = None,
        no_private: bool = False,
        ignore_private: bool = False,
        strict: bool = False,
        **cli_flags: Any,
    ) -> SuffixSettings:
        """Build settings for one CLI invocation.

        *config_path* (``--config``) skips discovery; otherwise
        ``suffixctl.toml`` is looked up from *start*. The section flags only
        override the TOML when actually given, so ``--strict`` absent
        leaves ``[lookup] strict = true`` in force.
        """
        if config_path:
            explicit = Path(config_path)
            toml_path = explicit if explicit.is_file() else None
        else:
            toml_path = find_config(start)

        rules: dict[str, Any] = {}
        if list_file:
            rules["path"] = list_file
        if no_private:
            rules["private_domains"] = False
        lookup: dict[str, Any] = {}
        if ignore_private:
            lookup["ignore_private"] = True
        if strict:
            lookup["strict"] = True
        if rules:
            cli_flags["rules"] = rules
        if lookup:
            cli_flags["lookup"] = lookup

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None
