"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, suffixctl.toml only contains
overrides. No config file at all means the bundled list with private
domains, matched leniently.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- suffixctl.toml sections ---


class RulesConfig(BaseModel):
    """[rules] section: which list to load and how."""

    model_config = {"frozen": True}

    path: str | None = None
    private_domains: bool = True


class LookupConfig(BaseModel):
    """[lookup] section: matching options."""

    model_config = {"frozen": True}

    ignore_private: bool = False
    strict: bool = False


class SuffixConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    rules: RulesConfig = Field(default_factory=RulesConfig)
    lookup: LookupConfig = Field(default_factory=LookupConfig)
