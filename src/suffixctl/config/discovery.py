"""Locate and load ``suffixctl.toml``.

Lookup order: the ``SUFFIXCTL_CONFIG`` env var, then the working directory
and each of its parents (``suffixctl.toml`` before ``.suffixctl.toml``).
A relative ``[rules] path`` is read relative to the file that declares it.
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from suffixctl.config.models import SuffixConfig

CONFIG_FILENAMES = ("suffixctl.toml", ".suffixctl.toml")
CONFIG_FILENAME = CONFIG_FILENAMES[0]
CONFIG_ENV_VAR = "SUFFIXCTL_CONFIG"


def _lineage(start: Path) -> Iterator[Path]:
    """Yield *start* and every parent up to the filesystem root."""
    current = start.resolve()
    yield current
    yield from current.parents


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies from *start* (default: cwd).

    ``SUFFIXCTL_CONFIG`` wins when set; if it names a missing file the
    result is None rather than a walk-up match.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        explicit = Path(env_path)
        return explicit if explicit.is_file() else None

    for directory in _lineage(start or Path.cwd()):
        for filename in CONFIG_FILENAMES:
            candidate = directory / filename
            if candidate.is_file():
                return candidate
    return None


def load_config(path: Path | None = None, cwd: Path | None = None) -> SuffixConfig:
    """Validate the TOML at *path* (discovered from *cwd* when None).

    No file at all yields the code defaults.
    """
    if path is None:
        path = find_config(cwd)
    if path is None:
        return SuffixConfig()

    data: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
    return SuffixConfig.model_validate(data)


def resolve_rules_path(rules_path: str | None, config_path: Path | None) -> Path | None:
    """Anchor a relative list path to the directory of *config_path*.

    Absolute paths, and any path when no config file was loaded, are
    returned unchanged.
    """
    if rules_path is None:
        return None
    path = Path(rules_path).expanduser()
    if path.is_absolute() or config_path is None:
        return path
    return config_path.parent / path
