"""Shared pytest fixtures and test helpers for suffixctl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest
from click.testing import CliRunner

from suffixctl.core.rule_list import RuleList, parse_rules
from suffixctl.infrastructure.defaults import set_default_list
from suffixctl.infrastructure.rule_source import load_rule_list

SAMPLE_LIST = """\
// This Source Code Form is subject to the terms of the Mozilla Public
// License, v. 2.0. If a copy of the MPL was not distributed with this
// file, You can obtain one at https://mozilla.org/MPL/2.0/.

// ===BEGIN ICANN DOMAINS===

// com
com

// uk
*.uk
*.sch.uk
!bl.uk
!british-library.uk

// io
io

// ===END ICANN DOMAINS===
// ===BEGIN PRIVATE DOMAINS===

// Google, Inc.
blogspot.com

// ===END PRIVATE DOMAINS===
"""


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def sample_list() -> RuleList:
    """Small list with every rule kind and one private rule."""
    return parse_rules(SAMPLE_LIST)


@pytest.fixture(scope="session")
def bundled_list() -> RuleList:
    """The bundled snapshot, parsed once per session."""
    return load_rule_list()


@pytest.fixture(autouse=True)
def _restore_default_list(bundled_list: RuleList) -> Generator[None]:
    """Start every test on the bundled default list and put it back afterwards."""
    set_default_list(bundled_list)
    yield
    set_default_list(bundled_list)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo handler changes made by configure_logging (CLI runs call it)."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("suffixctl")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)
