# topmark:header:start
#
#   project      : shebangfmt
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the shebangfmt test suite.

Sets up TRACE logging for test runs and keeps the developer's environment
(log level, forced colors) from leaking into test expectations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from hypothesis import settings

from shebangfmt.config import logging

if TYPE_CHECKING:
    from pathlib import Path

# Opt-in larger budget: pytest --hypothesis-profile thorough
settings.register_profile("thorough", max_examples=5000, deadline=None)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure env-driven log level and color settings do not affect tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV, raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE level during tests so failures come with full context."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Return an isolated project directory and make it the working directory.

    The directory holds a ``shebangfmt.toml`` with ``root = true`` so config
    discovery never reaches beyond the test directory.

    Args:
        tmp_path (Path): Pytest temporary directory.
        monkeypatch (pytest.MonkeyPatch): Used to change the working directory.

    Returns:
        Path: The project root.
    """
    root: Path = tmp_path / "proj"
    root.mkdir()
    (root / "shebangfmt.toml").write_text("root = true\n", encoding="utf-8")
    monkeypatch.chdir(root)
    return root
