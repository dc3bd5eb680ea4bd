# topmark:header:start
#
#   project      : shebangfmt
#   file         : test_filetypes.py
#   file_relpath : tests/cli/test_filetypes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `filetypes` output formats and config extension."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from shebangfmt.filetypes import DEFAULT_FILE_EXTENSIONS, DEFAULT_FILE_NAMES
from tests.cli.conftest import assert_SUCCESS, run_cli_in

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.cli


def test_filetypes_text(project: Path) -> None:
    """Text output lists extensions with a dot and file names verbatim."""
    result = run_cli_in(project, ["--no-color", "filetypes"])
    assert_SUCCESS(result)
    lines = result.output.splitlines()
    assert lines[0] == "Supported file types:"
    assert lines[1].startswith("  extensions: .awk .bats ")
    assert lines[1].endswith(" .SlackBuild .stp")
    assert lines[2] == "  file names: Makefile GNUmakefile"


def test_filetypes_json(project: Path) -> None:
    """JSON output carries the full table."""
    result = run_cli_in(project, ["--no-color", "filetypes", "--format", "json"])
    assert_SUCCESS(result)
    payload = json.loads(result.output)
    assert payload["file_extensions"] == list(DEFAULT_FILE_EXTENSIONS)
    assert payload["file_names"] == list(DEFAULT_FILE_NAMES)


def test_filetypes_markdown(project: Path) -> None:
    """Markdown output has one bullet per entry."""
    result = run_cli_in(project, ["--no-color", "filetypes", "--format", "markdown"])
    assert_SUCCESS(result)
    assert "- `.sh`" in result.output
    assert "- `GNUmakefile`" in result.output


def test_filetypes_includes_configured_entries(project: Path) -> None:
    """Entries from project config are listed; --no-config hides them."""
    (project / "shebangfmt.toml").write_text(
        'root = true\nextensions = ["tcl"]\nfile-names = ["Rakefile"]\n', encoding="utf-8"
    )
    with_config = json.loads(
        run_cli_in(project, ["filetypes", "--format", "json"]).output
    )
    assert "tcl" in with_config["file_extensions"]
    assert "Rakefile" in with_config["file_names"]

    without = json.loads(
        run_cli_in(project, ["filetypes", "--format", "json", "--no-config"]).output
    )
    assert "tcl" not in without["file_extensions"]
