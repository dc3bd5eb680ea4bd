# topmark:header:start
#
#   project      : shebangfmt
#   file         : test_check_stdin.py
#   file_relpath : tests/cli/test_check_stdin.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `check` with content on STDIN (``-`` plus ``--stdin-filename``)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from shebangfmt.cli.exit_codes import ExitCode
from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, assert_WOULD_CHANGE, run_cli_in

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.cli


def test_stdin_apply_writes_content_to_stdout(project: Path) -> None:
    """With --apply the normalized content is written to STDOUT."""
    result = run_cli_in(
        project,
        ["check", "--apply", "-", "--stdin-filename", "run.sh"],
        input_text=b"#!  /bin/sh  -e\r\necho hi\r\n",
    )
    assert_SUCCESS(result)
    assert result.stdout_bytes == b"#!/bin/sh -e\r\necho hi\r\n"


def test_stdin_apply_passes_canonical_content_through(project: Path) -> None:
    """Content that needs no change is echoed unchanged."""
    data = b"#!/bin/sh\necho hi\n"
    result = run_cli_in(
        project, ["check", "--apply", "-", "--stdin-filename", "run.sh"], input_text=data
    )
    assert_SUCCESS(result)
    assert result.stdout_bytes == data


def test_stdin_ineligible_name_passes_through(project: Path) -> None:
    """A file name outside the eligibility table is never rewritten."""
    data = b"#!  /bin/sh\n"
    result = run_cli_in(
        project, ["check", "--apply", "-", "--stdin-filename", "notes.txt"], input_text=data
    )
    assert_SUCCESS(result)
    assert result.stdout_bytes == data


def test_stdin_dry_run(project: Path) -> None:
    """Without --apply a change is reported and the exit code signals it."""
    result = run_cli_in(
        project,
        ["--no-color", "check", "-", "--stdin-filename", "run.sh"],
        input_text=b"#!  /bin/sh\n",
    )
    assert_WOULD_CHANGE(result)
    assert "run.sh: would change" in result.output


def test_stdin_dry_run_canonical(project: Path) -> None:
    """Canonical content on STDIN succeeds silently."""
    result = run_cli_in(
        project,
        ["--no-color", "check", "-", "--stdin-filename", "run.sh"],
        input_text=b"#!/bin/sh\n",
    )
    assert_SUCCESS(result)
    assert result.output == ""


def test_stdin_invalid_utf8(project: Path) -> None:
    """Undecodable content on STDIN yields ENCODING_ERROR."""
    result = run_cli_in(
        project,
        ["--no-color", "check", "--apply", "-", "--stdin-filename", "run.sh"],
        input_text=b"#!/bin/sh\n\xc3\x28",
    )
    assert result.exit_code == ExitCode.ENCODING_ERROR, result.output
    assert "run.sh: encoding error" in result.output


@pytest.mark.parametrize(
    "argv",
    [
        ["check", "-"],
        ["check", "-", "other.sh", "--stdin-filename", "run.sh"],
        ["check", "--stdin-filename", "run.sh", "run.sh"],
    ],
)
def test_stdin_usage_errors(project: Path, argv: list[str]) -> None:
    """Invalid combinations of '-' and --stdin-filename are usage errors."""
    assert_USAGE_ERROR(run_cli_in(project, ["--no-color", *argv], input_text=b""))
