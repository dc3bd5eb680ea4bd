# topmark:header:start
#
#   project      : shebangfmt
#   file         : options.py
#   file_relpath : src/shebangfmt/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reusable CLI options (verbosity, color, output format) and their resolution."""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from shebangfmt.cli.errors import ShebangfmtUsageError
from shebangfmt.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")

CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


class OutputFormat(str, Enum):
    """Output formats for informational commands."""

    TEXT = "text"
    JSON = "json"
    MARKDOWN = "markdown"


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output level from ``-v``/``-q`` counts.

    Args:
        verbose_count (int): Number of ``-v`` flags.
        quiet_count (int): Number of ``-q`` flags.

    Returns:
        int: A logging-style level: TRACE (-vvv), DEBUG (-vv), INFO (-v),
            ERROR (-q), or WARNING by default.

    Raises:
        ShebangfmtUsageError: If both flags are given.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise ShebangfmtUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if verbose_count >= 3:
        return TRACE_LEVEL
    if verbose_count == 2:
        return logging.DEBUG
    if verbose_count == 1:
        return logging.INFO
    if quiet_count >= 1:
        return logging.ERROR
    return logging.WARNING


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Honors explicit ``--color``/``--no-color`` first, then ``FORCE_COLOR`` and
    ``NO_COLOR``, and finally whether stdout is a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        stdout_isatty = sys.stdout.isatty()
    return bool(stdout_isatty)


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` counting options."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Repeat for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress per-file output.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color`` options."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def output_format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add a ``--format`` option choosing text, json or markdown output."""
    return click.option(
        "--format",
        "output_format",
        type=click.Choice([m.value for m in OutputFormat]),
        default=OutputFormat.TEXT.value,
        show_default=True,
        help="Output format.",
    )(f)
