# topmark:header:start
#
#   project      : shebangfmt
#   file         : errors.py
#   file_relpath : src/shebangfmt/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the shebangfmt CLI.

Each exception carries the exit code the process ends with. When a project
console is stored on the Click context, errors are printed through it.
"""

from __future__ import annotations

from typing import IO, Any

import click

from shebangfmt.cli.exit_codes import ExitCode


class ShebangfmtCliError(click.ClickException):
    """Base class for all CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colors are applied in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class ShebangfmtUsageError(ShebangfmtCliError):
    """Invalid flags or arguments."""

    exit_code = ExitCode.USAGE_ERROR


class ShebangfmtConfigError(ShebangfmtCliError):
    """Missing, unreadable or invalid configuration."""

    exit_code = ExitCode.CONFIG_ERROR


class ShebangfmtIOError(ShebangfmtCliError):
    """Reading or writing a file failed."""

    exit_code = ExitCode.IO_ERROR
