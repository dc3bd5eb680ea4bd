# topmark:header:start
#
#   project      : shebangfmt
#   file         : license.py
#   file_relpath : src/shebangfmt/cli/commands/license.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""shebangfmt `license` command."""

from __future__ import annotations

import click

from shebangfmt.cli.console import get_console
from shebangfmt.cli.errors import ShebangfmtIOError
from shebangfmt.plugin import ShebangPluginHandler


@click.command(name="license", help="Show the license text.")
@click.pass_context
def license_command(ctx: click.Context) -> None:
    """Print the bundled license text."""
    try:
        text: str = ShebangPluginHandler().license_text()
    except OSError as exc:
        raise ShebangfmtIOError(f"Cannot read the bundled license text: {exc}") from exc
    get_console(ctx).print(text, nl=False)
