# topmark:header:start
#
#   project      : shebangfmt
#   file         : version.py
#   file_relpath : src/shebangfmt/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""shebangfmt `version` command.

Prints the version installed in the active Python environment.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

import click

from shebangfmt.cli.console import get_console
from shebangfmt.cli.options import OutputFormat, output_format_option
from shebangfmt.plugin import ShebangPluginHandler

if TYPE_CHECKING:
    from shebangfmt.cli.console import ConsoleLike
    from shebangfmt.plugin import PluginInfo


@click.command(
    name="version",
    help="Show the current version of shebangfmt.",
)
@output_format_option
@click.pass_context
def version_command(ctx: click.Context, *, output_format: str) -> None:
    """Show the current version of shebangfmt."""
    console: ConsoleLike = get_console(ctx)
    verbosity: int = ctx.obj.get("verbosity_level", logging.WARNING)
    info: PluginInfo = ShebangPluginHandler().plugin_info()

    fmt = OutputFormat(output_format)
    if fmt == OutputFormat.JSON:
        console.print(json.dumps({"name": info.name, "version": info.version}))
    elif fmt == OutputFormat.MARKDOWN:
        console.print(f"# {info.name}\n")
        console.print(f"**{info.name} version: {info.version}**")
    elif verbosity <= logging.INFO:
        console.print(console.styled(f"{info.name} version:", bold=True, underline=True))
        console.print(f"    {console.styled(info.version, bold=True)}")
        console.print(f"    config key: {info.config_key}")
        console.print(f"    help: {info.help_url}")
    else:
        console.print(console.styled(info.version, bold=True))
