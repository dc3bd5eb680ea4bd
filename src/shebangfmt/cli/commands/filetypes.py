# topmark:header:start
#
#   project      : shebangfmt
#   file         : filetypes.py
#   file_relpath : src/shebangfmt/cli/commands/filetypes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""shebangfmt `filetypes` command.

Lists the file extensions and exact file names that are eligible for
directive normalization, including entries added by configuration.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

import click

from shebangfmt.cli.config_resolver import resolve_config_from_click
from shebangfmt.cli.console import get_console
from shebangfmt.cli.options import OutputFormat, output_format_option

if TYPE_CHECKING:
    from shebangfmt.cli.console import ConsoleLike
    from shebangfmt.config import Config
    from shebangfmt.filetypes import FileMatchingInfo


@click.command(
    name="filetypes",
    help="List eligible file extensions and file names.",
)
@output_format_option
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Extra config file merged after discovered ones.",
)
@click.option("--no-config", is_flag=True, help="Show the built-in table only.")
@click.pass_context
def filetypes_command(
    ctx: click.Context,
    *,
    output_format: str,
    config_path: Path | None,
    no_config: bool,
) -> None:
    """List eligible file extensions and file names."""
    console: ConsoleLike = get_console(ctx)
    config: Config = resolve_config_from_click(
        console=console,
        config_path=config_path,
        no_config=no_config,
        include_patterns=(),
        exclude_patterns=(),
    )
    matching: FileMatchingInfo = config.file_matching()

    fmt = OutputFormat(output_format)
    if fmt == OutputFormat.JSON:
        console.print(
            json.dumps(
                {
                    "file_extensions": list(matching.file_extensions),
                    "file_names": list(matching.file_names),
                }
            )
        )
        return

    if fmt == OutputFormat.MARKDOWN:
        console.print("# Eligible files\n")
        console.print("## Extensions\n")
        for ext in matching.file_extensions:
            console.print(f"- `.{ext}`")
        console.print("\n## File names\n")
        for name in matching.file_names:
            console.print(f"- `{name}`")
        return

    console.print(console.styled("Supported file types:", bold=True, underline=True))
    console.print("  extensions: " + " ".join(f".{ext}" for ext in matching.file_extensions))
    console.print("  file names: " + " ".join(matching.file_names))
