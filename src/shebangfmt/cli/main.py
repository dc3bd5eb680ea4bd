# topmark:header:start
#
#   project      : shebangfmt
#   file         : main.py
#   file_relpath : src/shebangfmt/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for shebangfmt.

Group-level options (verbosity, color) are resolved once and stored in
``ctx.obj`` together with the program-output console; subcommands read them
from there.
"""

from __future__ import annotations

import click

from shebangfmt.cli.commands.check import check_command
from shebangfmt.cli.commands.filetypes import filetypes_command
from shebangfmt.cli.commands.license import license_command
from shebangfmt.cli.commands.version import version_command
from shebangfmt.cli.console import ClickConsole
from shebangfmt.cli.options import (
    CONTEXT_SETTINGS,
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from shebangfmt.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging and color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; ``obj`` and ``color`` are set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (str | None): Explicit ``--color`` value, if any.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is driven by the environment, not by -v/-q
    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_mode: ColorMode = (
        ColorMode.NEVER if no_color else ColorMode(color_mode or ColorMode.AUTO.value)
    )
    enable_color: bool = resolve_color_mode(cli_mode=effective_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)
    logger.debug(
        "verbosity=%d, log level=%s, color=%s",
        ctx.obj["verbosity_level"],
        level_env,
        enable_color,
    )


@click.group(
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    help="Normalize interpreter directive (#!) lines of script files.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the shebangfmt CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )

    if ctx.invoked_subcommand is None:
        console: ClickConsole = ctx.obj["console"]
        console.print("Hint: use 'shebangfmt check [PATHS...]' to check directive lines.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(check_command)
cli.add_command(filetypes_command)
cli.add_command(version_command)
cli.add_command(license_command)

if __name__ == "__main__":
    cli()
