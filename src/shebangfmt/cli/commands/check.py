# topmark:header:start
#
#   project      : shebangfmt
#   file         : check.py
#   file_relpath : src/shebangfmt/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Default shebangfmt operation (check/apply).

Checks whether the directive line of each eligible file is canonical.
Performs a dry run by default and rewrites files when ``--apply`` is given.

Input modes:
  * **Paths mode (default)**: one or more PATHS (files, directories, globs).
  * **Content on STDIN**: a single ``-`` as the sole PATH plus
    ``--stdin-filename NAME``. With ``--apply`` the resulting content is
    written to STDOUT.

Examples:
  Check a tree:

    $ shebangfmt check scripts/

  Rewrite files and show what changed:

    $ shebangfmt check --apply --diff .

  Normalize content from STDIN:

    $ cat run.sh | shebangfmt check --apply - --stdin-filename run.sh
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

import click

from shebangfmt.cli.config_resolver import resolve_config_from_click
from shebangfmt.cli.console import get_console
from shebangfmt.cli.errors import ShebangfmtUsageError
from shebangfmt.cli.exit_codes import ExitCode
from shebangfmt.cli.options import CONTEXT_SETTINGS
from shebangfmt.config.logging import get_logger
from shebangfmt.core.errors import DecodeError
from shebangfmt.file_resolver import resolve_file_list
from shebangfmt.plugin import FormatRequest, ShebangPluginHandler
from shebangfmt.utils.diff import render_patch, unified_diff

if TYPE_CHECKING:
    from collections.abc import Sequence

    from shebangfmt.cli.console import ConsoleLike
    from shebangfmt.config import Config
    from shebangfmt.config.logging import ShebangfmtLogger

logger: ShebangfmtLogger = get_logger(__name__)


class FileOutcome(str, Enum):
    """Per-file result of a check run."""

    UNCHANGED = "unchanged"
    WOULD_CHANGE = "would change"
    CHANGED = "changed"
    ENCODING_ERROR = "encoding error"
    IO_ERROR = "I/O error"


@dataclass
class FileResult:
    """Outcome for one file, with the content needed for diffs and STDIN output."""

    path: Path
    outcome: FileOutcome
    original: bytes = b""
    updated: bytes | None = None
    message: str = ""


def _process(
    handler: ShebangPluginHandler,
    config: Config,
    path: Path,
    data: bytes,
) -> FileResult:
    try:
        updated: bytes | None = handler.format(
            FormatRequest(file_path=path, file_bytes=data, config=config)
        )
    except DecodeError as exc:
        logger.debug("%s: %s", path, exc)
        return FileResult(path, FileOutcome.ENCODING_ERROR, original=data, message=str(exc))
    if updated is None:
        return FileResult(path, FileOutcome.UNCHANGED, original=data)
    return FileResult(path, FileOutcome.WOULD_CHANGE, original=data, updated=updated)


def _check_file(
    handler: ShebangPluginHandler,
    config: Config,
    path: Path,
    apply: bool,
) -> FileResult:
    try:
        data: bytes = path.read_bytes()
    except OSError as exc:
        logger.error("Cannot read %s: %s", path, exc)
        return FileResult(path, FileOutcome.IO_ERROR, message=f"cannot read: {exc.strerror}")

    result: FileResult = _process(handler, config, path, data)
    if apply and result.updated is not None:
        try:
            path.write_bytes(result.updated)
        except OSError as exc:
            logger.error("Cannot write %s: %s", path, exc)
            result.outcome = FileOutcome.IO_ERROR
            result.message = f"cannot write: {exc.strerror}"
            return result
        result.outcome = FileOutcome.CHANGED
    return result


def _report(console: ConsoleLike, result: FileResult, *, verbosity: int) -> None:
    if result.outcome in (FileOutcome.ENCODING_ERROR, FileOutcome.IO_ERROR):
        console.error(f"{result.path}: {result.outcome.value}: {result.message}")
        return
    if result.outcome == FileOutcome.UNCHANGED:
        if verbosity <= logging.INFO:
            console.print(f"{result.path}: {console.styled('ok', fg='green')}")
        return
    if verbosity <= logging.WARNING:
        color: str = "yellow" if result.outcome == FileOutcome.WOULD_CHANGE else "blue"
        console.print(f"{result.path}: {console.styled(result.outcome.value, fg=color)}")


def _emit_diff(console: ConsoleLike, result: FileResult) -> None:
    if result.updated is None:
        return
    diff_text: str = unified_diff(
        result.original.decode("utf-8"), result.updated.decode("utf-8"), str(result.path)
    )
    if diff_text:
        console.print(render_patch(diff_text), nl=False)


def _exit_code(results: Sequence[FileResult], *, apply: bool) -> ExitCode:
    outcomes: set[FileOutcome] = {r.outcome for r in results}
    if FileOutcome.ENCODING_ERROR in outcomes:
        return ExitCode.ENCODING_ERROR
    if FileOutcome.IO_ERROR in outcomes:
        return ExitCode.IO_ERROR
    if not apply and FileOutcome.WOULD_CHANGE in outcomes:
        return ExitCode.WOULD_CHANGE
    return ExitCode.SUCCESS


@click.command(
    name="check",
    context_settings=CONTEXT_SETTINGS,
    help="Check interpreter directive lines (dry run); use --apply to rewrite them.",
)
@click.argument("paths", nargs=-1, type=str)
@click.option("--apply", "apply_changes", is_flag=True, help="Write changes to files.")
@click.option("--diff", "show_diff", is_flag=True, help="Show unified diffs of changes.")
@click.option(
    "--include",
    "-i",
    "include_patterns",
    multiple=True,
    help="Filter: keep only files matching these patterns (gitignore syntax).",
)
@click.option(
    "--exclude",
    "-e",
    "exclude_patterns",
    multiple=True,
    help="Filter: remove files matching these patterns (gitignore syntax).",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Extra config file merged after discovered ones.",
)
@click.option("--no-config", is_flag=True, help="Do not discover project config files.")
@click.option(
    "--stdin-filename",
    type=str,
    default=None,
    help="Assumed filename when reading content from STDIN via '-'.",
)
@click.pass_context
def check_command(
    ctx: click.Context,
    *,
    paths: tuple[str, ...],
    apply_changes: bool,
    show_diff: bool,
    include_patterns: tuple[str, ...],
    exclude_patterns: tuple[str, ...],
    config_path: Path | None,
    no_config: bool,
    stdin_filename: str | None,
) -> None:
    """Check (and optionally rewrite) directive lines."""
    console: ConsoleLike = get_console(ctx)
    verbosity: int = ctx.obj.get("verbosity_level", logging.WARNING)

    stdin_mode: bool = "-" in paths
    if stdin_mode:
        if len(paths) > 1:
            raise ShebangfmtUsageError("'-' (content on STDIN) must be the only PATH.")
        if not stdin_filename:
            raise ShebangfmtUsageError("'--stdin-filename' is required when PATH is '-'.")
    elif stdin_filename:
        raise ShebangfmtUsageError("'--stdin-filename' requires '-' as the PATH.")

    config: Config = resolve_config_from_click(
        console=console,
        config_path=config_path,
        no_config=no_config,
        include_patterns=include_patterns,
        exclude_patterns=exclude_patterns,
    )
    handler = ShebangPluginHandler()

    if stdin_mode and stdin_filename:
        _run_stdin(ctx, console, handler, config, Path(stdin_filename), apply_changes, show_diff)
        return

    files: list[Path] = resolve_file_list(config, paths)
    if not files:
        if verbosity <= logging.WARNING:
            console.print("No eligible files to process.")
        ctx.exit(ExitCode.SUCCESS)

    logger.info("Processing %d file(s)", len(files))
    results: list[FileResult] = []
    for path in files:
        result: FileResult = _check_file(handler, config, path, apply_changes)
        results.append(result)
        _report(console, result, verbosity=verbosity)
        if show_diff:
            _emit_diff(console, result)

    n_changes: int = sum(
        1 for r in results if r.outcome in (FileOutcome.WOULD_CHANGE, FileOutcome.CHANGED)
    )
    if verbosity <= logging.WARNING:
        verb: str = "changed" if apply_changes else "would change"
        console.print(
            console.styled(f"{len(results)} file(s) checked, {n_changes} {verb}.", bold=True)
        )
    ctx.exit(_exit_code(results, apply=apply_changes))


def _run_stdin(
    ctx: click.Context,
    console: ConsoleLike,
    handler: ShebangPluginHandler,
    config: Config,
    name: Path,
    apply_changes: bool,
    show_diff: bool,
) -> None:
    data: bytes = sys.stdin.buffer.read()

    if not config.file_matching().matches(name):
        logger.info("%s: not an eligible file type, passing through", name)
        result = FileResult(name, FileOutcome.UNCHANGED, original=data)
    else:
        result = _process(handler, config, name, data)

    if result.outcome == FileOutcome.ENCODING_ERROR:
        console.error(f"{name}: {result.outcome.value}: {result.message}")
        ctx.exit(ExitCode.ENCODING_ERROR)

    if apply_changes:
        # The whole content goes to stdout, rewritten or not
        click.echo(result.updated if result.updated is not None else data, nl=False)
        ctx.exit(ExitCode.SUCCESS)

    if show_diff:
        _emit_diff(console, result)
    if result.updated is None:
        ctx.exit(ExitCode.SUCCESS)
    console.print(f"{name}: {console.styled(FileOutcome.WOULD_CHANGE.value, fg='yellow')}")
    ctx.exit(ExitCode.WOULD_CHANGE)
