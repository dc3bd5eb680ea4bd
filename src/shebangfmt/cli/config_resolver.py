# topmark:header:start
#
#   project      : shebangfmt
#   file         : config_resolver.py
#   file_relpath : src/shebangfmt/cli/config_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve the effective configuration from Click parameters.

Resolution order (lowest to highest precedence):
  1. Discovered project configs, root-most first (``pyproject.toml``
     ``[tool.shebangfmt]`` then ``shebangfmt.toml`` per directory), unless
     ``--no-config`` is set. Discovery stops at a config with ``root = true``.
  2. An explicit ``--config`` file.
  3. CLI include/exclude patterns.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from shebangfmt.cli.errors import ShebangfmtConfigError
from shebangfmt.config import MutableConfig
from shebangfmt.config.logging import get_logger
from shebangfmt.diagnostics import DiagnosticLevel

if TYPE_CHECKING:
    from collections.abc import Sequence

    from shebangfmt.cli.console import ConsoleLike
    from shebangfmt.config import Config
    from shebangfmt.config.logging import ShebangfmtLogger

logger: ShebangfmtLogger = get_logger(__name__)


def resolve_config_from_click(
    *,
    console: ConsoleLike,
    config_path: Path | None,
    no_config: bool,
    include_patterns: Sequence[str],
    exclude_patterns: Sequence[str],
) -> Config:
    """Build the runtime Config for a command.

    Warnings collected while loading are printed to stderr.

    Args:
        console (ConsoleLike): Console used to report diagnostics.
        config_path (Path | None): Explicit config file from ``--config``.
        no_config (bool): Skip discovery of project config files.
        include_patterns (Sequence[str]): ``--include`` patterns.
        exclude_patterns (Sequence[str]): ``--exclude`` patterns.

    Returns:
        Config: The frozen configuration.

    Raises:
        ShebangfmtConfigError: If loading produced error diagnostics (e.g. the
            explicit config file is missing or malformed).
    """
    if no_config:
        draft = MutableConfig()
        if config_path is not None:
            loaded: MutableConfig | None = MutableConfig.from_toml_file(config_path)
            if loaded is None:
                raise ShebangfmtConfigError(f"Cannot load config file: {config_path}")
            draft = draft.merge_with(loaded)
    else:
        draft = MutableConfig.load_merged(start=Path.cwd(), extra_config=config_path)

    draft.apply_cli_args(include_patterns=include_patterns, exclude_patterns=exclude_patterns)
    config: Config = draft.freeze()
    logger.debug("Effective config: %s", config)

    errors: list[str] = []
    for diagnostic in config.diagnostics:
        if diagnostic.level == DiagnosticLevel.ERROR:
            errors.append(diagnostic.message)
        else:
            console.warn(diagnostic.render())
    if errors:
        raise ShebangfmtConfigError("; ".join(errors))
    return config
