# topmark:header:start
#
#   project      : shebangfmt
#   file         : file_resolver.py
#   file_relpath : src/shebangfmt/file_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve input files based on config, paths, and filters.

This module expands positional arguments, applies include/exclude patterns and
keeps only files eligible for directive normalization. Relative globs are
expanded from the current working directory. The result is a deterministic,
sorted list of files to process.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from shebangfmt.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from shebangfmt.config.logging import ShebangfmtLogger
    from shebangfmt.config.model import Config
    from shebangfmt.filetypes import FileMatchingInfo

logger: ShebangfmtLogger = get_logger(__name__)


def _rel_for_match(path: Path, base: Path) -> str:
    """Return a POSIX-style relative path (or absolute as fallback) for PathSpec matching."""
    try:
        return path.resolve().relative_to(base.resolve()).as_posix()
    except ValueError:
        return path.as_posix()


def expand_path(p: Path) -> list[Path]:
    """Expand a path argument into files and directories.

    Relative globs are expanded from the current working directory, absolute
    ones from their anchor. Directories are expanded recursively.

    Args:
        p (Path): Path or glob pattern.

    Returns:
        list[Path]: Expanded paths (empty if nothing exists).
    """
    if "*" in str(p):
        if p.is_absolute():
            # Path.glob() only accepts relative patterns
            return list(Path(p.anchor).glob(str(p.relative_to(p.anchor))))
        return list(Path(".").glob(str(p)))
    if p.is_dir():
        return list(p.rglob("*"))
    if p.is_file():
        return [p]
    return []


def resolve_file_list(config: Config, paths: Sequence[str] = ()) -> list[Path]:
    """Return the files to process.

    Semantics:
      1. **Candidate set**: expand ``paths`` (files, directories recursively,
         globs). Without positional paths, fall back to ``config.files``.
      2. **File-only**: directories are dropped.
      3. **Include intersection**: with include patterns, keep only files
         matching at least one of them.
      4. **Exclude subtraction**: drop files matching any exclude pattern.
      5. **Eligibility**: keep files matched by ``config.file_matching()``.
      6. Return a sorted list.

    Patterns use gitignore syntax and are matched relative to the current
    working directory.

    Args:
        config (Config): Resolved configuration.
        paths (Sequence[str]): Positional paths from the command line.

    Returns:
        list[Path]: Sorted list of files selected for processing.
    """
    workspace_root: Path = Path.cwd()
    raw_paths: Sequence[str] = paths or config.files
    logger.debug("resolve_file_list(): paths=%s", list(raw_paths))

    candidate_set: set[Path] = set()
    for raw in raw_paths:
        p = Path(raw)
        expanded: list[Path] = expand_path(p)
        candidate_set.update(expanded)
        if "*" in raw:
            if not expanded:
                logger.warning("No matches for glob pattern: %s", raw)
        elif not p.exists():
            logger.warning("No such file or directory: %s", p)

    candidate_set = {p for p in candidate_set if p.is_file()}

    if config.include_patterns:
        include_spec: PathSpec = PathSpec.from_lines(
            GitWildMatchPattern, list(config.include_patterns)
        )
        candidate_set = {
            p for p in candidate_set if include_spec.match_file(_rel_for_match(p, workspace_root))
        }

    if config.exclude_patterns:
        exclude_spec: PathSpec = PathSpec.from_lines(
            GitWildMatchPattern, list(config.exclude_patterns)
        )
        candidate_set = {
            p
            for p in candidate_set
            if not exclude_spec.match_file(_rel_for_match(p, workspace_root))
        }

    matching: FileMatchingInfo = config.file_matching()
    eligible: set[Path] = {p for p in candidate_set if matching.matches(p)}
    logger.trace("Files to process: %d -- %s", len(eligible), sorted(eligible))
    return sorted(eligible)
