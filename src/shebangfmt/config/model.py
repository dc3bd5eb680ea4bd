# topmark:header:start
#
#   project      : shebangfmt
#   file         : model.py
#   file_relpath : src/shebangfmt/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model for shebangfmt.

`MutableConfig` collects settings from defaults, discovered config files, an
explicit ``--config`` file and CLI overrides (nearest-last-wins), then freezes
into an immutable `Config` used at runtime.

Recognized keys (in ``shebangfmt.toml`` or ``[tool.shebangfmt]``)::

    root = true                  # stop upward discovery here
    extensions = ["cgi", "tcl"]  # extra eligible extensions
    file-names = ["Rakefile"]    # extra eligible file names
    include = ["scripts/**"]     # gitignore-style include patterns
    exclude = ["vendor/"]        # gitignore-style exclude patterns
    files = ["bin", "scripts"]   # default paths when none are given
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from shebangfmt.config.loaders import config_candidates, extract_tool_section, load_toml_dict
from shebangfmt.config.logging import get_logger
from shebangfmt.diagnostics import Diagnostic, DiagnosticLog
from shebangfmt.filetypes import DEFAULT_FILE_MATCHING, FileMatchingInfo

if TYPE_CHECKING:
    from collections.abc import Iterable

    from shebangfmt.config.loaders import TomlTable
    from shebangfmt.config.logging import ShebangfmtLogger

logger: ShebangfmtLogger = get_logger(__name__)

# TOML key -> MutableConfig list attribute
_LIST_KEYS: dict[str, str] = {
    "extensions": "extensions",
    "file-names": "file_names",
    "include": "include_patterns",
    "exclude": "exclude_patterns",
    "files": "files",
}

_ROOT_KEY = "root"


@dataclass(frozen=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        extensions (tuple[str, ...]): Extra eligible file extensions.
        file_names (tuple[str, ...]): Extra eligible exact file names.
        include_patterns (tuple[str, ...]): Include patterns (intersection filter).
        exclude_patterns (tuple[str, ...]): Exclude patterns (subtraction filter).
        files (tuple[str, ...]): Default paths used when no paths are given.
        config_files (tuple[Path, ...]): Config sources that contributed, in merge order.
        diagnostics (tuple[Diagnostic, ...]): Problems found while loading config.
    """

    extensions: tuple[str, ...] = ()
    file_names: tuple[str, ...] = ()
    include_patterns: tuple[str, ...] = ()
    exclude_patterns: tuple[str, ...] = ()
    files: tuple[str, ...] = ()
    config_files: tuple[Path, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()

    def file_matching(self) -> FileMatchingInfo:
        """Return the built-in eligibility table extended with configured entries."""
        return DEFAULT_FILE_MATCHING.extended(self.extensions, self.file_names)


@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging."""

    extensions: list[str] = field(default_factory=lambda: [])
    file_names: list[str] = field(default_factory=lambda: [])
    include_patterns: list[str] = field(default_factory=lambda: [])
    exclude_patterns: list[str] = field(default_factory=lambda: [])
    files: list[str] = field(default_factory=lambda: [])
    config_files: list[Path] = field(default_factory=lambda: [])
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    # Set when a loaded source declares `root = true`
    is_root: bool = False

    def freeze(self) -> Config:
        """Freeze this builder into an immutable Config."""
        return Config(
            extensions=tuple(self.extensions),
            file_names=tuple(self.file_names),
            include_patterns=tuple(self.include_patterns),
            exclude_patterns=tuple(self.exclude_patterns),
            files=tuple(self.files),
            config_files=tuple(self.config_files),
            diagnostics=tuple(self.diagnostics),
        )

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, source: str = "<config>") -> MutableConfig:
        """Build a config from a settings table.

        Unknown keys and values of the wrong type are recorded as warnings and
        otherwise ignored.

        Args:
            data (TomlTable): The settings table.
            source (str): Name of the source, used in diagnostics.

        Returns:
            MutableConfig: The parsed draft.
        """
        draft = cls()
        for key, value in data.items():
            if key == _ROOT_KEY:
                if isinstance(value, bool):
                    draft.is_root = value
                else:
                    draft.diagnostics.add_warning(f"{source}: '{key}' must be a boolean")
                continue
            attr: str | None = _LIST_KEYS.get(key)
            if attr is None:
                draft.diagnostics.add_warning(f"{source}: unknown key '{key}'")
                continue
            items: list[str] | None = _as_str_list(value)
            if items is None:
                draft.diagnostics.add_warning(f"{source}: '{key}' must be a list of strings")
                continue
            setattr(draft, attr, items)
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Args:
            path (Path): A ``shebangfmt.toml`` or ``pyproject.toml`` file.

        Returns:
            MutableConfig | None: The draft, or ``None`` when the file is unreadable,
                malformed, or a ``pyproject.toml`` without a ``[tool.shebangfmt]`` table.
        """
        logger.debug("Loading config from %s", path)
        data: TomlTable | None = load_toml_dict(path)
        if data is None:
            return None
        section: TomlTable | None = extract_tool_section(path, data)
        if section is None:
            return None
        draft: MutableConfig = cls.from_toml_dict(section, source=str(path))
        draft.config_files = [path]
        return draft

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return config files found walking upward from ``start``.

        Files are returned root-most first so that a later merge gives the
        nearest directory precedence. Within one directory ``pyproject.toml``
        comes before ``shebangfmt.toml``. Traversal stops after a directory whose
        config declares ``root = true``.

        Args:
            start (Path): Directory to start from.

        Returns:
            list[Path]: Config files in merge order.
        """
        return [path for path, _ in cls._discover_local_drafts(start)]

    @classmethod
    def _discover_local_drafts(cls, start: Path) -> list[tuple[Path, MutableConfig | None]]:
        """Return ``(path, draft)`` pairs in merge order; each file is parsed once."""
        per_dir: list[list[tuple[Path, MutableConfig | None]]] = []
        current: Path = start.resolve()
        for directory in (current, *current.parents):
            found: list[Path] = config_candidates(directory)
            if not found:
                continue
            loaded = [(p, cls.from_toml_file(p)) for p in found]
            per_dir.append(loaded)
            if any(d is not None and d.is_root for _, d in loaded):
                logger.debug("Config root reached at %s", directory)
                break
        ordered: list[tuple[Path, MutableConfig | None]] = []
        for loaded in reversed(per_dir):
            ordered.extend(loaded)
        return ordered

    @classmethod
    def load_merged(
        cls,
        *,
        start: Path | None = None,
        extra_config: Path | None = None,
    ) -> MutableConfig:
        """Discover, load and merge all config sources.

        Args:
            start (Path | None): Directory to start discovery from (default: CWD).
            extra_config (Path | None): Explicit config file merged last.

        Returns:
            MutableConfig: The merged draft.
        """
        merged = cls()
        drafts: list[MutableConfig | None] = [
            draft for _, draft in cls._discover_local_drafts(start or Path.cwd())
        ]
        if extra_config is not None:
            if not extra_config.is_file():
                merged.diagnostics.add_error(f"Config file not found: {extra_config}")
            else:
                extra: MutableConfig | None = cls.from_toml_file(extra_config)
                if extra is None:
                    merged.diagnostics.add_error(f"Cannot load config file: {extra_config}")
                drafts.append(extra)
        for draft in drafts:
            if draft is not None:
                merged = merged.merge_with(draft)
        logger.debug("Merged config from %d source(s)", len(merged.config_files))
        return merged

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where non-empty settings in ``other`` win.

        Eligibility lists accumulate; pattern and path lists are replaced.
        """
        result: MutableConfig = MutableConfig(
            extensions=_union(self.extensions, other.extensions),
            file_names=_union(self.file_names, other.file_names),
            include_patterns=list(other.include_patterns or self.include_patterns),
            exclude_patterns=list(other.exclude_patterns or self.exclude_patterns),
            files=list(other.files or self.files),
            config_files=[*self.config_files, *other.config_files],
            is_root=self.is_root or other.is_root,
        )
        result.diagnostics.extend(self.diagnostics)
        result.diagnostics.extend(other.diagnostics)
        return result

    def apply_cli_args(
        self,
        *,
        include_patterns: Iterable[str] = (),
        exclude_patterns: Iterable[str] = (),
    ) -> MutableConfig:
        """Apply CLI overrides in place and return self.

        CLI include/exclude patterns extend the configured ones.
        """
        self.include_patterns = _union(self.include_patterns, include_patterns)
        self.exclude_patterns = _union(self.exclude_patterns, exclude_patterns)
        return self


def _as_str_list(value: Any) -> list[str] | None:
    """Return ``value`` as a list of strings, or None if it is not one."""
    if not isinstance(value, list):
        return None
    items: list[str] = []
    for item in value:  # pyright: ignore[reportUnknownVariableType]
        if not isinstance(item, str):
            return None
        items.append(item)
    return items


def _union(first: Iterable[str], second: Iterable[str]) -> list[str]:
    out: list[str] = []
    for item in (*first, *second):
        if item not in out:
            out.append(item)
    return out
