# topmark:header:start
#
#   project      : shebangfmt
#   file         : plugin.py
#   file_relpath : src/shebangfmt/plugin.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Formatter plugin handshake.

`ShebangPluginHandler` is the surface a host formatting runtime talks to: it
resolves the plugin configuration (including which files the plugin wants to
see), reports plugin metadata and license text, and formats file contents.

Formatting contract:
    * The result is either ``None`` ("no change") or the complete replacement
      content, never a partial diff.
    * A directive can only start at absolute offset 0, so a range request that
      does not start at 0 is a no-op and never reaches the parser.
    * Invalid UTF-8 input raises `DecodeError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from importlib.resources import files
from typing import TYPE_CHECKING, Any

from shebangfmt.config.logging import get_logger
from shebangfmt.config.model import Config, MutableConfig
from shebangfmt.constants import (
    HELP_URL,
    LICENSE_RESOURCE_NAME,
    LICENSE_RESOURCE_PACKAGE,
    PACKAGE_NAME,
    PLUGIN_CONFIG_KEY,
    SHEBANGFMT_VERSION,
    UPDATE_URL,
)
from shebangfmt.core.directive import normalize_bytes
from shebangfmt.diagnostics import DiagnosticLog

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from shebangfmt.config.logging import ShebangfmtLogger
    from shebangfmt.diagnostics import Diagnostic
    from shebangfmt.filetypes import FileMatchingInfo

logger: ShebangfmtLogger = get_logger(__name__)

# Host config key -> TOML key understood by MutableConfig
_HOST_CONFIG_KEYS: dict[str, str] = {
    "extensions": "extensions",
    "fileNames": "file-names",
}


@dataclass(frozen=True)
class PluginInfo:
    """Plugin metadata reported to the host."""

    name: str
    version: str
    config_key: str
    help_url: str
    config_schema_url: str
    update_url: str | None


@dataclass(frozen=True)
class FormatRange:
    """Half-open byte range ``[start, end)`` within a file."""

    start: int
    end: int


@dataclass(frozen=True)
class FormatRequest:
    """A request to format one file's content.

    Attributes:
        file_path (Path): Path of the file (informational; content is in ``file_bytes``).
        file_bytes (bytes): Full file content.
        config (Config): Resolved plugin configuration.
        range (FormatRange | None): Optional byte range to restrict formatting to.
    """

    file_path: Path
    file_bytes: bytes
    config: Config
    range: FormatRange | None = None


@dataclass(frozen=True)
class ResolveConfigResult:
    """Result of resolving the plugin configuration."""

    config: Config
    diagnostics: tuple[Diagnostic, ...]
    file_matching: FileMatchingInfo


@dataclass(frozen=True)
class ConfigChange:
    """A change the plugin asks the host to make to its stored configuration."""

    path: tuple[str, ...]
    value: Any


class ShebangPluginHandler:
    """Formatter plugin for interpreter directive lines."""

    def resolve_config(
        self,
        config_map: Mapping[str, Any],
        global_config: Mapping[str, Any] | None = None,
    ) -> ResolveConfigResult:
        """Resolve host-provided settings into a plugin configuration.

        Args:
            config_map (Mapping[str, Any]): The plugin's settings as stored by the host.
            global_config (Mapping[str, Any] | None): Host-wide settings (line width,
                newline kind, ...); none of them apply to directive lines.

        Returns:
            ResolveConfigResult: The configuration, any diagnostics (unknown keys,
                bad values), and the file matching table.
        """
        if global_config:
            logger.trace("Ignoring global config keys: %s", sorted(global_config))

        table: dict[str, Any] = {}
        unknown = DiagnosticLog()
        for key, value in config_map.items():
            toml_key: str | None = _HOST_CONFIG_KEYS.get(key)
            if toml_key is None:
                unknown.add_warning(f"Unknown property in configuration: {key}")
                continue
            table[toml_key] = value

        draft: MutableConfig = MutableConfig.from_toml_dict(table, source=PLUGIN_CONFIG_KEY)
        draft.diagnostics.extend(unknown)
        config: Config = draft.freeze()
        return ResolveConfigResult(
            config=config,
            diagnostics=config.diagnostics,
            file_matching=config.file_matching(),
        )

    def plugin_info(self) -> PluginInfo:
        """Return the plugin metadata."""
        return PluginInfo(
            name=PACKAGE_NAME,
            version=SHEBANGFMT_VERSION,
            config_key=PLUGIN_CONFIG_KEY,
            help_url=HELP_URL,
            config_schema_url="",
            update_url=UPDATE_URL,
        )

    def license_text(self) -> str:
        """Return the license text bundled with the package."""
        resource = files(LICENSE_RESOURCE_PACKAGE).joinpath(LICENSE_RESOURCE_NAME)
        return resource.read_text(encoding="utf-8")

    def check_config_updates(self, message: Mapping[str, Any]) -> list[ConfigChange]:
        """Return configuration migrations; this plugin has none."""
        logger.trace("check_config_updates(%r): nothing to migrate", message)
        return []

    def format(self, request: FormatRequest) -> bytes | None:
        """Format one file.

        Args:
            request (FormatRequest): The file and its resolved configuration.

        Returns:
            bytes | None: The complete replacement content, or ``None`` if the file
                should be left as-is.

        Raises:
            DecodeError: If the (ranged) content is not valid UTF-8.
        """
        data: bytes = request.file_bytes
        if request.range is not None:
            if request.range.start != 0:
                logger.debug(
                    "%s: skipping range %d..%d (directive only at offset 0)",
                    request.file_path,
                    request.range.start,
                    request.range.end,
                )
                return None
            data = data[request.range.start : request.range.end]

        result: bytes | None = normalize_bytes(data)
        if result is None:
            logger.trace("%s: no change", request.file_path)
        else:
            logger.debug("%s: directive normalized", request.file_path)
        return result
