# topmark:header:start
#
#   project      : shebangfmt
#   file         : loaders.py
#   file_relpath : src/shebangfmt/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

Reads ``shebangfmt.toml`` and the ``[tool.shebangfmt]`` table of
``pyproject.toml``. Parsing is done with `tomlkit` and returned as plain
``dict`` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from shebangfmt.config.logging import get_logger
from shebangfmt.constants import CONFIG_TOML_NAME, PACKAGE_NAME, PYPROJECT_TOML_NAME

if TYPE_CHECKING:
    from pathlib import Path

    from shebangfmt.config.logging import ShebangfmtLogger

TomlTable = dict[str, Any]

logger: ShebangfmtLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable | None:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable | None: The parsed content, or ``None`` if the file could not be
            read or parsed (the error is logged).
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return None
    except UnicodeDecodeError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return None
    except TomlkitParseError as e:
        logger.error("Error parsing TOML from %s: %s", path, e)
        return None


def extract_tool_section(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the shebangfmt table from parsed TOML data.

    ``pyproject.toml`` holds it under ``[tool.shebangfmt]``; ``shebangfmt.toml``
    uses the whole document.

    Args:
        path (Path): The file the data was read from.
        data (TomlTable): Parsed TOML content.

    Returns:
        TomlTable | None: The settings table, or ``None`` if a ``pyproject.toml``
            has no ``[tool.shebangfmt]`` table.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data
    tool: Any = data.get("tool", {})
    section: Any = tool.get(PACKAGE_NAME) if isinstance(tool, dict) else None
    if not isinstance(section, dict):
        logger.debug("No [tool.%s] table in %s", PACKAGE_NAME, path)
        return None
    return cast("TomlTable", section)


def config_candidates(directory: Path) -> list[Path]:
    """Return the config files present in ``directory``, lowest precedence first."""
    return [
        p
        for p in (directory / PYPROJECT_TOML_NAME, directory / CONFIG_TOML_NAME)
        if p.is_file()
    ]
