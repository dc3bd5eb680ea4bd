# topmark:header:start
#
#   project      : shebangfmt
#   file         : constants.py
#   file_relpath : src/shebangfmt/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""shebangfmt constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

PACKAGE_NAME: str = "shebangfmt"

SHEBANGFMT_VERSION: str = get_version(PACKAGE_NAME)

# Key under which hosts store this plugin's settings
PLUGIN_CONFIG_KEY: str = "shebang"

HELP_URL: str = "https://github.com/shutterfreak/shebangfmt"
UPDATE_URL: str = "https://github.com/shutterfreak/shebangfmt/releases/latest"

# Packaged resources
LICENSE_RESOURCE_PACKAGE: str = "shebangfmt"
LICENSE_RESOURCE_NAME: str = "LICENSE.txt"

# Config files, in same-directory precedence order (later wins)
PYPROJECT_TOML_NAME: str = "pyproject.toml"
CONFIG_TOML_NAME: str = "shebangfmt.toml"
