# topmark:header:start
#
#   project      : shebangfmt
#   file         : __init__.py
#   file_relpath : src/shebangfmt/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""shebangfmt CLI package.

The console script entry point is defined in ``pyproject.toml`` as::

    [project.scripts]
    shebangfmt = "shebangfmt.cli.main:cli"

All subcommands live in [`shebangfmt.cli.commands`][].
"""

from __future__ import annotations

__all__: list[str] = []
