# topmark:header:start
#
#   project      : shebangfmt
#   file         : __main__.py
#   file_relpath : src/shebangfmt/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running shebangfmt via ``python -m shebangfmt``.

Equivalent to running the ``shebangfmt`` console script::

    python -m shebangfmt check scripts/
"""

from __future__ import annotations

from shebangfmt.cli.main import cli

if __name__ == "__main__":
    cli()
