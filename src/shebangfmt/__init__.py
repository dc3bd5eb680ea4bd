# topmark:header:start
#
#   project      : shebangfmt
#   file         : __init__.py
#   file_relpath : src/shebangfmt/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""shebangfmt package.

shebangfmt normalizes the interpreter directive (``#!``) line at the top of
script files: whitespace before the interpreter is removed and the separator
before any arguments collapses to one space. Everything after the first line
terminator is left byte-for-byte unchanged. It ships a CLI and a formatter
plugin handler for host formatting tools.
"""

from __future__ import annotations

from shebangfmt.core import (
    DecodeError,
    ParsedDirective,
    format_shebang,
    normalize,
    normalize_bytes,
    parse_directive,
)

__all__ = [
    "DecodeError",
    "ParsedDirective",
    "format_shebang",
    "normalize",
    "normalize_bytes",
    "parse_directive",
]
