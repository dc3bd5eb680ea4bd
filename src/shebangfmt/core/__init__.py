# topmark:header:start
#
#   project      : shebangfmt
#   file         : __init__.py
#   file_relpath : src/shebangfmt/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core directive normalizer: pure functions, no I/O."""

from __future__ import annotations

from shebangfmt.core.directive import (
    SCAN_LIMIT,
    ParsedDirective,
    format_shebang,
    normalize,
    normalize_bytes,
    parse_directive,
)
from shebangfmt.core.errors import DecodeError, ShebangfmtError

__all__ = [
    "SCAN_LIMIT",
    "DecodeError",
    "ParsedDirective",
    "ShebangfmtError",
    "format_shebang",
    "normalize",
    "normalize_bytes",
    "parse_directive",
]
