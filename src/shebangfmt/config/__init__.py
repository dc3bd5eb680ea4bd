# topmark:header:start
#
#   project      : shebangfmt
#   file         : __init__.py
#   file_relpath : src/shebangfmt/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging for shebangfmt."""

from __future__ import annotations

from shebangfmt.config.model import Config, MutableConfig

__all__ = [
    "Config",
    "MutableConfig",
]
