# topmark:header:start
#
#   project      : shebangfmt
#   file         : errors.py
#   file_relpath : src/shebangfmt/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the shebangfmt core.

A missing, malformed or already canonical directive is a normal outcome and is
reported as "no change" (``None``). The only hard failure is input that cannot
be decoded as text.
"""

from __future__ import annotations


class ShebangfmtError(Exception):
    """Base class for all shebangfmt errors."""


class DecodeError(ShebangfmtError, ValueError):
    """Input bytes are not valid UTF-8.

    Attributes:
        position (int): Byte offset of the first undecodable byte.
        reason (str): Decoder explanation (e.g. ``"invalid start byte"``).
    """

    def __init__(self, message: str, *, position: int = 0, reason: str = "") -> None:
        super().__init__(message)
        self.position = position
        self.reason = reason

    @classmethod
    def from_unicode_error(cls, exc: UnicodeDecodeError) -> DecodeError:
        """Build a DecodeError from the underlying codec error."""
        return cls(
            f"Input is not valid UTF-8 at byte {exc.start}: {exc.reason}",
            position=exc.start,
            reason=exc.reason,
        )
