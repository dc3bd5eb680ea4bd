# topmark:header:start
#
#   project      : shebangfmt
#   file         : directive.py
#   file_relpath : src/shebangfmt/core/directive.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Interpreter directive (shebang) parsing and canonical rendering.

A directive line is the first line of a file when it starts with ``#!``. It is
split into an *interpreter* token and optional *arguments*, and re-emitted as::

    #!<interpreter>[ <arguments>]<terminator and rest of file>

Only the first ``SCAN_LIMIT`` bytes of the input are ever inspected. Whitespace
between ``#!`` and the interpreter is dropped, whitespace separating the
interpreter from the arguments collapses to a single space, and whitespace
inside or trailing the arguments is kept verbatim.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from shebangfmt.config.logging import get_logger
from shebangfmt.core.errors import DecodeError

if TYPE_CHECKING:
    from shebangfmt.config.logging import ShebangfmtLogger

logger: ShebangfmtLogger = get_logger(__name__)

# Number of leading UTF-8 bytes considered when looking for a directive.
SCAN_LIMIT: Final[int] = 1024

DIRECTIVE_MARKER: Final[str] = "#!"

_RE_DIRECTIVE: Final[re.Pattern[str]] = re.compile(
    r"""
    \A\#!
    [ \t]*                              # optional whitespace
    (?P<interpreter>[^ \t\r\n]+)        # interpreter
    (?:
        [ \t]+(?P<args>[^ \t\r\n][^\r\n]*)  # separator, then args (trailing blanks included)
      | [ \t]*                          # or trailing whitespace only
    )
    (?=[\r\n]|\Z)                       # end of line
    """,
    re.VERBOSE,
)


@dataclass(frozen=True)
class ParsedDirective:
    """A directive line split into its parts.

    Attributes:
        interpreter (str): Interpreter path or name; never empty, never contains whitespace.
        arguments (str | None): Argument string starting at its first non-blank character,
            or ``None`` when the directive carries no arguments.
        line_end (int): Offset in the original text where the line terminator (or the end
            of the scanned prefix) begins.
    """

    interpreter: str
    arguments: str | None
    line_end: int

    def canonical_line(self) -> str:
        """Return the canonical directive line, without terminator."""
        if self.arguments is None:
            return f"{DIRECTIVE_MARKER}{self.interpreter}"
        return f"{DIRECTIVE_MARKER}{self.interpreter} {self.arguments}"

    def render(self, text: str) -> str:
        """Render ``text`` with its directive line replaced by the canonical form.

        Args:
            text (str): The text this directive was parsed from.

        Returns:
            str: The canonical directive followed by ``text[line_end:]`` unchanged.
        """
        return self.canonical_line() + text[self.line_end :]


def scan_prefix(text: str) -> str:
    """Return the leading part of ``text`` that fits in ``SCAN_LIMIT`` UTF-8 bytes.

    A character straddling the byte limit is excluded, so offsets into the
    prefix are also valid offsets into ``text``.
    """
    size: int = 0
    for i, ch in enumerate(text):
        code: int = ord(ch)
        size += 1 if code < 0x80 else 2 if code < 0x800 else 3 if code < 0x10000 else 4
        if size > SCAN_LIMIT:
            return text[:i]
    return text


def parse_directive(text: str) -> ParsedDirective | None:
    """Parse the directive line at the very start of ``text``.

    Args:
        text (str): Full file content.

    Returns:
        ParsedDirective | None: The parsed directive, or ``None`` if the text does not
            start with a usable ``#!`` line within the scanned prefix.
    """
    if not text.startswith(DIRECTIVE_MARKER):
        return None

    prefix: str = scan_prefix(text)
    m: re.Match[str] | None = _RE_DIRECTIVE.match(prefix)
    if m is None:
        logger.trace("No interpreter after directive marker")
        return None

    # Without arguments the line must visibly end inside the prefix: blanks
    # running into the limit may still be followed by arguments.
    if m.group("args") is None and m.end() == len(prefix) < len(text):
        logger.trace("Directive line without arguments exceeds %d bytes", SCAN_LIMIT)
        return None

    return ParsedDirective(
        interpreter=m.group("interpreter"),
        arguments=m.group("args"),
        line_end=m.end(),
    )


def format_shebang(text: str) -> str | None:
    """Return ``text`` with its directive line in canonical form.

    The result may be identical to ``text`` when the directive is already
    canonical; use [`normalize`][shebangfmt.core.directive.normalize] to tell
    whether a rewrite is needed.

    Args:
        text (str): Full file content.

    Returns:
        str | None: The canonical text, or ``None`` when there is no directive line.
    """
    directive: ParsedDirective | None = parse_directive(text)
    if directive is None:
        return None
    return directive.render(text)


def normalize(text: str) -> str | None:
    """Return the replacement text, or ``None`` if no rewrite is needed.

    ``None`` covers both "no directive line" and "directive already canonical";
    either way the caller should leave the content untouched.
    """
    directive: ParsedDirective | None = parse_directive(text)
    if directive is None:
        return None
    result: str = directive.render(text)
    if result == text:
        logger.trace("Directive already canonical: %r", directive.canonical_line())
        return None
    logger.debug("Directive rewritten to %r", directive.canonical_line())
    return result


def normalize_bytes(data: bytes) -> bytes | None:
    """Decode ``data`` as UTF-8 and normalize it.

    Args:
        data (bytes): Raw file content.

    Returns:
        bytes | None: UTF-8 encoded replacement content, or ``None`` if no rewrite is needed.

    Raises:
        DecodeError: If ``data`` is not valid UTF-8.
    """
    try:
        text: str = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecodeError.from_unicode_error(exc) from exc

    result: str | None = normalize(text)
    if result is None:
        return None
    return result.encode("utf-8")
