# topmark:header:start
#
#   project      : shebangfmt
#   file         : diagnostics.py
#   file_relpath : src/shebangfmt/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic primitives for configuration problems.

Diagnostics are non-fatal findings (unknown config keys, values of the wrong
type, unreadable config files). They are collected and reported, never raised.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, cast

from yachalk import chalk

from shebangfmt.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    from shebangfmt.config.logging import ShebangfmtLogger

logger: ShebangfmtLogger = get_logger(__name__)


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics, ordered ERROR > WARNING."""

    WARNING = "warning"
    ERROR = "error"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function for this level (human output only)."""
        return cast(
            "Callable[[str], str]",
            {
                DiagnosticLevel.WARNING: chalk.yellow,
                DiagnosticLevel.ERROR: chalk.red_bright,
            }[self],
        )


@dataclass(frozen=True)
class Diagnostic:
    """A diagnostic message with a severity level."""

    level: DiagnosticLevel
    message: str

    def render(self) -> str:
        """Return a colorized one-line rendering."""
        return self.level.color(f"[{self.level.value}] {self.message}")


@dataclass
class DiagnosticLog:
    """Mutable collection of diagnostics."""

    items: list[Diagnostic] = field(default_factory=lambda: [])

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def _add(self, diagnostic: Diagnostic) -> None:
        self.items.append(diagnostic)
        logger.trace("Adding [%s]: %r", diagnostic.level.value, diagnostic.message)

    def add_warning(self, message: str) -> None:
        """Add a ``warning`` diagnostic."""
        self._add(Diagnostic(DiagnosticLevel.WARNING, message))

    def add_error(self, message: str) -> None:
        """Add an ``error`` diagnostic."""
        self._add(Diagnostic(DiagnosticLevel.ERROR, message))

    def extend(self, diagnostics: Iterable[Diagnostic]) -> None:
        """Append diagnostics from another source, preserving order."""
        for d in diagnostics:
            self._add(d)

    def has_error(self) -> bool:
        """Return True if the log contains error diagnostics."""
        return any(d.level == DiagnosticLevel.ERROR for d in self.items)

