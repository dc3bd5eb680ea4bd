# topmark:header:start
#
#   project      : shebangfmt
#   file         : logging.py
#   file_relpath : src/shebangfmt/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Logging setup for shebangfmt with a TRACE level.

Extends the standard logging module with a TRACE level below DEBUG, a logger
class exposing ``trace()``, and a formatter that colors records per severity.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_LEVEL_ENV: Final[str] = "SHEBANGFMT_LOG_LEVEL"


class ShebangfmtLogger(logging.Logger):
    """Logger with support for a TRACE level below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` with severity TRACE.

        Args:
            msg (object): The message to be logged.
            *args (object): Arguments merged into ``msg``.
            extra (Mapping[str, object] | None): Optional extra record attributes.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(
                TRACE_LEVEL,
                msg=msg,
                args=args,
                extra=extra,
                stacklevel=2,
            )


if not hasattr(logging, "TRACE"):
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    logging.TRACE = TRACE_LEVEL  # type: ignore

logging.setLoggerClass(ShebangfmtLogger)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"


class ChalkFormatter(logging.Formatter):
    """Formatter that colors log records based on their level."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the record and colorize it.

        Args:
            record (logging.LogRecord): The record to format.

        Returns:
            str: The colorized message.
        """
        level = record.levelno
        message = super().format(record)

        if level >= logging.CRITICAL:
            return chalk.red_bright(message)
        if level >= logging.ERROR:
            return chalk.red(message)
        if level >= logging.WARNING:
            return chalk.yellow(message)
        if level >= logging.INFO:
            return chalk.green(message)
        if level >= logging.DEBUG:
            return chalk.gray(message)
        if level >= TRACE_LEVEL:
            return chalk.blue(message)
        return chalk.dim.red(message)


_LEVEL_NAMES: Final[Mapping[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


def resolve_env_log_level() -> int | None:
    """Return a logging level from the environment, or None if unset.

    Honors SHEBANGFMT_LOG_LEVEL (e.g. ``"TRACE"``, ``"debug"``, numeric ``"10"``).
    Unknown values are ignored.
    """
    val: str | None = os.environ.get(LOG_LEVEL_ENV)
    if not val:
        return None
    v: str = val.strip().upper()
    if v.isdigit():
        return int(v)
    return _LEVEL_NAMES.get(v)


def setup_logging(level: int | None = None) -> None:
    """Configure the root logger with colored output on stderr.

    If ``level`` is None, the environment is consulted via
    [`resolve_env_log_level`][shebangfmt.config.logging.resolve_env_log_level].
    Default is CRITICAL.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Drop existing handlers so repeated setup does not duplicate output
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Program output (rewritten content on --apply with stdin) goes to stdout
    handler = logging.StreamHandler(sys.stderr)
    formatter = ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    root_logger.propagate = False


def get_logger(name: str) -> ShebangfmtLogger:
    """Retrieve a ShebangfmtLogger with the given name.

    Args:
        name (str): The name of the logger.

    Returns:
        ShebangfmtLogger: The logger instance.
    """
    logger = logging.getLogger(name)
    return cast("ShebangfmtLogger", logger)
