# topmark:header:start
#
#   project      : shebangfmt
#   file         : exit_codes.py
#   file_relpath : src/shebangfmt/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the shebangfmt CLI.

Aligned with the BSD `sysexits` convention where practical. ``WOULD_CHANGE=2``
signals a dry run that found files to rewrite. Click also exits with 2 on its
own parsing errors, so tests assert ``result.exception is None`` to tell the
two apart; usage errors detected by shebangfmt itself use ``USAGE_ERROR``.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the shebangfmt CLI.

    Attributes:
        SUCCESS: Nothing to change, or changes were applied.
        FAILURE: Generic failure.
        WOULD_CHANGE: Dry run: at least one file would be rewritten.
        USAGE_ERROR: Invalid flags or arguments (``EX_USAGE``).
        ENCODING_ERROR: A file is not valid UTF-8 (``EX_DATAERR``).
        IO_ERROR: Reading or writing a file failed (``EX_IOERR``).
        CONFIG_ERROR: Missing or invalid configuration (``EX_CONFIG``).
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2

    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
