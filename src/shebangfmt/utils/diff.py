# topmark:header:start
#
#   project      : shebangfmt
#   file         : diff.py
#   file_relpath : src/shebangfmt/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unified diff generation and colorized preview."""

from __future__ import annotations

import difflib
from typing import TYPE_CHECKING

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Sequence


def unified_diff(original: str, updated: str, path: str) -> str:
    """Return a unified diff between two versions of a file.

    Line endings are kept so that changes in whitespace before a terminator
    remain visible.

    Args:
        original (str): Content before normalization.
        updated (str): Content after normalization.
        path (str): File name used in the diff header.

    Returns:
        str: The diff text (empty if the contents are equal).
    """
    return "".join(
        difflib.unified_diff(
            original.splitlines(keepends=True),
            updated.splitlines(keepends=True),
            fromfile=f"{path} (current)",
            tofile=f"{path} (updated)",
            n=2,
        )
    )


def render_patch(patch: Sequence[str] | str, show_line_numbers: bool = False) -> str:
    """Render a colorized preview of a unified diff.

    Args:
        patch (Sequence[str] | str): The diff as a list of lines or a single string.
        show_line_numbers (bool): Whether to prefix each line with a line number.

    Returns:
        str: The colorized preview, one line per diff line.
    """
    if isinstance(patch, str):
        lines: list[str] = patch.splitlines(keepends=True)
    else:
        lines = list(patch)

    def process_line(line: str) -> str:
        # Show tabs and line terminators explicitly
        content: str = line.replace("\t", "\\t").replace("\r", "\\r").replace("\n", "\\n")
        match line[:1]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return chalk.bold.white(content)

    if show_line_numbers:
        return "".join(f"{i:04d}|{process_line(line)}\n" for i, line in enumerate(lines, 1))
    return "".join(f"{process_line(line)}\n" for line in lines)
