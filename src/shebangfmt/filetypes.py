# topmark:header:start
#
#   project      : shebangfmt
#   file         : filetypes.py
#   file_relpath : src/shebangfmt/filetypes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Which files are eligible for directive normalization.

Eligibility is decided purely by name: a file qualifies when its exact file
name is listed, or its extension (without the leading dot, case-sensitive) is.
The normalizer itself never consults this table.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path


@dataclass(frozen=True)
class FileMatchingInfo:
    """File extensions and exact file names routed to the normalizer.

    Attributes:
        file_extensions (tuple[str, ...]): Extensions without the leading dot.
        file_names (tuple[str, ...]): Exact file names (e.g. ``Makefile``).
    """

    file_extensions: tuple[str, ...]
    file_names: tuple[str, ...]

    def matches(self, path: Path) -> bool:
        """Return True if ``path`` is eligible by file name or extension."""
        if path.name in self.file_names:
            return True
        suffix: str = path.suffix
        return bool(suffix) and suffix[1:] in self.file_extensions

    def extended(
        self,
        extensions: Iterable[str] = (),
        names: Iterable[str] = (),
    ) -> FileMatchingInfo:
        """Return a copy with extra extensions and file names appended.

        Leading dots on extensions are dropped; duplicates are ignored.
        """
        exts: list[str] = list(self.file_extensions)
        for ext in extensions:
            e: str = ext.lstrip(".")
            if e and e not in exts:
                exts.append(e)
        file_names: list[str] = list(self.file_names)
        for name in names:
            if name and name not in file_names:
                file_names.append(name)
        return FileMatchingInfo(file_extensions=tuple(exts), file_names=tuple(file_names))


# fmt: off
DEFAULT_FILE_EXTENSIONS: tuple[str, ...] = (
    # https://en.wikipedia.org/wiki/AWK
    "awk",
    # https://bats-core.readthedocs.io
    "bats",
    # https://en.wikipedia.org/wiki/Common_Gateway_Interface
    "cgi",
    # https://dlang.org/rdmd.html
    "d",
    # https://elixir-lang.org
    "exs",
    # https://openjdk.org/jeps/330#Shebang_files
    "java",
    # https://nodejs.org/en/learn/command-line/run-nodejs-scripts-from-the-command-line
    "js", "ts",
    # https://github.com/Kotlin/KEEP/blob/main/proposals/KEEP-0075-scripting-support.md
    "kts",
    # https://www.lua.org
    "lua",
    # https://en.wikipedia.org/wiki/Make_(software)
    "mk",
    # https://www.php.net/manual/en/features.commandline.usage.php
    "php", "php3", "php4", "php5",
    # https://perldoc.perl.org/perlrun#Location-of-Perl
    "pl", "t", "perl",
    # https://www.debian.org/doc/debian-policy/ch-maintainerscripts.html
    "postinst", "postrm", "preinst", "prerm",
    # https://learn.microsoft.com/en-us/powershell/module/microsoft.powershell.core/about/about_comments#shebang
    "ps1",
    # https://docs.python.org/3/using/unix.html#miscellaneous
    "py",
    # https://www.ruby-lang.org
    "rb",
    # https://www.gnu.org/software/sed
    "sed",
    # https://en.wikipedia.org/wiki/Shell_script
    "sh", "bash", "csh", "fish", "ksh", "tcsh", "zsh",
    # https://www.slackwiki.com/Writing_A_SlackBuild_Script
    "SlackBuild",
    # https://sourceware.org/systemtap/SystemTap_Beginners_Guide/useful-systemtap-scripts.html
    "stp",
)

DEFAULT_FILE_NAMES: tuple[str, ...] = (
    # https://en.wikipedia.org/wiki/Make_(software)
    "Makefile", "GNUmakefile",
)
# fmt: on

DEFAULT_FILE_MATCHING: FileMatchingInfo = FileMatchingInfo(
    file_extensions=DEFAULT_FILE_EXTENSIONS,
    file_names=DEFAULT_FILE_NAMES,
)
