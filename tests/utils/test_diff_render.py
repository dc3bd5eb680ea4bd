# topmark:header:start
#
#   project      : shebangfmt
#   file         : test_diff_render.py
#   file_relpath : tests/utils/test_diff_render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diff utils: unified diff generation and preview rendering."""

from __future__ import annotations

import re

from shebangfmt.utils.diff import render_patch, unified_diff

_ANSI = re.compile(r"\x1b\[[0-9;]*m")


def _plain(text: str) -> str:
    return _ANSI.sub("", text)


def test_unified_diff_headers_and_hunk() -> None:
    """The diff names both versions and shows only the directive line change."""
    diff = unified_diff("#!  /bin/sh\necho\n", "#!/bin/sh\necho\n", "run.sh")
    lines = diff.splitlines()
    assert lines[0] == "--- run.sh (current)"
    assert lines[1] == "+++ run.sh (updated)"
    assert "-#!  /bin/sh" in lines
    assert "+#!/bin/sh" in lines
    assert " echo" in lines


def test_unified_diff_equal_is_empty() -> None:
    """Identical contents produce no diff."""
    assert unified_diff("#!/bin/sh\n", "#!/bin/sh\n", "run.sh") == ""


def test_render_patch_accepts_str_and_list() -> None:
    """`render_patch` accepts both a diff string and a sequence of lines."""
    diff_text = "--- a\n+++ b\n-foo\n+bar\n"
    s1 = render_patch(diff_text)
    s2 = render_patch(diff_text.splitlines(keepends=True))
    assert _plain(s1) == _plain(s2)


def test_render_patch_makes_whitespace_visible() -> None:
    """Tabs and line terminators are shown as escapes."""
    out = _plain(render_patch("-#!\t/bin/sh\r\n+#!/bin/sh\r\n"))
    assert out.splitlines() == ["-#!\\t/bin/sh\\r\\n", "+#!/bin/sh\\r\\n"]


def test_render_patch_line_numbers() -> None:
    """Line numbers are zero-padded and prefixed."""
    out = _plain(render_patch(["-a\n", "+b\n"], show_line_numbers=True))
    assert out.splitlines() == ["0001|-a\\n", "0002|+b\\n"]


def test_render_patch_empty_input_is_safe() -> None:
    """Empty diff input renders to an empty string."""
    assert render_patch("") == ""
