# topmark:header:start
#
#   project      : shebangfmt
#   file         : test_plugin.py
#   file_relpath : tests/test_plugin.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the formatter plugin handshake."""

from __future__ import annotations

from pathlib import Path

import pytest

from shebangfmt.config.model import Config
from shebangfmt.constants import PLUGIN_CONFIG_KEY, SHEBANGFMT_VERSION
from shebangfmt.core.errors import DecodeError
from shebangfmt.diagnostics import DiagnosticLevel
from shebangfmt.plugin import FormatRange, FormatRequest, ShebangPluginHandler


@pytest.fixture
def handler() -> ShebangPluginHandler:
    """Return a fresh plugin handler."""
    return ShebangPluginHandler()


def _request(data: bytes, rng: FormatRange | None = None) -> FormatRequest:
    return FormatRequest(file_path=Path("run.sh"), file_bytes=data, config=Config(), range=rng)


def test_format_whole_file(handler: ShebangPluginHandler) -> None:
    """Without a range the whole content is normalized."""
    assert handler.format(_request(b"#!  /bin/sh\necho\n")) == b"#!/bin/sh\necho\n"
    assert handler.format(_request(b"#!/bin/sh\necho\n")) is None
    assert handler.format(_request(b"echo\n")) is None


def test_format_range_not_at_start_is_noop(handler: ShebangPluginHandler) -> None:
    """A range starting past offset 0 never reaches the parser."""
    data = b"x\n#!  /bin/sh\n"
    assert handler.format(_request(data, FormatRange(start=2, end=len(data)))) is None


def test_format_range_not_at_start_skips_decoding(handler: ShebangPluginHandler) -> None:
    """Even invalid UTF-8 is ignored when the range does not start at 0."""
    assert handler.format(_request(b"\xff\xfe", FormatRange(start=1, end=2))) is None


def test_format_range_at_start_uses_slice(handler: ShebangPluginHandler) -> None:
    """A range starting at 0 formats only the requested slice."""
    data = b"#! /bin/sh\nx"
    assert handler.format(_request(data, FormatRange(start=0, end=11))) == b"#!/bin/sh\n"


def test_format_invalid_utf8(handler: ShebangPluginHandler) -> None:
    """Invalid UTF-8 content raises DecodeError with the failing offset."""
    with pytest.raises(DecodeError) as excinfo:
        handler.format(_request(b"#!/bin/sh\n\xff"))
    assert excinfo.value.position == 10


def test_resolve_config_defaults(handler: ShebangPluginHandler) -> None:
    """An empty settings map yields the built-in table and no diagnostics."""
    result = handler.resolve_config({})
    assert result.diagnostics == ()
    assert "sh" in result.file_matching.file_extensions
    assert "Makefile" in result.file_matching.file_names


def test_resolve_config_extends_file_matching(handler: ShebangPluginHandler) -> None:
    """Host settings add extensions and file names."""
    result = handler.resolve_config(
        {"extensions": [".tcl"], "fileNames": ["Rakefile"]},
        global_config={"lineWidth": 80},
    )
    assert result.diagnostics == ()
    assert result.file_matching.matches(Path("tool.tcl"))
    assert result.file_matching.matches(Path("Rakefile"))
    assert result.config.extensions == (".tcl",)


def test_resolve_config_reports_unknown_keys(handler: ShebangPluginHandler) -> None:
    """Unknown plugin settings are reported as warnings, not errors."""
    result = handler.resolve_config({"lineWidth": 80})
    assert [d.message for d in result.diagnostics] == [
        "Unknown property in configuration: lineWidth"
    ]
    assert result.diagnostics[0].level is DiagnosticLevel.WARNING


def test_resolve_config_reports_bad_values(handler: ShebangPluginHandler) -> None:
    """Settings of the wrong type are reported and ignored."""
    result = handler.resolve_config({"extensions": "tcl"})
    assert [d.message for d in result.diagnostics] == [
        f"{PLUGIN_CONFIG_KEY}: 'extensions' must be a list of strings"
    ]
    assert not result.file_matching.matches(Path("tool.tcl"))


def test_plugin_info(handler: ShebangPluginHandler) -> None:
    """Plugin metadata carries the package name, version and config key."""
    info = handler.plugin_info()
    assert info.name == "shebangfmt"
    assert info.version == SHEBANGFMT_VERSION
    assert info.config_key == "shebang"
    assert info.help_url.startswith("https://")


def test_license_text(handler: ShebangPluginHandler) -> None:
    """The bundled license is returned verbatim."""
    text = handler.license_text()
    assert text.startswith("MIT License")
    assert "Olivier Biot" in text


def test_check_config_updates(handler: ShebangPluginHandler) -> None:
    """There are no configuration migrations."""
    assert handler.check_config_updates({"config": {"shebang": {}}}) == []
