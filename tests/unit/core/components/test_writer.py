from __future__ import annotations

"""
Unit tests for Output Persistence.
"""

import pytest

from lazyindex.core.pipeline.components.writer import write_module


def test_write_module_creates_parent_dirs(tmp_path):
    target = tmp_path / "build" / "generated" / "index.js"

    write_module(str(target), "module.exports = {};\n")

    assert target.read_text(encoding="utf-8") == "module.exports = {};\n"


def test_write_module_overwrites_existing_file(tmp_path):
    target = tmp_path / "index.js"
    target.write_text("stale", encoding="utf-8")

    write_module(str(target), "fresh\n")

    assert target.read_text(encoding="utf-8") == "fresh\n"


def test_write_module_keeps_unix_newlines(tmp_path):
    target = tmp_path / "index.js"

    write_module(str(target), "a\nb\n")

    assert target.read_bytes() == b"a\nb\n"


def test_write_module_propagates_os_errors(tmp_path):
    """Writing onto a directory path fails loudly."""
    target = tmp_path / "taken"
    target.mkdir()

    with pytest.raises(OSError):
        write_module(str(target), "x")
