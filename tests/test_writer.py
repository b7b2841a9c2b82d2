"""Tests for output delivery."""

from __future__ import annotations

from pathlib import Path

import pytest

from openapi_to_typescript_generator.writer import WriteError, write_source


def test_write_source_creates_parents(tmp_path: Path) -> None:
    """Parent directories are created before writing."""
    target = tmp_path / "a" / "b" / "client.ts"
    written = write_source(target, "export {};\n")
    assert written == target.resolve()
    assert target.read_text(encoding="utf-8") == "export {};\n"


def test_write_source_overwrites_existing_file(tmp_path: Path) -> None:
    """An existing output file is replaced."""
    target = tmp_path / "client.ts"
    target.write_text("old", encoding="utf-8")
    write_source(target, "new")
    assert target.read_text(encoding="utf-8") == "new"


def test_parent_that_is_a_file_raises_write_error(tmp_path: Path) -> None:
    """Unwritable destinations are reported as write errors."""
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    with pytest.raises(WriteError, match="Failed to create output directory"):
        write_source(blocker / "client.ts", "x")
