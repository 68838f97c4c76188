"""Tests for :mod:`wrap_text.output`."""

from __future__ import annotations

from pathlib import Path

from wrap_text.output import TxtWriter


def test_txt_writer_writes_and_creates_parent(tmp_path: Path) -> None:
    """TxtWriter writes file contents and creates parent directories as needed."""
    writer = TxtWriter()
    outfile = tmp_path / "nested" / "dir" / "out.txt"

    written = writer.write("hello", outfile)

    assert written == outfile
    assert outfile.read_text(encoding="utf-8") == "hello"


def test_txt_writer_overwrites_existing_file(tmp_path: Path) -> None:
    """An existing file is replaced, not appended to."""
    outfile = tmp_path / "out.md"
    outfile.write_text("old contents", encoding="utf-8")

    TxtWriter().write("new", str(outfile))

    assert outfile.read_text(encoding="utf-8") == "new"
