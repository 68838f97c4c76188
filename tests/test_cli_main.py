"""Tests for :mod:`wrap_text.cli.main` commands."""

from __future__ import annotations

import importlib
from pathlib import Path
from typing import Any

from click.testing import CliRunner

from wrap_text.cli.main import main


class DummyHalo:
    """Spinner stand-in recording the final status."""

    calls: list[str] = []

    def __init__(self, *a: Any, **k: Any) -> None:  # noqa: D401
        pass

    def start(self) -> None:  # noqa: D401
        DummyHalo.calls.append("start")

    def succeed(self, *_: Any, **__: Any) -> None:  # noqa: D401
        DummyHalo.calls.append("succeed")

    def fail(self, *_: Any, **__: Any) -> None:  # noqa: D401
        DummyHalo.calls.append("fail")


def test_fill_prints_wrapped_text() -> None:
    """fill -t prints the filled paragraph to stdout."""
    runner = CliRunner()
    text = "The quick brown fox jumps over the lazy dog."
    result = runner.invoke(main, ["fill", "-t", text, "-w", "20"])
    assert result.exit_code == 0
    assert result.output == "The quick brown fox\njumps over the lazy\ndog.\n"


def test_fill_handles_paragraphs_separately() -> None:
    """Blank lines separate paragraphs unless a single paragraph is requested."""
    runner = CliRunner()
    text = "one two\nthree\n\n  \nfour five"
    result = runner.invoke(main, ["fill", "-t", text])
    assert result.exit_code == 0
    assert result.output == "one two three\n\nfour five\n"

    result = runner.invoke(main, ["fill", "-t", text, "--single-paragraph"])
    assert result.output == "one two three     four five\n"


def test_fill_reads_stdin() -> None:
    """Without --text or --input the command reads piped input."""
    runner = CliRunner()
    result = runner.invoke(main, ["fill", "-w", "10"], input="one two three four")
    assert result.exit_code == 0
    assert result.output == "one two\nthree four\n"


def test_wrap_with_max_lines_and_indent() -> None:
    """Wrapping toggles are forwarded to the engine."""
    runner = CliRunner()
    text = "Hello there, how are you this fine day?  I'm glad to hear it!"
    result = runner.invoke(main, ["wrap", "-t", text, "-w", "12", "--max-lines", "2"])
    assert result.exit_code == 0
    assert result.output == "Hello there,\nhow [...]\n"

    result = runner.invoke(
        main,
        ["wrap", "-t", "aaa bbb ccc", "-w", "8", "--initial-indent", "* ", "--subsequent-indent", "  "],
    )
    assert result.output == "* aaa\n  bbb\n  ccc\n"


def test_wrap_no_break_long_words() -> None:
    """Negative flags disable the matching option."""
    runner = CliRunner()
    result = runner.invoke(main, ["wrap", "-t", "abcdefghij xy", "-w", "4", "--no-break-long-words"])
    assert result.exit_code == 0
    assert result.output == "abcdefghij\nxy\n"


def test_shorten_command() -> None:
    """shorten collapses whitespace and truncates to one line."""
    runner = CliRunner()
    result = runner.invoke(main, ["shorten", "-t", "Hello  world!", "-w", "11"])
    assert result.exit_code == 0
    assert result.output == "Hello [...]\n"


def test_dedent_and_indent_commands() -> None:
    """Margin commands pass text through the helpers."""
    runner = CliRunner()
    result = runner.invoke(main, ["dedent", "-t", "    a\n      b"])
    assert result.output == "a\n  b\n"

    result = runner.invoke(main, ["indent", "-t", "a\n\nb", "-p", "> "])
    assert result.output == "> a\n\n> b\n"

    result = runner.invoke(main, ["indent", "-t", "a\n\nb", "-p", "> ", "--all-lines"])
    assert result.output == "> a\n> \n> b\n"


def test_invalid_width_exits_with_error() -> None:
    """Configuration errors exit 1 with a message."""
    runner = CliRunner()
    result = runner.invoke(main, ["fill", "-t", "text", "-w", "0"])
    assert result.exit_code == 1
    assert "Error: invalid width 0 (must be > 0)" in result.output


def test_placeholder_too_large_exits_with_error() -> None:
    """A placeholder wider than the width is reported."""
    runner = CliRunner()
    result = runner.invoke(main, ["shorten", "-t", "Hello world", "-w", "3"])
    assert result.exit_code == 1
    assert "placeholder too large" in result.output


def test_missing_input_file_is_rejected() -> None:
    """click validates that --input exists."""
    runner = CliRunner()
    result = runner.invoke(main, ["fill", "-i", "does-not-exist.txt"])
    assert result.exit_code != 0


def test_output_file_written_with_spinner(monkeypatch, tmp_path: Path) -> None:
    """-o writes the result through the writer and reports the path."""
    mod = importlib.import_module("wrap_text.cli.main")
    DummyHalo.calls = []
    monkeypatch.setattr(mod, "Halo", DummyHalo)

    source = tmp_path / "in.txt"
    source.write_text("alpha beta gamma", encoding="utf-8")
    target = tmp_path / "nested" / "out.txt"

    runner = CliRunner()
    result = runner.invoke(main, ["fill", "-i", str(source), "-o", str(target), "-w", "11"])

    assert result.exit_code == 0
    assert "Formatted text saved to" in result.output
    assert target.read_text(encoding="utf-8") == "alpha beta\ngamma\n"
    assert DummyHalo.calls == ["start", "succeed"]


def test_output_file_spinner_fails_on_error(monkeypatch, tmp_path: Path) -> None:
    """The spinner reports failure when formatting raises."""
    mod = importlib.import_module("wrap_text.cli.main")
    DummyHalo.calls = []
    monkeypatch.setattr(mod, "Halo", DummyHalo)

    runner = CliRunner()
    result = runner.invoke(main, ["wrap", "-t", "x", "-w", "0", "-o", str(tmp_path / "o.txt")])

    assert result.exit_code == 1
    assert DummyHalo.calls == ["start", "fail"]
    assert not (tmp_path / "o.txt").exists()


def test_verbose_prints_summary() -> None:
    """--verbose reports a short summary."""
    runner = CliRunner()
    result = runner.invoke(main, ["wrap", "-t", "aaa bbb", "-w", "3", "-v"])
    assert result.exit_code == 0
    assert "[Wrapping: 7 characters in, 2 lines out]" in result.output


def test_shorten_has_no_drop_whitespace_toggle() -> None:
    """Only wrap and fill accept --no-drop-whitespace."""
    runner = CliRunner()
    result = runner.invoke(main, ["shorten", "-t", "a b", "--no-drop-whitespace"])
    assert result.exit_code == 2

    result = runner.invoke(main, ["wrap", "-t", "aa bb", "-w", "3", "--no-drop-whitespace"])
    assert result.exit_code == 0
    assert result.output == "aa \nbb\n"
