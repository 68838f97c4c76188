"""I/O helpers for the CLI.

This module centralizes input reading, paragraph splitting and writing
results so the CLI command definitions remain lean.
"""

from __future__ import annotations

import re
import sys
from pathlib import Path

from wrap_text.output import TxtWriter

_RE_BLANK_LINES = re.compile(r"\n(?:[ \t]*\n)+")


def read_input_source(*, text: str | None, input_path: str | None) -> str:
    """Return input text resolved from CLI sources.

    Args:
        text: Inline text provided via ``--text``/``-t``.
        input_path: Path to a file provided via ``--input``/``-i``.

    Returns:
        str: Materialized input text.

    Raises:
        ValueError: If no usable input source is provided.
    """
    if text is not None:
        return text

    if input_path:
        return Path(input_path).read_text(encoding="utf-8", errors="replace")

    if not sys.stdin.isatty():
        return sys.stdin.read()

    raise ValueError("No input provided. Use --text, --input, or pipe input.")


def split_paragraphs(text: str) -> list[str]:
    """Split ``text`` on blank lines, dropping empty paragraphs.

    Lines containing only spaces or tabs count as blank.
    """
    text = text.replace("\r\n", "\n")
    return [para for para in _RE_BLANK_LINES.split(text) if para.strip()]


def ensure_trailing_newline(text: str) -> str:
    """Return ``text`` with a single trailing newline appended if missing."""
    if not text.endswith("\n"):
        return text + "\n"
    return text


def write_output(*, text: str, output: str) -> str:
    """Write formatted text and return the path used.

    Args:
        text: Formatted text to persist.
        output: Output path supplied by the user.

    Returns:
        str: Final path containing the written artifact.
    """
    TxtWriter().write(ensure_trailing_newline(text), output)
    return output
