"""Whitespace normalization applied before a paragraph is split into chunks.

Two independent steps run in order:

- tab expansion to the next multiple of ``tabsize`` columns
- replacement of every whitespace character by a single space

Running only the second step turns each literal tab into one space.
"""

from __future__ import annotations

WHITESPACE = "\t\n\x0b\x0c\r "

# Built once at import; maps every whitespace code point to a space.
_WHITESPACE_TRANS = {ord(char): " " for char in WHITESPACE}


def expand_tabs(text: str, tabsize: int = 8) -> str:
    r"""Replace tabs with spaces up to the next tab stop.

    The column counter is reset by ``\n`` and ``\r`` while scanning, so
    every physical line gets its own tab stops. A ``tabsize`` of zero or
    less removes tabs entirely.

    Args:
        text: Text to expand.
        tabsize: Distance between tab stops.

    Returns:
        The text with every tab expanded.
    """
    if "\t" not in text:
        return text
    out: list[str] = []
    column = 0
    for char in text:
        if char == "\t":
            if tabsize > 0:
                pad = tabsize - column % tabsize
                out.append(" " * pad)
                column += pad
        elif char in "\n\r":
            out.append(char)
            column = 0
        else:
            out.append(char)
            column += 1
    return "".join(out)


def replace_whitespace(text: str) -> str:
    """Return ``text`` with each whitespace character turned into a space."""
    return text.translate(_WHITESPACE_TRANS)


def munge_whitespace(
    text: str,
    *,
    expand: bool = True,
    tabsize: int = 8,
    replace: bool = True,
) -> str:
    """Apply tab expansion and whitespace replacement as requested.

    Args:
        text: Raw paragraph text.
        expand: Whether tabs are expanded first.
        tabsize: Tab stop width used for expansion.
        replace: Whether remaining whitespace is replaced by spaces.

    Returns:
        Normalized text, ready for tokenizing.
    """
    if expand:
        text = expand_tabs(text, tabsize)
    if replace:
        text = replace_whitespace(text)
    return text
