"""Line-oriented margin helpers: remove or add a common prefix."""

from __future__ import annotations

import re
from collections.abc import Callable

_RE_WHITESPACE_ONLY = re.compile(r"^[ \t]+$", re.MULTILINE)
_RE_LEADING_WHITESPACE = re.compile(r"(^[ \t]*)(?:[^ \t\n])", re.MULTILINE)


def _common_margin(indents: list[str]) -> str | None:
    margin: str | None = None
    for current in indents:
        if margin is None or margin.startswith(current):
            # No deeper than the previous winner: it becomes the new margin.
            margin = current
        elif current.startswith(margin):
            continue
        else:
            for i, (x, y) in enumerate(zip(margin, current)):
                if x != y:
                    margin = margin[:i]
                    break
    return margin


def dedent(text: str) -> str:
    r"""Remove any common leading whitespace from every line in ``text``.

    Tabs and spaces are both whitespace but are not interchangeable: the
    lines ``"  hello"`` and ``"\thello"`` share no common margin. Lines made
    only of spaces and tabs are normalized to empty lines and ignored when
    computing the margin.

    Returns:
        The text with the common margin stripped.
    """
    text = _RE_WHITESPACE_ONLY.sub("", text)
    margin = _common_margin(_RE_LEADING_WHITESPACE.findall(text))
    if margin:
        text = re.sub(r"(?m)^" + margin, "", text)
    return text


def _not_blank(line: str) -> bool:
    return bool(line.strip())


def indent(
    text: str,
    prefix: str,
    predicate: Callable[[str], bool] | None = None,
) -> str:
    """Add ``prefix`` to the beginning of selected lines in ``text``.

    Args:
        text: Text to indent. Line terminators are preserved.
        prefix: String prepended to each selected line.
        predicate: Optional callable deciding which lines get the prefix.
            Defaults to every line that is not purely whitespace.

    Returns:
        The indented text.
    """
    should_prefix = predicate or _not_blank
    return "".join(
        prefix + line if should_prefix(line) else line for line in text.splitlines(keepends=True)
    )
