"""Option holders consumed read-only by the wrapping engine.

Both holders are frozen dataclasses so a single instance can be shared by
any number of wrap calls. Use :meth:`WrapOptions.replace` to derive a
modified copy instead of mutating an existing one.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_WIDTH = 70
DEFAULT_PLACEHOLDER = " [...]"


@dataclass(frozen=True)
class WrapOptions:
    """Toggles controlling how a paragraph is wrapped.

    Attributes:
        initial_indent: Prefix of the first output line. Counts toward width.
        subsequent_indent: Prefix of every later line. Counts toward width.
        expand_tabs: Expand tabs to spaces before any other processing.
        tabsize: Tab stop width used when expanding tabs.
        replace_whitespace: Turn every whitespace character into a single
            space after tab expansion. With ``expand_tabs`` disabled this
            turns each tab into one space.
        fix_sentence_endings: Put two spaces after sentence-ending
            punctuation that is followed by a single space.
        break_long_words: Split words that do not fit on a line by
            themselves. When disabled such words overflow the width.
        break_on_hyphens: Prefer breaking compound words after hyphens.
        drop_whitespace: Drop whitespace at the start and end of lines.
        max_lines: Maximum number of output lines, ``None`` for no limit.
        placeholder: Marker appended to the last line when truncating.
    """

    initial_indent: str = ""
    subsequent_indent: str = ""
    expand_tabs: bool = True
    tabsize: int = 8
    replace_whitespace: bool = True
    fix_sentence_endings: bool = False
    break_long_words: bool = True
    break_on_hyphens: bool = True
    drop_whitespace: bool = True
    max_lines: int | None = None
    placeholder: str = DEFAULT_PLACEHOLDER

    def replace(self, **changes: object) -> WrapOptions:
        """Return a copy of these options with ``changes`` applied."""
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_mapping(cls, values: Mapping[str, object]) -> WrapOptions:
        """Build options from ``values``, skipping entries set to ``None``.

        Args:
            values: Option names mapped to values, typically collected from
                command-line flags where ``None`` means "not given".

        Returns:
            WrapOptions: Options with defaults for every missing entry.

        Raises:
            TypeError: If ``values`` names an unknown option.
        """
        return cls(**{key: value for key, value in values.items() if value is not None})


@dataclass(frozen=True)
class ShortenOptions:
    """Options accepted by ``shorten``.

    Same toggles as :class:`WrapOptions` except ``max_lines`` and
    ``drop_whitespace``: shortening always produces one line with edge
    whitespace dropped.
    """

    initial_indent: str = ""
    subsequent_indent: str = ""
    expand_tabs: bool = True
    tabsize: int = 8
    replace_whitespace: bool = True
    fix_sentence_endings: bool = False
    break_long_words: bool = True
    break_on_hyphens: bool = True
    placeholder: str = DEFAULT_PLACEHOLDER

    def to_wrap_options(self) -> WrapOptions:
        """Return the equivalent single-line :class:`WrapOptions`."""
        return WrapOptions(max_lines=1, drop_whitespace=True, **dataclasses.asdict(self))
