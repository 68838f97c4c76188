"""Greedy line packing for a single paragraph.

:class:`TextWrapper` normalizes whitespace, splits the paragraph into
chunks and packs them into lines no wider than ``width`` columns. Chunks
correspond roughly to words and the whitespace between them; a line break
may fall between any two chunks, and a chunk is only ever split when it is
too long to fit on a line by itself.

When ``max_lines`` is set and the paragraph does not fit, the last permitted
line is cut back until the placeholder fits and wrapping stops there.
"""

from __future__ import annotations

import dataclasses
import logging

from wrap_text.core.exceptions import InvalidConfiguration
from wrap_text.core.options import DEFAULT_WIDTH, ShortenOptions, WrapOptions
from wrap_text.utils.chunks import fix_sentence_endings, is_whitespace_chunk, split_chunks
from wrap_text.utils.normalize import munge_whitespace

logger = logging.getLogger(__name__)


class LineBuffer:
    """Chunks assigned to the line under construction plus their length."""

    def __init__(self) -> None:
        self._chunks: list[str] = []
        self.length = 0

    def __len__(self) -> int:
        """Return the number of chunks on the line."""
        return len(self._chunks)

    def append(self, chunk: str) -> None:
        """Add ``chunk`` to the end of the line."""
        self._chunks.append(chunk)
        self.length += len(chunk)

    def pop(self) -> str:
        """Remove and return the last chunk."""
        chunk = self._chunks.pop()
        self.length -= len(chunk)
        return chunk

    def last(self) -> str:
        """Return the last chunk without removing it."""
        return self._chunks[-1]

    def text(self) -> str:
        """Return the line contents, indent excluded."""
        return "".join(self._chunks)


class TextWrapper:
    """Reusable wrapper holding a width and a frozen set of options.

    Example:
        >>> TextWrapper(width=10).wrap("Look, goof-ball -- use the -b option!")
        ['Look,', 'goof-ball', '-- use the', '-b option!']

    Instances keep no per-call state and may be shared between threads.
    """

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        options: WrapOptions | None = None,
        **overrides: object,
    ) -> None:
        """Initialize the wrapper.

        Args:
            width: Maximum line width, indents included.
            options: Base options. Defaults to :class:`WrapOptions` defaults.
            **overrides: Individual option values applied on top of
                ``options``.

        Raises:
            TypeError: If ``overrides`` names an unknown option.
        """
        base = options or WrapOptions()
        self.width = width
        self.options = base.replace(**overrides) if overrides else base

    # -- Pipeline stages ---------------------------------------------------

    def munge_whitespace(self, text: str) -> str:
        """Return ``text`` with tabs expanded and whitespace replaced."""
        opts = self.options
        return munge_whitespace(
            text,
            expand=opts.expand_tabs,
            tabsize=opts.tabsize,
            replace=opts.replace_whitespace,
        )

    def split(self, text: str) -> list[str]:
        """Split normalized ``text`` into chunks."""
        return split_chunks(text, break_on_hyphens=self.options.break_on_hyphens)

    def split_chunks(self, text: str) -> list[str]:
        """Normalize then split ``text``."""
        return self.split(self.munge_whitespace(text))

    def validate(self) -> None:
        """Check that the width and placeholder can produce output.

        Raises:
            InvalidConfiguration: If ``width`` is not positive, if
                ``max_lines`` is below 1, or if the indent of the last
                permitted line plus the stripped placeholder does not fit
                in ``width``.
        """
        if self.width <= 0:
            raise InvalidConfiguration(f"invalid width {self.width!r} (must be > 0)")
        opts = self.options
        if opts.max_lines is not None:
            if opts.max_lines < 1:
                raise InvalidConfiguration(f"invalid max_lines {opts.max_lines!r} (must be > 0)")
            indent = opts.subsequent_indent if opts.max_lines > 1 else opts.initial_indent
            if len(indent) + len(opts.placeholder.lstrip()) > self.width:
                raise InvalidConfiguration("placeholder too large for max width")

    def handle_long_word(
        self,
        reversed_chunks: list[str],
        line: LineBuffer,
        width: int,
    ) -> None:
        """Place a chunk that does not fit on any line of ``width`` columns.

        With ``break_long_words`` the part that fits is moved onto ``line``
        and any remainder stays on top of ``reversed_chunks``. Otherwise the chunk
        is placed whole, but only on an empty line.

        Args:
            reversed_chunks: Remaining chunks, next chunk last.
            line: Buffer of the line under construction.
            width: Width budget of this line, indent excluded.
        """
        # An indent wider than the width still has to consume a character
        # per pass.
        space_left = 1 if width < 1 else width - line.length

        if self.options.break_long_words:
            chunk = reversed_chunks[-1]
            end = space_left
            if self.options.break_on_hyphens and len(chunk) > space_left:
                # Break after the last hyphen, provided non-hyphens precede it.
                hyphen = chunk.rfind("-", 0, space_left)
                if hyphen > 0 and any(c != "-" for c in chunk[:hyphen]):
                    end = hyphen + 1
            logger.debug("Splitting long chunk %r after %d characters", chunk, end)
            line.append(chunk[:end])
            rest = chunk[end:]
            if rest:
                reversed_chunks[-1] = rest
            else:
                reversed_chunks.pop()
        elif not line:
            line.append(reversed_chunks.pop())

    def truncate(self, lines: list[str], line: LineBuffer, indent: str, width: int) -> None:
        """Finish ``lines`` with the placeholder once ``max_lines`` is reached.

        Args:
            lines: Lines produced so far; updated in place.
            line: Buffer of the last permitted line.
            indent: Indent of the last permitted line.
            width: Width budget of that line, indent excluded.
        """
        placeholder = self.options.placeholder
        while line:
            if not is_whitespace_chunk(line.last()) and line.length + len(placeholder) <= width:
                line.append(placeholder)
                lines.append(indent + line.text())
                logger.debug("Truncated output after %d lines", len(lines))
                return
            line.pop()

        if lines:
            prev_line = lines[-1].rstrip()
            if len(prev_line) + len(placeholder) <= self.width:
                lines[-1] = prev_line + placeholder
                logger.debug("Placeholder appended to line %d", len(lines))
                return
        lines.append(indent + placeholder.lstrip())
        logger.debug("Placeholder placed on its own line %d", len(lines))

    def wrap_chunks(self, chunks: list[str]) -> list[str]:
        """Pack ``chunks`` into lines of at most ``width`` columns.

        Lines may be wider only when ``break_long_words`` is disabled and a
        single chunk does not fit. Whitespace chunks are dropped at line
        starts and ends when ``drop_whitespace`` is set; otherwise all
        whitespace is preserved.

        Args:
            chunks: Chunks in input order. The list is consumed.

        Returns:
            list[str]: Output lines, indents included.

        Raises:
            InvalidConfiguration: If the options cannot produce output.
        """
        self.validate()
        opts = self.options
        lines: list[str] = []

        # Reversed so the next chunk can be popped from the tail.
        chunks.reverse()

        while chunks:
            line = LineBuffer()
            indent = opts.subsequent_indent if lines else opts.initial_indent
            width = self.width - len(indent)

            # Leading whitespace is kept only at the very start of the text.
            if opts.drop_whitespace and lines and is_whitespace_chunk(chunks[-1]):
                del chunks[-1]

            while chunks:
                if line.length + len(chunks[-1]) <= width:
                    line.append(chunks.pop())
                else:
                    break

            if chunks and len(chunks[-1]) > width:
                self.handle_long_word(chunks, line, width)

            if opts.drop_whitespace and line and is_whitespace_chunk(line.last()):
                line.pop()

            if not line:
                continue

            is_last_line = not chunks or (
                opts.drop_whitespace and len(chunks) == 1 and is_whitespace_chunk(chunks[0])
            )
            if (
                opts.max_lines is None
                or len(lines) + 1 < opts.max_lines
                or (is_last_line and line.length <= width)
            ):
                lines.append(indent + line.text())
            else:
                self.truncate(lines, line, indent, width)
                break

        return lines

    # -- Public interface --------------------------------------------------

    def wrap(self, text: str) -> list[str]:
        """Wrap the single paragraph in ``text`` into a list of lines.

        Tabs are expanded and other whitespace, newlines included, becomes
        spaces unless the options say otherwise.
        """
        chunks = self.split_chunks(text)
        if self.options.fix_sentence_endings:
            fix_sentence_endings(chunks)
        return self.wrap_chunks(chunks)

    def fill(self, text: str) -> str:
        """Wrap ``text`` and join the lines with newlines."""
        return "\n".join(self.wrap(text))


# -- Convenience interface -------------------------------------------------


def wrap(
    text: str,
    width: int = DEFAULT_WIDTH,
    options: WrapOptions | None = None,
    **overrides: object,
) -> list[str]:
    """Wrap a single paragraph of text, returning a list of wrapped lines.

    Args:
        text: Paragraph to wrap.
        width: Maximum line width, indents included.
        options: Base options; see :class:`WrapOptions`.
        **overrides: Individual option values applied on top of ``options``.

    Returns:
        list[str]: Wrapped lines without trailing newlines.

    Raises:
        InvalidConfiguration: If the options cannot produce output.
    """
    return TextWrapper(width, options, **overrides).wrap(text)


def fill(
    text: str,
    width: int = DEFAULT_WIDTH,
    options: WrapOptions | None = None,
    **overrides: object,
) -> str:
    """Fill a single paragraph of text, returning one newline-joined string.

    Takes the same arguments as :func:`wrap`.
    """
    return TextWrapper(width, options, **overrides).fill(text)


def shorten(
    text: str,
    width: int,
    options: ShortenOptions | None = None,
    **overrides: object,
) -> str:
    """Collapse and truncate ``text`` to fit on one line of ``width`` columns.

    Whitespace runs are collapsed first. If the result fits it is returned
    as is, otherwise as many words as possible are kept and the placeholder
    is appended::

        >>> shorten("Hello  world!", width=12)
        'Hello world!'
        >>> shorten("Hello  world!", width=11)
        'Hello [...]'

    Raises:
        TypeError: If ``overrides`` names an unknown option or ``max_lines``.
        InvalidConfiguration: If the placeholder does not fit in ``width``.
    """
    base = options or ShortenOptions()
    if overrides:
        base = dataclasses.replace(base, **overrides)
    wrapper = TextWrapper(width, base.to_wrap_options())
    return wrapper.fill(" ".join(text.strip().split()))
