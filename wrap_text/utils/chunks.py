"""Split normalized text into the indivisible chunks the line packer consumes.

A chunk is either a run of whitespace or a word-like run with no whitespace
inside it. With hyphen breaking enabled, compound words are split after
their hyphens and em-dashes become chunks of their own::

    Look, goof-ball -- use the -b option!

becomes::

    'Look,', ' ', 'goof-', 'ball', ' ', '--', ' ',
    'use', ' ', 'the', ' ', '-b', ' ', 'option!'

and without hyphen breaking ``'goof-ball'`` stays whole.
"""

from __future__ import annotations

import re

from .normalize import WHITESPACE

_WORD_PUNCT = r"[\w!\"'&.,?]"
_LETTER = r"[^\d\W]"
_WS = "[%s]" % re.escape(WHITESPACE)
_NWS = "[^" + _WS[1:]

_RE_WORDSEP = re.compile(
    r"""
    ( # any whitespace
      %(ws)s+
    | # em-dash between words
      (?<=%(wp)s) -{2,} (?=\w)
    | # word, possibly hyphenated
      %(nws)s+? (?:
        # hyphenated word
          -(?: (?<=%(lt)s{2}-) | (?<=%(lt)s-%(lt)s-))
          (?= %(lt)s -? %(lt)s)
        | # end of word
          (?=%(ws)s|\Z)
        | # em-dash
          (?<=%(wp)s) (?=-{2,}\w)
        )
    )"""
    % {"wp": _WORD_PUNCT, "lt": _LETTER, "ws": _WS, "nws": _NWS},
    re.VERBOSE,
)

_RE_WORDSEP_SIMPLE = re.compile(r"(%s+)" % _WS)

_RE_SENTENCE_END = re.compile(r"[a-z][.!?][\"']?\Z")


def is_whitespace_chunk(chunk: str) -> bool:
    """Return ``True`` when ``chunk`` holds nothing but whitespace."""
    return not chunk.strip()


def split_chunks(text: str, *, break_on_hyphens: bool = True) -> list[str]:
    """Split ``text`` into chunks, dropping empty ones.

    Joining the returned chunks gives back ``text`` unchanged.

    Args:
        text: Whitespace-normalized paragraph.
        break_on_hyphens: Use the hyphen-aware pattern instead of splitting
            on whitespace only.

    Returns:
        list[str]: Chunks in input order.
    """
    pattern = _RE_WORDSEP if break_on_hyphens else _RE_WORDSEP_SIMPLE
    return [chunk for chunk in pattern.split(text) if chunk]


def fix_sentence_endings(chunks: list[str]) -> None:
    """Widen the single space after a sentence end to two spaces, in place.

    When the source reads ``"... foo.\\nBar ..."`` normalization and
    splitting leave ``[..., "foo.", " ", "Bar", ...]``; the lone space is
    replaced by two. Only a lowercase letter followed by ``.``, ``!`` or
    ``?`` (and optionally a closing quote) counts as a sentence end.
    """
    i = 0
    while i < len(chunks) - 1:
        if chunks[i + 1] == " " and _RE_SENTENCE_END.search(chunks[i]):
            chunks[i + 1] = "  "
            i += 2
        else:
            i += 1
