"""Paragraph wrapping, filling and shortening.

Example:
    >>> from wrap_text import fill
    >>> print(fill("The quick brown fox jumps over the lazy dog.", width=20))
    The quick brown fox
    jumps over the lazy
    dog.
"""

from wrap_text.core import (
    InvalidConfiguration,
    ShortenOptions,
    TextWrapper,
    WrapOptions,
    WrapTextError,
    fill,
    shorten,
    wrap,
)
from wrap_text.utils.margins import dedent, indent

__version__ = "1.0.0"

__all__ = [
    "InvalidConfiguration",
    "ShortenOptions",
    "TextWrapper",
    "WrapOptions",
    "WrapTextError",
    "dedent",
    "fill",
    "indent",
    "shorten",
    "wrap",
]
