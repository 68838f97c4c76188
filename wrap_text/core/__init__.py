"""Core wrapping engine: options, errors and the line packer."""

from .exceptions import InvalidConfiguration, WrapTextError
from .options import DEFAULT_WIDTH, ShortenOptions, WrapOptions
from .wrapper import LineBuffer, TextWrapper, fill, shorten, wrap

__all__ = [
    "DEFAULT_WIDTH",
    "InvalidConfiguration",
    "LineBuffer",
    "ShortenOptions",
    "TextWrapper",
    "WrapOptions",
    "WrapTextError",
    "fill",
    "shorten",
    "wrap",
]
