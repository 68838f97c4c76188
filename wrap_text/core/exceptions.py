"""Exceptions raised by the wrapping engine."""


class WrapTextError(Exception):
    """Base exception for all wrap-text errors."""


class InvalidConfiguration(WrapTextError, ValueError):
    """Raised when wrap options cannot produce any output.

    Inherits from ``ValueError`` so callers used to the standard library's
    wrapping helpers can keep catching that.
    """
