"""Text helpers used by the wrapping engine."""

from . import chunks, margins, normalize

__all__ = ["chunks", "margins", "normalize"]
