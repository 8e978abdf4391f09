"""Exception types raised by the a_lm package.

All of them derive from :class:`ValueError`, so callers that only care
about "bad input" can keep catching that, while callers that need to
branch on the failure kind can catch the specific subclass.
"""

from __future__ import annotations

__all__ = [
    "AlmError",
    "IncompatibleAlmError",
    "InvalidBoundsError",
    "LengthMismatchError",
    "MalformedTableError",
]


class AlmError(ValueError):
    """Base class for every a_lm validation failure."""


class InvalidBoundsError(AlmError):
    """Raised when ``lmax``/``mmax`` are negative or inconsistent."""

    def __init__(self, message: str, lmax: int | None = None, mmax: int | None = None):
        super().__init__(message)
        self.lmax = lmax
        self.mmax = mmax


class LengthMismatchError(AlmError):
    """Raised when a coefficient array does not fit ``(lmax, mmax)``."""

    def __init__(self, message: str, expected: int, actual: int):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class IncompatibleAlmError(AlmError):
    """Raised when two coefficient sets cannot be combined into a spectrum.

    ``reason`` is one of ``"lmax"``, ``"mmax"`` or ``"truncated"``.
    """

    def __init__(self, message: str, reason: str):
        super().__init__(message)
        self.reason = reason


class MalformedTableError(AlmError):
    """Raised when the index column of a coefficient table cannot be decoded."""
