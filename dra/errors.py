"""
Error types raised by the dra package.

Every error is terminal for an invocation: the CLI reports it once on
stderr and exits non-zero.
"""

from __future__ import annotations

INVALID_FORMAT = "invalid_format"
NOT_A_NUMBER = "not_a_number"


class DraError(Exception):
    """Base class for all dra errors."""


class ParseError(DraError):
    """The query string does not follow the reference grammar."""

    def __init__(self, message: str, kind: str = INVALID_FORMAT) -> None:
        super().__init__(message)
        self.kind = kind


class ResolveError(DraError):
    """The parsed range ends before it starts."""


class StoreError(DraError):
    """The verse store could not be opened or queried."""
