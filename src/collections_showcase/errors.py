"""Error types raised by the collection helpers and demonstrations.

The taxonomy is intentionally small. Every failure is a programming-level
misuse signalled synchronously to the caller:

    EmptyInputError: reduction without a seed over an empty input
    InvalidArgumentError: structural parameter outside its valid domain
        (chunk/window size < 1, window step < 1, negative square root, ...)

Both derive from ``ValueError`` so callers that already guard against bad
values keep working, and from ``ShowcaseError`` so the CLI can catch the
whole family in one place.
"""
from __future__ import annotations

__all__ = ["ShowcaseError", "EmptyInputError", "InvalidArgumentError"]


class ShowcaseError(Exception):
    """Base class for all errors raised by this package."""


class EmptyInputError(ShowcaseError, ValueError):
    """Raised when an operation needs at least one element but got none."""


class InvalidArgumentError(ShowcaseError, ValueError):
    """Raised when a structural argument is out of its valid domain."""
