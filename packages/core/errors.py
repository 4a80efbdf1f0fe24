"""Error types raised by the photometry package."""

from __future__ import annotations


class InvalidInputError(ValueError):
    """Malformed geometry or options passed to the coverage estimator.

    Raised synchronously and never swallowed by the library; callers are
    expected to surface the message to the user (e.g. "check fixture
    mounting height").
    """
