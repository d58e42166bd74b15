"""Custom exceptions for the screener aggregation flow."""

from __future__ import annotations


class AggregatorError(RuntimeError):
    """Base class for failures while aggregating screener results."""


class SessionError(AggregatorError):
    """Raised when the landing page cannot yield a usable session."""


class UpstreamError(AggregatorError):
    """Raised when a screen query fails or returns an unusable body."""


class InternalError(AggregatorError):
    """Raised for unexpected failures while merging or scoring rows."""


__all__ = ["AggregatorError", "InternalError", "SessionError", "UpstreamError"]
