"""Domain primitives shared across the aggregator."""

from .base import DomainModel

__all__ = ["DomainModel"]
