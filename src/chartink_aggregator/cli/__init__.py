"""Command-line interface for the screener aggregator."""

from .app import app

__all__ = ["app"]
