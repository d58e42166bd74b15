"""Upstream screener client implementations."""

from .chartink import ChartinkClient

__all__ = ["ChartinkClient"]
