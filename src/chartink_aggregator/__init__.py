"""Chartink screener aggregation proxy."""

__version__ = "0.1.0"
