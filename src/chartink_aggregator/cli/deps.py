"""Shared CLI dependency helpers."""

from __future__ import annotations

from functools import lru_cache

from chartink_aggregator.config import AppSettings
from chartink_aggregator.screeners import ChartinkClient, ScreenerAggregator


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Return cached settings for CLI commands."""

    return AppSettings.from_env()


def get_aggregator() -> ScreenerAggregator:
    """Build a fresh aggregator; sessions are never shared between runs."""

    return ScreenerAggregator(ChartinkClient(settings=get_settings()))


def reset_settings() -> None:
    """Clear the cached settings (useful for tests)."""

    get_settings.cache_clear()
