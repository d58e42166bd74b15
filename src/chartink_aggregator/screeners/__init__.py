"""Screener aggregation exports."""

from .catalog import SCORED_SCREENS, SCREEN_DEFINITIONS, SIDE_LABELS, side_label
from .exceptions import AggregatorError, InternalError, SessionError, UpstreamError
from .models import ScreenDefinition, SessionContext, StockRow
from .providers import ChartinkClient
from .scoring import apply_momentum, median, momentum_strength, score_rows
from .service import ScreenerAggregator, flatten, tag_rows

__all__ = [
    "SCORED_SCREENS",
    "SCREEN_DEFINITIONS",
    "SIDE_LABELS",
    "AggregatorError",
    "ChartinkClient",
    "InternalError",
    "ScreenDefinition",
    "ScreenerAggregator",
    "SessionContext",
    "SessionError",
    "StockRow",
    "UpstreamError",
    "apply_momentum",
    "flatten",
    "median",
    "momentum_strength",
    "score_rows",
    "side_label",
    "tag_rows",
]
