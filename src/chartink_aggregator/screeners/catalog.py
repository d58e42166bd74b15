"""Fixed catalogue of Chartink screens and their display labels."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from .models import ScreenDefinition

_CLAUSES: tuple[tuple[str, str], ...] = (
    (
        "buy",
        "( {cash} ( [=1] 5 minute close >= [=1] 5 minute open * 1.005 and "
        "[=1] 5 minute volume > 100000 and [=1] 5 minute rsi( 14 ) > 70 ) )",
    ),
    (
        "sell",
        "( {cash} ( [=1] 5 minute volume > 100000 and [=2] 5 minute rsi( 14 ) < 35 and "
        "[=1] 5 minute close <= [=1] 5 minute open * 0.995 ) )",
    ),
    (
        "advanceBuy",
        "( {cash} ( [=1] 5 minute close >= [=1] 5 minute open * 1.005 and "
        "[=1] 5 minute volume > 100000 and "
        "[=1] 5 minute buyer initiated trades quantity > 50000 and "
        "[=1] 5 minute rsi( 14 ) > 70 ) )",
    ),
    (
        "advanceSell",
        "( {cash} ( [=1] 5 minute volume > 100000 and "
        "[=1] 5 minute seller initiated trades quantity > 50000 and "
        "[=1] 5 minute rsi( 14 ) < 35 and "
        "[=1] 5 minute close <= [=1] 5 minute open * 0.995 ) )",
    ),
    ("volumeGainers", "( {cash} ( latest volume > 100000 ) )"),
    (
        "topGainers",
        "( {cash} ( latest close > 1 day ago close and latest close > 100 and "
        "latest volume > 100000 ) )",
    ),
    (
        "topLosers",
        "( {cash} ( latest close < 1 day ago close and latest close > 100 and "
        "latest volume > 100000 ) )",
    ),
    (
        "niftyGainers",
        "( {57960} ( latest close > 1 day ago close and latest close > 100 and "
        "latest volume > 100000 ) )",
    ),
    (
        "niftyLosers",
        "( {57960} ( latest close < 1 day ago close and latest close > 100 and "
        "latest volume > 100000 ) )",
    ),
    ("fiftyTwoWeekHigh", "( {cash} ( latest high = latest max( 260 , latest high ) ) )"),
    (
        "fiftyEmaSupport",
        "( {cash} ( latest ema( close,50 ) >= latest low and( {cash} ( "
        "latest close >= latest ema( close,50 ) and latest volume > 100000 ) ) ) )",
    ),
    (
        "vcpPattern",
        "( {cash} ( weekly ema( close,13 ) > weekly ema( close,26 ) and "
        "weekly ema( close,26 ) > weekly sma( close,50 ) and "
        "weekly sma( close,40 ) > 5 weeks ago sma( close,40 ) and "
        "latest close >= weekly min( 50 , weekly low * 1.3 ) and "
        "latest close >= weekly max( 50 , weekly high * 0.75 ) and "
        "20 days ago ema( close,13 ) > 20 weeks ago ema( close,26 ) and "
        "5 weeks ago sma( close,40 ) > 10 weeks ago sma( close,40 ) and "
        "latest close > latest sma( close,50 ) and"
        "( weekly wma( close,8 ) - weekly sma( close,8 ) ) * 6 / 29 < 0.5 and "
        "latest close > 10 ) )",
    ),
    ("zeroVolume", "( {45603} ( latest close >= 1 and latest volume = 0 ) )"),
    ("nifty50CloseAbove20", "( {33492} ( latest close > 20 ) )"),
    ("allCashCloseAbove20", "( {cash} ( latest close > 20 ) )"),
)

SCREEN_DEFINITIONS: Mapping[str, ScreenDefinition] = MappingProxyType(
    {name: ScreenDefinition(name=name, clause=clause) for name, clause in _CLAUSES}
)

SIDE_LABELS: Mapping[str, str] = MappingProxyType(
    {
        "niftyGainers": "gainerNifty500",
        "niftyLosers": "loserNifty500",
        "advanceBuy": "advanceBuy",
        "advanceSell": "advanceSell",
        "fiftyTwoWeekHigh": "fiftyTwoWeekHigh",
        "fiftyEmaSupport": "fiftyEmaSupport",
        "vcpPattern": "vcpPattern",
        "zeroVolume": "zeroVolume",
        "nifty50CloseAbove20": "nifty50CloseAbove20",
        "allCashCloseAbove20": "allCashCloseAbove20",
    }
)

# Categories that receive a momentumStrength score.
SCORED_SCREENS: tuple[str, ...] = ("buy", "sell", "advanceBuy", "advanceSell")


def side_label(name: str) -> str:
    """Return the display label for a screen, defaulting to its own name."""

    return SIDE_LABELS.get(name, name)


__all__ = ["SCORED_SCREENS", "SCREEN_DEFINITIONS", "SIDE_LABELS", "side_label"]
