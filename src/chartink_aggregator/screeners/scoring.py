"""Median-based volume momentum scoring."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping, Sequence
from decimal import ROUND_HALF_UP, Decimal

from .catalog import SCORED_SCREENS
from .exceptions import InternalError
from .models import StockRow

MOMENTUM_FIELD = "momentumStrength"
_CENTS = Decimal("0.01")


def median(values: Iterable[float]) -> float | None:
    """Return the median of ``values`` or ``None`` when empty."""

    ordered = sorted(values)
    if not ordered:
        return None
    mid = len(ordered) // 2
    if len(ordered) % 2 == 0:
        return (ordered[mid - 1] + ordered[mid]) / 2
    return ordered[mid]


def momentum_strength(volume: float, baseline: float | None) -> float:
    # A zero or missing median falls back to a divisor of 1. Ties round away
    # from zero on the exact binary value, matching JavaScript's toFixed(2).
    ratio = Decimal(volume / (baseline or 1))
    return float(ratio.quantize(_CENTS, rounding=ROUND_HALF_UP))


def _volume(row: StockRow) -> float:
    value = row.get("volume")
    if value is None:
        return 0.0
    volume = float(value)
    if not math.isfinite(volume):
        msg = f"Non-finite volume {value!r} cannot be scored"
        raise InternalError(msg)
    return volume


def score_rows(rows: Sequence[StockRow]) -> list[StockRow]:
    """Attach ``momentumStrength`` relative to the category median volume."""

    if not rows:
        return []
    baseline = median(_volume(row) for row in rows)
    return [
        {**row, MOMENTUM_FIELD: momentum_strength(_volume(row), baseline)}
        for row in rows
    ]


def apply_momentum(
    results: Mapping[str, Sequence[StockRow]],
    *,
    categories: Sequence[str] = SCORED_SCREENS,
) -> dict[str, list[StockRow]]:
    """Score the momentum categories and pass every other category through."""

    scored: dict[str, list[StockRow]] = {name: list(rows) for name, rows in results.items()}
    for name in categories:
        scored[name] = score_rows(scored.get(name) or [])
    return scored


__all__ = ["MOMENTUM_FIELD", "apply_momentum", "median", "momentum_strength", "score_rows"]
