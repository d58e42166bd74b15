"""Aggregation facade: bootstrap, fan out, tag, score and flatten."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence

import httpx

from .catalog import SCREEN_DEFINITIONS, side_label
from .exceptions import AggregatorError, InternalError
from .models import ScreenDefinition, StockRow
from .providers import ChartinkClient
from .scoring import apply_momentum


def tag_rows(name: str, rows: Iterable[StockRow]) -> list[StockRow]:
    """Copy ``rows`` with the display label of screen ``name`` attached."""

    label = side_label(name)
    return [{**row, "side": label} for row in rows]


def flatten(
    results: Mapping[str, Sequence[StockRow]],
    order: Iterable[str] = SCREEN_DEFINITIONS,
) -> list[StockRow]:
    """Concatenate categories in catalogue order, then any extra categories."""

    names = list(order)
    names.extend(name for name in results if name not in names)
    flattened: list[StockRow] = []
    for name in names:
        flattened.extend(results.get(name, ()))
    return flattened


class ScreenerAggregator:
    """Runs the full screen batch against Chartink and merges the output."""

    def __init__(
        self,
        client: ChartinkClient | None = None,
        *,
        definitions: Mapping[str, ScreenDefinition] = SCREEN_DEFINITIONS,
        logger: logging.Logger | None = None,
    ) -> None:
        self._client = client or ChartinkClient()
        self._definitions = definitions
        self._logger = logger or logging.getLogger(__name__)

    async def fetch_aggregated_screens(self) -> list[StockRow]:
        """Return every screen's rows, tagged and scored, as one flat list."""

        try:
            async with self._client.client_scope() as http:
                return await self._aggregate(http)
        except AggregatorError:
            raise
        except Exception as exc:
            msg = f"Failed to aggregate screener results: {exc}"
            raise InternalError(msg) from exc

    async def _aggregate(self, http: httpx.AsyncClient) -> list[StockRow]:
        session = await self._client.bootstrap_session(http)
        self._logger.info("Chartink session ready; running %d screens", len(self._definitions))

        raw = await self._client.run_screens(session, self._definitions.values(), http)

        tagged = {name: tag_rows(name, rows) for name, rows in raw.items()}
        scored = apply_momentum(tagged)
        rows = flatten(scored, self._definitions)

        self._logger.info(
            "Aggregated %d rows across %d screens", len(rows), len(scored)
        )
        return rows


__all__ = ["ScreenerAggregator", "flatten", "tag_rows"]
