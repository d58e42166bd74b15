"""
FastAPI host for the screener aggregator.

Exposes ``GET /stocks``, which re-authenticates against Chartink, runs the
full screen batch and returns the flattened rows. Failures of any kind are
reported as HTTP 500 with an ``{"error": <message>}`` body.

Run with: uvicorn chartink_aggregator.api.app:create_app --factory --port 5000
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from chartink_aggregator import __version__
from chartink_aggregator.config import AppSettings
from chartink_aggregator.logging import configure_logging
from chartink_aggregator.screeners import ChartinkClient, ScreenerAggregator

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "Failed to fetch stock data"

AggregatorFactory = Callable[[], ScreenerAggregator]


def _default_factory(settings: AppSettings) -> AggregatorFactory:
    def _build() -> ScreenerAggregator:
        return ScreenerAggregator(ChartinkClient(settings=settings))

    return _build


def create_app(
    aggregator_factory: AggregatorFactory | None = None,
    *,
    settings: AppSettings | None = None,
) -> FastAPI:
    """Build the FastAPI application; a fresh aggregator is made per request."""

    resolved = settings or AppSettings.from_env()
    configure_logging(resolved.log_level)
    factory = aggregator_factory or _default_factory(resolved)

    app = FastAPI(title="Chartink Screener Aggregator", version=__version__)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/stocks")
    async def get_stocks() -> JSONResponse:
        try:
            rows = await factory().fetch_aggregated_screens()
        except Exception as exc:
            message = str(exc) or DEFAULT_ERROR_MESSAGE
            logger.error("Error: %s", message)
            return JSONResponse(status_code=500, content={"error": message})
        return JSONResponse(content=rows)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


__all__ = ["DEFAULT_ERROR_MESSAGE", "create_app"]
