from __future__ import annotations

from importlib import import_module

import pytest
from fastapi.testclient import TestClient

from chartink_aggregator.api import create_app
from chartink_aggregator.config import AppSettings
from chartink_aggregator.screeners import SessionError, UpstreamError

api_module = import_module("chartink_aggregator.api.app")


class StubAggregator:
    def __init__(self, rows: list[dict] | None = None, error: Exception | None = None) -> None:
        self._rows = rows or []
        self._error = error

    async def fetch_aggregated_screens(self) -> list[dict]:
        if self._error is not None:
            raise self._error
        return self._rows


def _client(aggregator: StubAggregator) -> TestClient:
    app = create_app(lambda: aggregator, settings=AppSettings())
    return TestClient(app)


def test_stocks_returns_flattened_rows() -> None:
    rows = [
        {"nsecode": "AAA", "volume": 100, "side": "buy", "momentumStrength": 1.0},
        {"nsecode": "BBB", "volume": 5, "side": "topGainers"},
    ]
    response = _client(StubAggregator(rows=rows)).get("/stocks")

    assert response.status_code == 200
    assert response.json() == rows


def test_stocks_missing_token_is_500() -> None:
    client = _client(StubAggregator(error=SessionError("CSRF token not found!")))

    response = client.get("/stocks")

    assert response.status_code == 500
    assert response.json() == {"error": "CSRF token not found!"}
    assert response.content == b'{"error":"CSRF token not found!"}'


def test_stocks_upstream_failure_is_500() -> None:
    client = _client(StubAggregator(error=UpstreamError("Chartink screen 'buy' failed")))

    response = client.get("/stocks")

    assert response.status_code == 500
    assert response.json() == {"error": "Chartink screen 'buy' failed"}


def test_stocks_empty_error_message_uses_default() -> None:
    response = _client(StubAggregator(error=RuntimeError())).get("/stocks")

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch stock data"}


def test_stocks_allows_cross_origin_requests() -> None:
    response = _client(StubAggregator()).get(
        "/stocks", headers={"Origin": "http://example.com"}
    )

    assert response.headers["access-control-allow-origin"] == "*"


def test_health() -> None:
    response = _client(StubAggregator()).get("/health")
    assert response.json() == {"status": "ok"}


def test_each_request_builds_a_fresh_aggregator() -> None:
    built: list[StubAggregator] = []

    def _factory() -> StubAggregator:
        aggregator = StubAggregator()
        built.append(aggregator)
        return aggregator

    client = TestClient(create_app(_factory, settings=AppSettings()))
    client.get("/stocks")
    client.get("/stocks")

    assert len(built) == 2
    assert built[0] is not built[1]


def test_create_app_configures_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    levels: list[str] = []
    monkeypatch.setattr(api_module, "configure_logging", levels.append)

    create_app(lambda: StubAggregator(), settings=AppSettings(log_level="DEBUG"))

    assert levels == ["DEBUG"]
