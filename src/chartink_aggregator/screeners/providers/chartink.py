"""Chartink-backed screen runner."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator, Iterable
from contextlib import asynccontextmanager
from typing import Any

import httpx
from bs4 import BeautifulSoup

from chartink_aggregator.config import AppSettings

from ..exceptions import SessionError, UpstreamError
from ..models import ScreenDefinition, SessionContext, StockRow

logger = logging.getLogger(__name__)


class ChartinkClient:
    """Adapter that scrapes a Chartink session and runs screen queries with it."""

    CSRF_META_NAME = "csrf-token"
    TOKEN_HEADER = "x-csrf-token"
    FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

    def __init__(
        self,
        *,
        settings: AppSettings | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client

    @property
    def home_url(self) -> str:
        return self._settings.home_url

    @property
    def process_url(self) -> str:
        return self._settings.process_url

    async def bootstrap_session(self, client: httpx.AsyncClient) -> SessionContext:
        """Fetch the landing page and extract the CSRF token and cookies."""

        try:
            response = await client.get(
                self.home_url,
                headers={"User-Agent": self._settings.user_agent},
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            msg = f"Chartink landing page failed with status {exc.response.status_code}"
            raise SessionError(msg) from exc
        except httpx.HTTPError as exc:
            msg = f"Chartink landing page request failed: {exc}"
            raise SessionError(msg) from exc

        token = self._extract_token(response.text)
        if not token:
            raise SessionError("CSRF token not found!")

        cookies = response.headers.get_list("set-cookie")
        if not cookies:
            raise SessionError("Session cookies not found!")

        logger.debug("Bootstrapped Chartink session with %d cookies", len(cookies))
        return SessionContext(token=token, cookies="; ".join(cookies))

    async def run_screen(
        self,
        client: httpx.AsyncClient,
        session: SessionContext,
        definition: ScreenDefinition,
    ) -> list[StockRow]:
        """POST one screen clause and return its rows in upstream order."""

        try:
            response = await client.post(
                self.process_url,
                data=definition.form_payload(),
                headers=self._query_headers(session),
            )
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as exc:
            msg = (
                f"Chartink screen '{definition.name}' failed with status "
                f"{exc.response.status_code}"
            )
            raise UpstreamError(msg) from exc
        except httpx.HTTPError as exc:
            msg = f"Chartink screen '{definition.name}' request failed: {exc}"
            raise UpstreamError(msg) from exc
        except ValueError as exc:
            msg = f"Chartink screen '{definition.name}' returned invalid JSON: {exc}"
            raise UpstreamError(msg) from exc

        return self._extract_rows(definition.name, payload)

    async def run_screens(
        self,
        session: SessionContext,
        definitions: Iterable[ScreenDefinition],
        client: httpx.AsyncClient,
    ) -> dict[str, list[StockRow]]:
        """Run every screen concurrently; any single failure fails the batch."""

        ordered = list(definitions)
        tasks = [
            asyncio.create_task(self.run_screen(client, session, definition))
            for definition in ordered
        ]
        try:
            responses = await asyncio.gather(*tasks)
        except Exception:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
        return {definition.name: rows for definition, rows in zip(ordered, responses, strict=True)}

    def _query_headers(self, session: SessionContext) -> dict[str, str]:
        return {
            self.TOKEN_HEADER: session.token,
            "User-Agent": self._settings.user_agent,
            "Referer": self.home_url,
            "Content-Type": self.FORM_CONTENT_TYPE,
            "Cookie": session.cookies,
        }

    def _extract_token(self, markup: str) -> str | None:
        soup = BeautifulSoup(markup, "html.parser")
        meta = soup.find("meta", attrs={"name": self.CSRF_META_NAME})
        if meta is None:
            return None
        content = meta.get("content")
        if isinstance(content, list):
            content = " ".join(content)
        return content or None

    def _extract_rows(self, name: str, payload: Any) -> list[StockRow]:
        if not isinstance(payload, dict):
            msg = f"Chartink screen '{name}' returned an unexpected payload"
            raise UpstreamError(msg)
        data = payload.get("data")
        if data is None:
            return []
        if not isinstance(data, list):
            msg = f"Chartink screen '{name}' returned non-list data"
            raise UpstreamError(msg)
        if not all(isinstance(row, dict) for row in data):
            msg = f"Chartink screen '{name}' returned non-object rows"
            raise UpstreamError(msg)
        return [dict(row) for row in data]

    @asynccontextmanager
    async def client_scope(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._client is not None:
            yield self._client
            return
        async with httpx.AsyncClient(timeout=self._settings.timeout) as client:
            yield client


__all__ = ["ChartinkClient"]
