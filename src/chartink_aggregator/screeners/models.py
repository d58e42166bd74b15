"""Value objects exchanged between the Chartink client and the aggregator."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from chartink_aggregator.domain import DomainModel

StockRow = dict[str, Any]
"""Opaque upstream row; only ``volume`` is ever read."""


class ScreenDefinition(DomainModel):
    """A named screen query sent verbatim to the screener endpoint."""

    name: str = Field(min_length=1)
    clause: str = Field(min_length=1)

    def form_payload(self) -> dict[str, str]:
        return {"scan_clause": self.clause}


class SessionContext(DomainModel):
    """Per-aggregation credentials scraped from the landing page."""

    token: str = Field(min_length=1)
    cookies: str = Field(min_length=1)


__all__ = ["ScreenDefinition", "SessionContext", "StockRow"]
