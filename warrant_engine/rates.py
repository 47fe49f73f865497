"""
Rate providers: where today's benchmark yield comes from.

The engine never calls a provider. A caller fetches a quote and seeds
MarketParams with it before running a simulation. Quotes are in percent, as
published by the data sources.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Mapping, Protocol, Tuple, runtime_checkable

import pandas as pd

from .errors import RateProviderError
from .models import MarketParams

LOG = logging.getLogger("warrant_engine.rates")


@dataclass(frozen=True)
class RateQuote:
    value: float        # percent, e.g. 3.45
    timestamp: str


@runtime_checkable
class RateProvider(Protocol):
    def fetch(self, benchmark: str = "10year", country: str = "us") -> RateQuote:
        """Latest quote for a benchmark maturity in a country; raises RateProviderError."""
        ...


class StaticRateProvider:
    """Fixed quotes keyed by (benchmark, country)."""

    def __init__(self, quotes: Mapping[Tuple[str, str], RateQuote]):
        self._quotes = dict(quotes)

    def fetch(self, benchmark: str = "10year", country: str = "us") -> RateQuote:
        try:
            return self._quotes[(benchmark, country)]
        except KeyError:
            raise RateProviderError(f"no quote for {benchmark}/{country}") from None


class FrameRateProvider:
    """
    Quotes from a history table with columns: benchmark, country, date, value.
    Returns the most recent observation.
    """

    REQUIRED = ("benchmark", "country", "date", "value")

    def __init__(self, history: pd.DataFrame):
        missing = [c for c in self.REQUIRED if c not in history.columns]
        if missing:
            raise ValueError(f"rate history missing columns: {missing}")
        self.history = history.assign(date=pd.to_datetime(history["date"]))

    def fetch(self, benchmark: str = "10year", country: str = "us") -> RateQuote:
        h = self.history
        rows = h[(h["benchmark"] == benchmark) & (h["country"] == country)].dropna(subset=["value"])
        if rows.empty:
            raise RateProviderError(f"no quote for {benchmark}/{country}")

        latest = rows.sort_values("date").iloc[-1]
        LOG.debug(f"{benchmark}/{country}: {latest['value']} as of {latest['date']:%Y-%m-%d}")
        return RateQuote(value=float(latest["value"]), timestamp=latest["date"].strftime("%Y-%m-%d"))


def seed_market(market: MarketParams, quote: RateQuote, credit_spread_bps: float = 0.0) -> MarketParams:
    """
    New MarketParams seeded from a benchmark quote.

    The quote becomes the option discount rate; the bond yields it plus the
    credit spread.
    """
    risk_free = quote.value / 100.0
    return replace(
        market,
        risk_free_rate=risk_free,
        current_rate=risk_free + credit_spread_bps / 10000.0,
    )
