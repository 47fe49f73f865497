import pandas as pd
import pytest

from warrant_engine.errors import RateProviderError
from warrant_engine.models import MarketParams
from warrant_engine.rates import (
    FrameRateProvider,
    RateProvider,
    RateQuote,
    StaticRateProvider,
    seed_market,
)


@pytest.fixture(scope="module")
def history():
    return pd.DataFrame(
        [
            {"benchmark": "10year", "country": "us", "date": "2026-02-11", "value": 4.21},
            {"benchmark": "10year", "country": "us", "date": "2026-02-13", "value": 4.18},
            {"benchmark": "10year", "country": "us", "date": "2026-02-12", "value": 4.25},
            {"benchmark": "10year", "country": "de", "date": "2026-02-13", "value": 2.71},
            {"benchmark": "2year", "country": "us", "date": "2026-02-13", "value": None},
        ]
    )


def test_frame_provider_returns_latest(history):
    provider = FrameRateProvider(history)
    quote = provider.fetch("10year", "us")
    assert quote == RateQuote(value=4.18, timestamp="2026-02-13")
    assert provider.fetch("10year", "de").value == 2.71


def test_frame_provider_missing_quote(history):
    provider = FrameRateProvider(history)
    with pytest.raises(RateProviderError):
        provider.fetch("2year", "us")
    with pytest.raises(LookupError):
        provider.fetch("30year", "it")


def test_frame_provider_rejects_bad_table():
    with pytest.raises(ValueError):
        FrameRateProvider(pd.DataFrame({"date": [], "value": []}))


def test_static_provider():
    provider = StaticRateProvider({("10year", "es"): RateQuote(3.2, "2026-01")})
    assert provider.fetch("10year", "es").value == 3.2
    with pytest.raises(RateProviderError):
        provider.fetch()


def test_providers_satisfy_protocol(history):
    assert isinstance(StaticRateProvider({}), RateProvider)
    assert isinstance(FrameRateProvider(history), RateProvider)


def test_seed_market_adds_credit_spread():
    market = MarketParams(current_rate=0.035, simulated_rate=0.045)
    seeded = seed_market(market, RateQuote(2.5, "2026-02-13"), credit_spread_bps=150.0)
    assert seeded.risk_free_rate == pytest.approx(0.025)
    assert seeded.current_rate == pytest.approx(0.04)
    assert seeded.simulated_rate == 0.045
    assert market.risk_free_rate is None, "Seeding must not mutate the original"
