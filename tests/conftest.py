# tests/conftest.py
"""
Shared test helpers: a controllable clock and quote/spot fakes.
"""
from datetime import datetime, timezone

import pytest

from goldwise.domain.models import FxRates, GoldPrices, Quote, SilverPrices


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeSpotProvider:
    """Spot provider returning fixed prices and counting calls."""

    def __init__(self, prices=None, error=None):
        self.prices = prices or {"XAU": 2000.0, "XAG": 25.0}
        self.error = error
        self.calls = []

    async def usd_per_ounce(self, symbol: str) -> float:
        self.calls.append(symbol)
        if self.error is not None:
            raise self.error
        return self.prices[symbol]


def make_quote(gold24: float = 6500.0, silver: float = 80.0, premium_pct: float = 4.8) -> Quote:
    return Quote(
        updated_at=datetime(2025, 1, 15, 10, 30, tzinfo=timezone.utc),
        premium_pct=premium_pct,
        gold=GoldPrices(
            usd_per_ounce_24=2400.0,
            inr_per_gram_24=gold24,
            inr_per_gram_22=round(gold24 * 22 / 24, 2),
            inr_per_gram_18=round(gold24 * 18 / 24, 2),
        ),
        silver=SilverPrices(usd_per_ounce=29.0, inr_per_gram=silver),
        fx=FxRates(usd_to_inr=83.25),
    )


@pytest.fixture
def clock():
    return FakeClock()
