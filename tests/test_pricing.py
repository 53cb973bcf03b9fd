# tests/test_pricing.py
"""
Pricing Tests - Quote Computation and Rounding
"""
from datetime import datetime, timezone

import pytest

from goldwise.application.pricing import GRAMS_PER_TROY_OUNCE, compute_quote, round2
from goldwise.domain.models import SpotPrices

NOW = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


class TestRound2:
    @pytest.mark.parametrize("value, expected", [
        (2.675, 2.68),
        (1.005, 1.01),
        (-1.005, -1.01),
        (10.0, 10.0),
        (0.004, 0.0),
    ])
    def test_half_away_from_zero(self, value, expected):
        assert round2(value) == expected


class TestComputeQuote:
    def test_one_ounce_at_unit_rate(self):
        # One troy ounce priced so that a gram costs exactly 100 INR
        spot = SpotPrices(gold_usd_oz=GRAMS_PER_TROY_OUNCE, silver_usd_oz=GRAMS_PER_TROY_OUNCE, usd_to_inr=100.0)
        quote = compute_quote(spot, 0.0, NOW)

        assert quote.gold.inr_per_gram_24 == 100.0
        assert quote.gold.inr_per_gram_22 == 91.67
        assert quote.gold.inr_per_gram_18 == 75.0
        assert quote.silver.inr_per_gram == 100.0
        assert quote.gold.usd_per_ounce_24 == 31.1
        assert quote.fx.usd_to_inr == 100.0

    def test_premium_applies_to_gold_only(self):
        spot = SpotPrices(gold_usd_oz=GRAMS_PER_TROY_OUNCE, silver_usd_oz=GRAMS_PER_TROY_OUNCE, usd_to_inr=100.0)
        quote = compute_quote(spot, 5.0, NOW)

        assert quote.gold.inr_per_gram_24 == 105.0
        assert quote.gold.inr_per_gram_22 == 96.25
        assert quote.gold.inr_per_gram_18 == 78.75
        assert quote.silver.inr_per_gram == 100.0
        assert quote.premium_pct == 5.0

    def test_karats_derive_from_unrounded_24k(self):
        spot = SpotPrices(gold_usd_oz=2412.37, silver_usd_oz=28.91, usd_to_inr=83.47)
        quote = compute_quote(spot, 4.8, NOW)

        gram24 = 2412.37 * 83.47 / GRAMS_PER_TROY_OUNCE * (1 + 4.8 / 100)
        assert quote.gold.inr_per_gram_24 == round2(gram24)
        assert quote.gold.inr_per_gram_22 == round2(gram24 * 22 / 24)
        assert quote.gold.inr_per_gram_18 == round2(gram24 * 18 / 24)

    @pytest.mark.parametrize("premium_pct", [0.0, 0.01, 3.33, 4.8, 7.77, 12.0])
    @pytest.mark.parametrize("gold_usd_oz, usd_to_inr", [(1850.5, 82.1), (2412.37, 83.47), (3105.99, 86.02)])
    def test_karat_ratios_hold_across_premiums(self, premium_pct, gold_usd_oz, usd_to_inr):
        spot = SpotPrices(gold_usd_oz=gold_usd_oz, silver_usd_oz=30.0, usd_to_inr=usd_to_inr)
        gold = compute_quote(spot, premium_pct, NOW).gold

        assert abs(gold.inr_per_gram_22 - gold.inr_per_gram_24 * 22 / 24) <= 0.01
        assert abs(gold.inr_per_gram_18 - gold.inr_per_gram_24 * 18 / 24) <= 0.01

    def test_deterministic(self):
        spot = SpotPrices(gold_usd_oz=2412.37, silver_usd_oz=28.91, usd_to_inr=83.47)
        assert compute_quote(spot, 4.8, NOW) == compute_quote(spot, 4.8, NOW)

    def test_wire_format(self):
        spot = SpotPrices(gold_usd_oz=2000.0, silver_usd_oz=25.0, usd_to_inr=83.0)
        data = compute_quote(spot, 4.8, NOW).to_json()

        assert data["updatedAt"] == "2025-03-01T12:00:00.000Z"
        assert data["premiumPct"] == 4.8
        assert set(data["gold"]) == {"usdPerOunce24", "inrPerGram24", "inrPerGram22", "inrPerGram18"}
        assert set(data["silver"]) == {"usdPerOunce", "inrPerGram"}
        assert data["fx"] == {"usdToInr": 83.0}
