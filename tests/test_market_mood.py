# tests/test_market_mood.py
"""
Market Mood Tests - Trend, Volatility and Composite Confidence
"""
import pytest

from goldwise.application.market_mood import (
    build_market_mood,
    classify_volatility,
    pct_change,
    trend_direction,
)

FLAT = [100.0] * 7
RISING = [100.0] * 6 + [100.4]
FALLING = [100.0] * 6 + [99.7]


class TestTrendDirection:
    def test_short_series_is_stable(self):
        assert trend_direction([1, 2, 3, 4, 5]) == "stable"

    def test_compares_with_sixth_from_last(self):
        assert trend_direction([100, 100, 100, 100, 100, 101]) == "up"
        assert trend_direction([101, 100, 100, 100, 100, 100]) == "down"
        assert trend_direction([100, 50, 200, 300, 400, 100]) == "stable"

    def test_trend_and_pct_use_different_references(self):
        values = [100, 200, 150, 150, 150, 150, 160]
        # values[-6] is 200, values[-7] is 100
        assert trend_direction(values) == "down"
        assert pct_change(values) == pytest.approx(60.0)


class TestPctChange:
    def test_needs_lookback_plus_one(self):
        assert pct_change([100.0] * 6) == 0.0

    def test_zero_reference(self):
        assert pct_change([0.0] + [1.0] * 6) == 0.0

    def test_percent(self):
        assert pct_change([100, 1, 1, 1, 1, 1, 102]) == pytest.approx(2.0)


class TestClassifyVolatility:
    @pytest.mark.parametrize("values, label, score", [
        (RISING, "HIGH", 90),
        (FALLING, "MEDIUM", 60),
        (FLAT, "LOW", 35),
    ])
    def test_tiers(self, values, label, score):
        vol = classify_volatility(values)
        assert (vol.label, vol.score) == (label, score)


class TestBuildMarketMood:
    def test_rising_with_agreeing_silver(self):
        mood = build_market_mood(RISING, [30.0] * 6 + [30.5])
        # 55 + 18 + 12 + floor(40 * 0.22)
        assert mood.confidence == 93
        assert mood.signal == "BUY"
        assert mood.gold_trend == "UP"
        assert mood.silver_trend == "UP"
        assert mood.volatility == "HIGH"

    def test_short_silver_series_ignored(self):
        mood = build_market_mood(RISING, [30.0] * 6)
        assert mood.confidence == 81

    def test_falling_with_diverging_silver(self):
        mood = build_market_mood(FALLING, [30.0] * 7)
        # 55 + 10 - 6 + floor(10 * 0.22)
        assert mood.confidence == 61
        assert mood.signal == "WAIT"
        assert mood.reason.startswith("Gold is falling")

    def test_flat_is_watch(self):
        mood = build_market_mood(FLAT, FLAT)
        # 55 - 5 + floor(-15 * 0.22)
        assert mood.confidence == 46
        assert mood.signal == "WATCH"
        assert mood.tip == "Tip: Jewellery final price = rate + making + GST."

    def test_rising_without_volatility_is_watch(self):
        gold = [100.0] * 6 + [100.01]
        mood = build_market_mood(gold, [])
        assert mood.gold_trend == "UP"
        assert mood.volatility == "LOW"
        assert mood.signal == "WATCH"

    def test_empty_series(self):
        mood = build_market_mood([], [])
        assert mood.signal == "WATCH"
        assert 25 <= mood.confidence <= 95
