# tests/test_tracker.py
"""
Live Tracker Tests - Poll Tick Handling and Derived Signals
"""
from datetime import datetime
from unittest.mock import Mock

from goldwise.adapters.persistence.file_store import JsonFileStore
from goldwise.application.buy_window import BuyWindowCache
from goldwise.application.day_stats import DailyStatsAccumulator
from goldwise.application.history import HistoryStore
from goldwise.application.series import PriceSeries
from goldwise.application.tracker import LiveTracker, build_tracker
from goldwise.domain.models import NewsFeed, PriceSample

from conftest import make_quote

MORNING = datetime(2025, 1, 1, 9, 30, 15)


def _tracker(clock, capacity=120):
    repo = Mock()
    repo.load.return_value = None
    history = HistoryStore(capacity=7)
    accumulator = DailyStatsAccumulator(repo, history, today=lambda: "2025-01-01")
    tracker = LiveTracker(PriceSeries(capacity), accumulator, history)
    tracker.buy_window_cache = BuyWindowCache(tracker._compute_buy_window, recalc_seconds=1200, clock=clock)
    return tracker


class TestPriceSeries:
    def test_evicts_oldest(self):
        series = PriceSeries(capacity=3)
        for i in range(4):
            series.append(PriceSample(label=str(i), gold_per_gram=float(i), silver_per_gram=0.0))

        assert len(series) == 3
        assert series.labels() == ["1", "2", "3"]
        assert series.gold_values() == [1.0, 2.0, 3.0]
        assert series.latest.label == "3"


class TestLiveTracker:
    def test_record_quote(self, clock):
        tracker = _tracker(clock)
        sample = tracker.record_quote(make_quote(gold24=6543.217, silver=81.5), MORNING)

        assert sample == PriceSample(label="09:30:15", gold_per_gram=6543.22, silver_per_gram=81.5)
        assert tracker.accumulator.stats.count == 1
        assert tracker.accumulator.stats.low == 6543.22
        assert tracker.latest_quote.gold.inr_per_gram_24 == 6543.217

    def test_missing_silver_reuses_previous(self, clock):
        tracker = _tracker(clock)
        tracker.record_quote(make_quote(silver=81.5), MORNING)
        sample = tracker.record_quote(make_quote(silver=0.0), MORNING)
        assert sample.silver_per_gram == 81.5

    def test_missing_silver_first_tick(self, clock):
        tracker = _tracker(clock)
        assert tracker.record_quote(make_quote(silver=0.0), MORNING).silver_per_gram == 0.0

    def test_buy_window_lifecycle(self, clock):
        tracker = _tracker(clock)
        assert tracker.buy_window().signal == "LOADING"

        # The first sample replaces LOADING without waiting for the guard
        tracker.record_quote(make_quote(gold24=100.0), MORNING)
        assert tracker.buy_window().signal == "BUY_OK"

        # Guarded: new samples do not change the cached classification
        tracker.record_quote(make_quote(gold24=120.0), MORNING)
        assert tracker.buy_window().multi_high == 100.0

        tracker.record_quote(make_quote(gold24=110.0), MORNING)
        tracker.record_quote(make_quote(gold24=90.0), MORNING)
        window = tracker.buy_window(force=True)
        assert window.signal == "BUY_OK"
        assert window.multi_low == 90.0
        assert window.multi_high == 120.0

        tracker.record_quote(make_quote(gold24=115.0), MORNING)
        tracker.invalidate_buy_window()
        assert tracker.buy_window().signal == "WAIT"

    def test_loading_clears_once_prices_arrive(self, clock):
        tracker = _tracker(clock)
        assert tracker.buy_window().signal == "LOADING"

        tracker.record_quote(make_quote(gold24=6500.0), MORNING)
        clock.advance(600)
        window = tracker.buy_window()

        assert window.signal != "LOADING"
        assert window.multi_low == 6500.0

    def test_market_mood(self, clock):
        tracker = _tracker(clock)
        for price in [100.0] * 6 + [100.4]:
            tracker.record_quote(make_quote(gold24=price, silver=80.0), MORNING)
        mood = tracker.market_mood()
        assert mood.signal == "BUY"
        assert mood.silver_trend == "STABLE"

    def test_news_by_category(self, clock):
        tracker = _tracker(clock)
        feed = NewsFeed(category="india", updated_at=MORNING, articles=())
        tracker.record_news(feed)

        assert tracker.latest_news() is feed
        assert tracker.latest_news("global") is None


class TestBuildTracker:
    def test_state_survives_restart(self, tmp_path):
        store = JsonFileStore(tmp_path)
        tracker = build_tracker(store)
        today = datetime.now()
        for price in (100.0, 90.0, 110.0):
            tracker.record_quote(make_quote(gold24=price), today)

        restored = build_tracker(JsonFileStore(tmp_path))
        assert restored.accumulator.stats.count == 3
        assert restored.accumulator.stats.low == 90.0
        assert len(restored.series) == 0
