# src/goldwise/application/tracker.py
"""
Live Tracker - Client-Side Session State

One LiveTracker per client session. Each poll tick records the quote:
1. Gold value = 24K INR/gram; silver falls back to the previous sample when
   the quote reports 0
2. Today's statistics are updated (rolling finished days into history)
3. The sample is appended to the bounded series

The buy window and market mood are derived from that state on demand.
The latest news feed per category is kept for display.

Files that USE this module:
- goldwise.adapters.telegram.jobs (record_quote, record_news)
- goldwise.adapters.telegram.handlers (buy_window, market_mood)
- goldwise.app (build_tracker)
- tests.test_tracker

Files that this module USES:
- goldwise.application.series / day_stats / history / buy_window / market_mood
- goldwise.adapters.persistence (repositories)
"""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Dict, Optional

from goldwise.adapters.persistence import DayStatsRepository, HistoryRepository, JsonFileStore
from goldwise.application.buy_window import BuyWindowCache, classify_buy_window
from goldwise.application.day_stats import DailyStatsAccumulator
from goldwise.application.history import HistoryStore
from goldwise.application.market_mood import build_market_mood
from goldwise.application.pricing import round2
from goldwise.application.series import PriceSeries
from goldwise.config import settings
from goldwise.domain.models import BuyWindow, MarketMood, NewsFeed, PriceSample, Quote

log = logging.getLogger(__name__)


class LiveTracker:
    def __init__(
        self,
        series: PriceSeries,
        accumulator: DailyStatsAccumulator,
        history: HistoryStore,
        buy_window_cache: Optional[BuyWindowCache] = None,
        active_category: Optional[str] = None,
    ):
        self.series = series
        self.accumulator = accumulator
        self.history = history
        self.buy_window_cache = buy_window_cache or BuyWindowCache(self._compute_buy_window)
        self.latest_quote: Optional[Quote] = None
        self.active_category = active_category or settings.news_default_category
        self.news: Dict[str, NewsFeed] = {}

    def _compute_buy_window(self) -> BuyWindow:
        latest = self.series.latest
        return classify_buy_window(
            current=latest.gold_per_gram if latest else None,
            history=self.history.read_all(),
            today=self.accumulator.stats,
            capacity=self.history.capacity,
        )

    def record_quote(self, quote: Quote, moment: Optional[datetime] = None) -> PriceSample:
        """Apply one poll tick and return the sample appended to the series."""
        moment = moment or datetime.now()
        gold = round2(quote.gold.inr_per_gram_24)
        silver = round2(quote.silver.inr_per_gram)
        if not silver:
            latest = self.series.latest
            silver = latest.silver_per_gram if latest else 0.0

        self.accumulator.update(gold, moment)
        sample = PriceSample(label=moment.strftime("%H:%M:%S"), gold_per_gram=gold, silver_per_gram=silver)
        self.series.append(sample)
        self.latest_quote = quote
        log.debug("Tick %s gold=%s silver=%s (%d samples)", sample.label, gold, silver, len(self.series))
        return sample

    def buy_window(self, force: bool = False) -> BuyWindow:
        return self.buy_window_cache.get(force=force)

    def invalidate_buy_window(self) -> None:
        self.buy_window_cache.invalidate()

    def market_mood(self) -> MarketMood:
        return build_market_mood(self.series.gold_values(), self.series.silver_values())

    def record_news(self, feed: NewsFeed) -> None:
        self.news[feed.category] = feed

    def latest_news(self, category: Optional[str] = None) -> Optional[NewsFeed]:
        return self.news.get(category or self.active_category)


def build_tracker(store: Optional[JsonFileStore] = None) -> LiveTracker:
    """Wire a tracker whose day stats and history persist in ``store``."""
    store = store or JsonFileStore()
    history = HistoryStore(HistoryRepository(store))
    accumulator = DailyStatsAccumulator(DayStatsRepository(store), history)
    log.info("Tracker restored: day=%s samples=%d, %d history days",
             accumulator.stats.day, accumulator.stats.count, len(history))
    return LiveTracker(PriceSeries(), accumulator, history)
