# src/goldwise/application/day_stats.py
"""
Daily Statistics - Running Low/High/Average for the Current Day

Pure transitions (``day_key``, ``observe``, ``finalize``) plus
``DailyStatsAccumulator``, which applies them to each sample, hands a
finished day to the history store on rollover and persists the running
state through a repository.

Persistence cadence: every Nth update (3 by default) and always on a
day rollover. Non-finite samples are ignored.

Files that USE this module:
- goldwise.application.tracker (one update per poll tick)
- tests.test_day_stats

Files that this module USES:
- goldwise.application.history (HistoryStore.submit on rollover)
- goldwise.adapters.persistence.tracker_store (DayStatsRepository)
- goldwise.domain.models (DayStats, HistoryEntry)
"""
from __future__ import annotations

import logging
import math
from dataclasses import replace
from datetime import datetime
from typing import TYPE_CHECKING, Callable, Optional

from goldwise.config import settings
from goldwise.domain.models import DayStats, HistoryEntry
from goldwise.shared.validators import is_finite_number

if TYPE_CHECKING:
    from goldwise.adapters.persistence.tracker_store import DayStatsRepository
    from goldwise.application.history import HistoryStore

log = logging.getLogger(__name__)


def day_key(moment: Optional[datetime] = None) -> str:
    """Local calendar date as ``YYYY-MM-DD``."""
    if moment is None:
        moment = datetime.now()
    elif moment.tzinfo is not None:
        moment = moment.astimezone()
    return moment.strftime("%Y-%m-%d")


def observe(stats: DayStats, value: float) -> DayStats:
    """Fold one sample into the day's running statistics."""
    return replace(
        stats,
        low=value if stats.low is None or value < stats.low else stats.low,
        high=value if stats.high is None or value > stats.high else stats.high,
        total=stats.total + value,
        count=stats.count + 1,
    )


def finalize(stats: DayStats) -> Optional[HistoryEntry]:
    """
    Turn a finished day into a history entry.

    Returns None when the day has no samples or non-finite bounds.
    """
    if not stats.day or not stats.count:
        return None
    if stats.low is None or stats.high is None:
        return None
    if not all(math.isfinite(v) for v in (stats.low, stats.high, stats.total)):
        return None
    return HistoryEntry(day=stats.day, low=stats.low, high=stats.high, avg=stats.total / stats.count)


class DailyStatsAccumulator:
    """Maintains today's DayStats and rolls finished days into history."""

    def __init__(
        self,
        repository: "DayStatsRepository",
        history: "HistoryStore",
        save_every: Optional[int] = None,
        today: Callable[[], str] = day_key,
    ):
        self.repository = repository
        self.history = history
        self.save_every = save_every or settings.day_stats_save_every
        self._stats = repository.load() or DayStats.fresh(today())

    @property
    def stats(self) -> DayStats:
        return self._stats

    def update(self, value: float, moment: Optional[datetime] = None) -> DayStats:
        """
        Apply one sample taken at ``moment`` (now by default).

        Returns:
            The updated DayStats (unchanged for non-finite input)
        """
        if not is_finite_number(value):
            log.debug("Ignoring non-finite sample %r", value)
            return self._stats

        key = day_key(moment)
        stats = self._stats
        rolled_over = stats.day != key
        if rolled_over:
            entry = finalize(stats)
            if entry is not None:
                self.history.submit(entry)
                log.info("Day %s closed: low=%s high=%s avg=%.2f", entry.day, entry.low, entry.high, entry.avg)
            stats = DayStats.fresh(key)

        stats = observe(stats, float(value))
        self._stats = stats

        if rolled_over or stats.count % self.save_every == 0:
            self.repository.save(stats)
        return stats
