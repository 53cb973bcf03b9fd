# src/goldwise/adapters/persistence/tracker_store.py
"""
Tracker Store - Repositories for Day Stats and Price History

Map the tracker's domain objects onto JsonFileStore keys:
- ``day_stats``: the running DayStats for today
- ``price_history``: the list of finalized HistoryEntry records

Unreadable or malformed data yields the empty default state.

Files that USE this module:
- goldwise.application.day_stats (DayStatsRepository)
- goldwise.application.history (HistoryRepository)
- goldwise.application.tracker (wiring)

Files that this module USES:
- goldwise.adapters.persistence.file_store (JsonFileStore)
- goldwise.domain.models (DayStats, HistoryEntry)
"""
from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from goldwise.adapters.persistence.file_store import JsonFileStore
from goldwise.domain.errors import PersistenceReadError
from goldwise.domain.models import DayStats, HistoryEntry

log = logging.getLogger(__name__)

DAY_STATS_KEY = "day_stats"
HISTORY_KEY = "price_history"


class DayStatsRepository:
    def __init__(self, store: JsonFileStore, key: str = DAY_STATS_KEY):
        self.store = store
        self.key = key

    def load(self) -> Optional[DayStats]:
        try:
            data = self.store.load(self.key)
        except PersistenceReadError as e:
            log.warning("Starting with fresh day stats: %s", e)
            return None
        if not isinstance(data, dict) or not data.get("day"):
            return None
        try:
            return DayStats.from_json(data)
        except (KeyError, TypeError, ValueError) as e:
            log.warning("Day stats schema mismatch, starting fresh: %s", e)
            return None

    def save(self, stats: DayStats) -> None:
        self.store.save(self.key, stats.to_json())


class HistoryRepository:
    def __init__(self, store: JsonFileStore, key: str = HISTORY_KEY):
        self.store = store
        self.key = key

    def load(self) -> List[HistoryEntry]:
        try:
            data = self.store.load(self.key)
        except PersistenceReadError as e:
            log.warning("Starting with empty price history: %s", e)
            return []
        if not isinstance(data, list):
            return []

        entries = []
        for item in data:
            try:
                entries.append(HistoryEntry.from_json(item))
            except (KeyError, TypeError, ValueError) as e:
                log.warning("Skipping malformed history entry %r: %s", item, e)
        return entries

    def save(self, entries: Iterable[HistoryEntry]) -> None:
        self.store.save(self.key, [e.to_json() for e in entries])
