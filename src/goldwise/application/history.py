# src/goldwise/application/history.py
"""
History Store - Bounded Multi-Day Window of Finalized Days

Keeps at most ``capacity`` (7 by default) HistoryEntry records, one per
day, ordered ascending by day key. Every submit persists the window.

Files that USE this module:
- goldwise.application.day_stats (submit on rollover)
- goldwise.application.tracker (buy-window input)
- tests.test_history

Files that this module USES:
- goldwise.adapters.persistence.tracker_store (HistoryRepository)
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List, Optional

from goldwise.config import settings
from goldwise.domain.models import HistoryEntry

if TYPE_CHECKING:
    from goldwise.adapters.persistence.tracker_store import HistoryRepository


def merge_history(entries: Iterable[HistoryEntry], entry: HistoryEntry, capacity: int) -> List[HistoryEntry]:
    """Replace any entry for the same day, sort by day and keep the newest ``capacity``."""
    merged = [e for e in entries if e.day != entry.day]
    merged.append(entry)
    merged.sort(key=lambda e: e.day)
    return merged[-capacity:]


class HistoryStore:
    def __init__(self, repository: Optional["HistoryRepository"] = None, capacity: Optional[int] = None):
        self.capacity = capacity or settings.history_days
        self.repository = repository
        loaded = repository.load() if repository is not None else []
        self._entries: List[HistoryEntry] = sorted(loaded, key=lambda e: e.day)[-self.capacity:]

    def submit(self, entry: HistoryEntry) -> None:
        self._entries = merge_history(self._entries, entry, self.capacity)
        if self.repository is not None:
            self.repository.save(self._entries)

    def read_all(self) -> List[HistoryEntry]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
