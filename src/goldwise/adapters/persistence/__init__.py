# src/goldwise/adapters/persistence/__init__.py
"""
Persistence Adapters - Data Storage

JSON file storage for the tracker's day statistics and price history.
"""

from goldwise.adapters.persistence.file_store import JsonFileStore
from goldwise.adapters.persistence.tracker_store import DayStatsRepository, HistoryRepository

__all__ = [
    "JsonFileStore",
    "DayStatsRepository",
    "HistoryRepository",
]
