# src/goldwise/application/series.py
"""
Price Series - Bounded Client Time-Series Buffer

Holds the most recent poll ticks (label, gold/g, silver/g). Appending past
capacity evicts the oldest sample.

Files that USE this module:
- goldwise.application.tracker
- goldwise.application.buy_window (latest gold price)
- goldwise.application.market_mood (gold/silver sequences)
"""
from __future__ import annotations

from collections import deque
from typing import Deque, Iterator, List, Optional

from goldwise.config import settings
from goldwise.domain.models import PriceSample


class PriceSeries:
    """FIFO buffer of PriceSample, capped at ``capacity`` entries."""

    def __init__(self, capacity: Optional[int] = None):
        self.capacity = capacity or settings.series_capacity
        self._samples: Deque[PriceSample] = deque(maxlen=self.capacity)

    def append(self, sample: PriceSample) -> None:
        self._samples.append(sample)

    def __len__(self) -> int:
        return len(self._samples)

    def __iter__(self) -> Iterator[PriceSample]:
        return iter(self._samples)

    @property
    def latest(self) -> Optional[PriceSample]:
        return self._samples[-1] if self._samples else None

    def gold_values(self) -> List[float]:
        return [s.gold_per_gram for s in self._samples]

    def silver_values(self) -> List[float]:
        return [s.silver_per_gram for s in self._samples]

    def labels(self) -> List[str]:
        return [s.label for s in self._samples]
