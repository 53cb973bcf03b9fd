# src/goldwise/application/buy_window.py
"""
Buy Window - Position of the Current Price in the Multi-Day Range

``classify_buy_window`` combines the stored history with today's partial
statistics, locates the latest gold price inside the combined low/high
range and maps the position to a recommendation:

    pos <= 0.35  -> BUY OK (low risk)
    pos >= 0.70  -> WAIT   (high risk)
    otherwise    -> WATCH  (medium risk)

``BuyWindowCache`` recomputes at most once per guard interval (20 minutes
by default) unless invalidated or forced.

Files that USE this module:
- goldwise.application.tracker
- goldwise.adapters.formatting.formatter (renders BuyWindow)
- tests.test_buy_window

Files that this module USES:
- goldwise.domain.models (BuyWindow, DayStats, HistoryEntry)
- goldwise.shared.money (money_inr)
"""
from __future__ import annotations

import logging
import math
import time
from typing import Callable, List, Optional, Sequence

from goldwise.config import settings
from goldwise.domain.models import BuyWindow, DayStats, HistoryEntry
from goldwise.shared.money import money_inr

log = logging.getLogger(__name__)

BUY_OK_MAX_POS = 0.35
WAIT_MIN_POS = 0.70


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _loading(title: str, description: str, action: str, capacity: int) -> BuyWindow:
    return BuyWindow(
        signal="LOADING",
        badge="⏳ LOADING",
        title=title,
        description=description,
        action=action,
        time_label=f"Last {capacity} days",
        risk="Low",
        pos=0.5,
    )


def combine_days(history: Sequence[HistoryEntry], today: Optional[DayStats]) -> List[HistoryEntry]:
    """History plus today's partial stats when today has at least one finite sample."""
    combined = list(history)
    if (
        today is not None
        and today.count > 0
        and today.low is not None
        and today.high is not None
        and math.isfinite(today.low)
        and math.isfinite(today.high)
    ):
        combined.append(HistoryEntry(day=today.day, low=today.low, high=today.high, avg=today.total / today.count))
    return combined


def classify_buy_window(
    current: Optional[float],
    history: Sequence[HistoryEntry],
    today: Optional[DayStats],
    capacity: Optional[int] = None,
    min_range: Optional[float] = None,
) -> BuyWindow:
    """
    Classify ``current`` against the combined multi-day range.

    Args:
        current: Latest gold price per gram, None before the first sample
        history: Finalized past days
        today: Running statistics for today
        capacity: History window size, used for the time label
        min_range: Floor for the range denominator

    Returns:
        BuyWindow; a LOADING state when there is nothing to compare against
    """
    capacity = capacity or settings.history_days
    min_range = settings.buy_window_min_range if min_range is None else min_range

    if current is None:
        return _loading(
            "Collecting price data…",
            "Wait a minute so the app can learn movement.",
            "Keep tracking for 1–2 minutes.",
            capacity,
        )

    combined = combine_days(history, today)
    if not combined:
        return _loading(
            "Collecting multi-day range…",
            "No history yet. Keep app open for some time.",
            "Come back after some minutes.",
            capacity,
        )

    multi_low = min(d.low for d in combined)
    multi_high = max(d.high for d in combined)
    multi_avg = sum(d.avg for d in combined) / len(combined)

    price_range = max(multi_high - multi_low, min_range)
    pos = clamp((current - multi_low) / price_range, 0.0, 1.0)

    if pos <= BUY_OK_MAX_POS:
        signal, badge, risk = "BUY_OK", "🟢 BUY OK", "Low"
        title = "Good buy window (near multi-day low)"
        description = "Gold is closer to the lower zone of recent days."
        action = "Good for planned purchase. Consider buying partial quantity."
    elif pos >= WAIT_MIN_POS:
        signal, badge, risk = "WAIT", "🔴 WAIT", "High"
        title = "Avoid buying (near multi-day high)"
        description = "Gold is near higher zone compared to recent days."
        action = "Wait for pullback. Set a price alert."
    else:
        signal, badge, risk = "WATCH", "🟡 WATCH", "Medium"
        title = "Average zone - track for dip"
        description = "Gold is around the multi-day middle zone."
        action = "If not urgent, wait for a better dip."

    days = min(capacity, len(combined))
    return BuyWindow(
        signal=signal,
        badge=badge,
        title=title,
        description=(
            f"{description}\n"
            f"Multi-Low: {money_inr(multi_low)} • Multi-Avg: {money_inr(multi_avg)} "
            f"• Multi-High: {money_inr(multi_high)}"
        ),
        action=action,
        time_label=f"Last {days} days",
        risk=risk,
        pos=pos,
        multi_low=multi_low,
        multi_avg=multi_avg,
        multi_high=multi_high,
        days=days,
    )


class BuyWindowCache:
    """Time-guarded holder for the last BuyWindow."""

    def __init__(
        self,
        compute: Callable[[], BuyWindow],
        recalc_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._compute = compute
        self.recalc_seconds = settings.buy_window_recalc_seconds if recalc_seconds is None else recalc_seconds
        self._clock = clock
        self._value: Optional[BuyWindow] = None
        self._calculated_at: Optional[float] = None

    def invalidate(self) -> None:
        self._calculated_at = None

    def get(self, force: bool = False) -> BuyWindow:
        """
        Return the cached classification.

        Recomputes when forced, invalidated, older than the guard, or when the
        cached value is still LOADING.
        """
        now = self._clock()
        stale = (
            self._value is None
            or self._calculated_at is None
            or self._value.signal == "LOADING"
            or now - self._calculated_at > self.recalc_seconds
        )
        if force or stale:
            self._value = self._compute()
            self._calculated_at = now
            log.debug("Buy window recalculated: %s (pos=%.3f)", self._value.signal, self._value.pos)
        return self._value
