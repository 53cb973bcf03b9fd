# src/goldwise/application/calibration.py
"""
Calibration - Runtime Retail Premium

Holds the process-wide retail premium percentage. Updates are validated
before any state changes and notify subscribers (the quote cache) so the
next read recomputes with the new premium.

Files that USE this module:
- goldwise.application.quote_service (reads premium, subscribes for invalidation)
- goldwise.adapters.web.api (POST /api/calibrate)
- tests.test_calibration

Files that this module USES:
- goldwise.shared.validators (coerce_finite_number)
- goldwise.domain.errors (ValidationError)
"""
from __future__ import annotations

import logging
from typing import Any, Callable, List

from goldwise.application.pricing import round2
from goldwise.domain.errors import ValidationError
from goldwise.shared.validators import coerce_finite_number

logger = logging.getLogger(__name__)

MIN_PREMIUM_PCT = 0.0
MAX_PREMIUM_PCT = 12.0


def validate_premium_pct(raw: Any) -> float:
    """
    Validate and normalise a premium percentage.

    Args:
        raw: Number or numeric string

    Returns:
        The premium rounded to 2 decimals

    Raises:
        ValidationError: If the value is not a finite number in [0, 12]
    """
    value = coerce_finite_number(raw)
    if value is None or value < MIN_PREMIUM_PCT or value > MAX_PREMIUM_PCT:
        raise ValidationError("Invalid premiumPct (0 to 12). Example: { premiumPct: 5.2 }")
    return round2(value)


class Calibration:
    """Process-wide premium with change notification."""

    def __init__(self, premium_pct: float):
        self._premium_pct = validate_premium_pct(premium_pct)
        self._subscribers: List[Callable[[], None]] = []

    @property
    def premium_pct(self) -> float:
        return self._premium_pct

    def subscribe(self, callback: Callable[[], None]) -> None:
        """Register a callback run synchronously after every successful update."""
        self._subscribers.append(callback)

    def update(self, raw: Any) -> float:
        """
        Set a new premium.

        Raises:
            ValidationError: If ``raw`` is out of domain; state is left untouched
        """
        premium_pct = validate_premium_pct(raw)
        previous = self._premium_pct
        self._premium_pct = premium_pct
        for callback in self._subscribers:
            callback()
        logger.info("Premium updated: %s%% -> %s%%", previous, premium_pct)
        return premium_pct
