# src/goldwise/application/market_mood.py
"""
Market Mood - Short-Window Trend and Volatility Signal

Pure functions over the in-memory gold/silver sequences. Trend compares the
latest sample with ``values[-6]`` (five steps back); percent change uses
``values[-7]`` (six steps back).

Files that USE this module:
- goldwise.application.tracker
- tests.test_market_mood
"""
from __future__ import annotations

import math
from typing import Sequence

from goldwise.domain.models import MarketMood, Volatility

TREND_LOOKBACK = 6
BASE_CONFIDENCE = 55


def trend_direction(values: Sequence[float]) -> str:
    """``up``/``down``/``stable`` comparing the latest sample with ``values[-TREND_LOOKBACK]``, five steps back."""
    if len(values) < TREND_LOOKBACK:
        return "stable"
    last = values[-1]
    previous = values[-TREND_LOOKBACK]
    if last > previous:
        return "up"
    if last < previous:
        return "down"
    return "stable"


def pct_change(values: Sequence[float], lookback: int = TREND_LOOKBACK) -> float:
    """Percent move from ``values[-1 - lookback]`` to the latest; 0 without enough history or a zero reference."""
    if len(values) < lookback + 1:
        return 0.0
    last = values[-1]
    reference = values[-1 - lookback]
    if not reference:
        return 0.0
    return (last - reference) / reference * 100


def classify_volatility(values: Sequence[float]) -> Volatility:
    move = abs(pct_change(values, TREND_LOOKBACK))
    if move >= 0.35:
        return Volatility(label="HIGH", score=90)
    if move >= 0.18:
        return Volatility(label="MEDIUM", score=60)
    return Volatility(label="LOW", score=35)


def build_market_mood(gold: Sequence[float], silver: Sequence[float]) -> MarketMood:
    """
    Combine gold trend, silver agreement and volatility into one signal.

    Confidence starts at 55, moves with the gold trend, gains or loses when
    a long enough silver series agrees or diverges, adds a volatility term
    and is clamped to [25, 95].
    """
    gold_trend = trend_direction(gold)
    silver_trend = trend_direction(silver)
    volatility = classify_volatility(gold)

    confidence = BASE_CONFIDENCE
    if gold_trend == "up":
        confidence += 18
    elif gold_trend == "down":
        confidence += 10
    else:
        confidence -= 5

    if len(silver) > TREND_LOOKBACK and gold_trend != "stable":
        confidence += 12 if silver_trend == gold_trend else -6

    confidence += math.floor((volatility.score - 50) * 0.22)
    confidence = max(25, min(95, confidence))

    if gold_trend == "up" and volatility.label != "LOW":
        signal = "BUY"
        reason = "Gold is rising - buying early may help reduce cost."
        tip = "Split buy: part now + part later."
    elif gold_trend == "down" and volatility.label != "LOW":
        signal = "WAIT"
        reason = "Gold is falling - waiting may give better price."
        tip = "If urgent, buy small quantity now."
    else:
        signal = "WATCH"
        reason = "Gold and silver are steady - safe to monitor."
        tip = "Tip: Jewellery final price = rate + making + GST."

    return MarketMood(
        signal=signal,
        confidence=confidence,
        reason=reason,
        tip=tip,
        gold_trend=gold_trend.upper(),
        silver_trend=silver_trend.upper(),
        volatility=volatility.label,
    )
