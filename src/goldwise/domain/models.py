# src/goldwise/domain/models.py
"""
Domain Models - Pure Business Objects

This module contains the value objects shared by the quote server and the
tracker client:
- Spot/FX inputs and the published Quote
- Cache entries
- Price samples, day statistics and history entries
- News articles and feeds
- Buy-window and market-mood classifications

Wire formats use camelCase keys; ``to_json``/``from_json`` handle the mapping.

Files that USE this module:
- goldwise.application.* (all services use domain models)
- goldwise.adapters.* (adapters create and serialise domain models)
- tests.* (tests use domain models for test data)

Files that this module USES:
- None (pure domain layer, no external dependencies)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


def format_timestamp(ts: datetime) -> str:
    """Format a timestamp as an ISO-8601 UTC string with millisecond precision."""
    return ts.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(raw: Optional[str]) -> Optional[datetime]:
    """Parse an ISO-8601 string (``Z`` or offset form); None for empty input."""
    if not raw:
        return None
    return datetime.fromisoformat(raw.replace("Z", "+00:00")).astimezone(timezone.utc)


@dataclass(frozen=True)
class SpotPrices:
    """Raw upstream inputs for one quote computation."""
    gold_usd_oz: float
    silver_usd_oz: float
    usd_to_inr: float


@dataclass(frozen=True)
class GoldPrices:
    usd_per_ounce_24: float
    inr_per_gram_24: float
    inr_per_gram_22: float
    inr_per_gram_18: float


@dataclass(frozen=True)
class SilverPrices:
    usd_per_ounce: float
    inr_per_gram: float


@dataclass(frozen=True)
class FxRates:
    usd_to_inr: float


@dataclass(frozen=True)
class Quote:
    """
    The published price payload for one freshness window.

    Attributes:
        updated_at: When the quote was computed (UTC)
        premium_pct: Retail premium applied to the 24K gram price
        gold: Gold prices (USD/oz and INR/g for 24K, 22K, 18K)
        silver: Silver prices (USD/oz and INR/g)
        fx: USD to INR rate used
    """
    updated_at: datetime
    premium_pct: float
    gold: GoldPrices
    silver: SilverPrices
    fx: FxRates

    def to_json(self) -> dict:
        return {
            "updatedAt": format_timestamp(self.updated_at),
            "premiumPct": self.premium_pct,
            "gold": {
                "usdPerOunce24": self.gold.usd_per_ounce_24,
                "inrPerGram24": self.gold.inr_per_gram_24,
                "inrPerGram22": self.gold.inr_per_gram_22,
                "inrPerGram18": self.gold.inr_per_gram_18,
            },
            "silver": {
                "usdPerOunce": self.silver.usd_per_ounce,
                "inrPerGram": self.silver.inr_per_gram,
            },
            "fx": {
                "usdToInr": self.fx.usd_to_inr,
            },
        }

    @staticmethod
    def from_json(data: dict) -> "Quote":
        """
        Build a Quote from its wire form.

        Raises:
            KeyError, TypeError, ValueError: If required fields are missing or malformed
        """
        gold = data["gold"]
        silver = data.get("silver") or {}
        fx = data.get("fx") or {}
        return Quote(
            updated_at=parse_timestamp(data.get("updatedAt")) or datetime.now(timezone.utc),
            premium_pct=float(data.get("premiumPct", 0.0)),
            gold=GoldPrices(
                usd_per_ounce_24=float(gold.get("usdPerOunce24", 0.0)),
                inr_per_gram_24=float(gold["inrPerGram24"]),
                inr_per_gram_22=float(gold.get("inrPerGram22", 0.0)),
                inr_per_gram_18=float(gold.get("inrPerGram18", 0.0)),
            ),
            silver=SilverPrices(
                usd_per_ounce=float(silver.get("usdPerOunce") or 0.0),
                inr_per_gram=float(silver.get("inrPerGram") or 0.0),
            ),
            fx=FxRates(usd_to_inr=float(fx.get("usdToInr") or 0.0)),
        )


@dataclass(frozen=True)
class CacheEntry(Generic[T]):
    """A cached value stamped with its fetch time (monotonic seconds)."""
    fetched_at: float
    value: T

    def is_fresh(self, now: float, ttl_seconds: float) -> bool:
        return now - self.fetched_at < ttl_seconds


@dataclass(frozen=True)
class PriceSample:
    """One poll tick as seen by the tracker."""
    label: str
    gold_per_gram: float
    silver_per_gram: float


@dataclass(frozen=True)
class DayStats:
    """
    Running low/high/sum/count for one calendar day.

    ``low``/``high`` are None until the first sample arrives.
    """
    day: str
    low: Optional[float] = None
    high: Optional[float] = None
    total: float = 0.0
    count: int = 0

    @classmethod
    def fresh(cls, day: str) -> "DayStats":
        return cls(day=day)

    @property
    def average(self) -> Optional[float]:
        if not self.count:
            return None
        return self.total / self.count

    def to_json(self) -> dict:
        return {
            "day": self.day,
            "low": self.low,
            "high": self.high,
            "sum": self.total,
            "count": self.count,
        }

    @staticmethod
    def from_json(data: dict) -> "DayStats":
        low = data.get("low")
        high = data.get("high")
        return DayStats(
            day=str(data["day"]),
            low=None if low is None else float(low),
            high=None if high is None else float(high),
            total=float(data.get("sum", 0.0)),
            count=int(data.get("count", 0)),
        )


@dataclass(frozen=True)
class HistoryEntry:
    """Finalized statistics for one past day."""
    day: str
    low: float
    high: float
    avg: float

    def to_json(self) -> dict:
        return {"day": self.day, "low": self.low, "high": self.high, "avg": self.avg}

    @staticmethod
    def from_json(data: dict) -> "HistoryEntry":
        return HistoryEntry(
            day=str(data["day"]),
            low=float(data["low"]),
            high=float(data["high"]),
            avg=float(data["avg"]),
        )


@dataclass(frozen=True)
class NewsArticle:
    title: str
    url: str
    source: str
    published_at: Optional[datetime] = None

    @property
    def key(self) -> str:
        """Deduplication key: URL, falling back to title."""
        return self.url or self.title

    def to_json(self) -> dict:
        return {
            "title": self.title,
            "url": self.url,
            "source": self.source,
            "publishedAt": format_timestamp(self.published_at) if self.published_at else None,
        }

    @staticmethod
    def from_json(data: dict) -> "NewsArticle":
        try:
            published_at = parse_timestamp(data.get("publishedAt"))
        except ValueError:
            published_at = None
        return NewsArticle(
            title=str(data.get("title", "")),
            url=str(data.get("url", "")),
            source=str(data.get("source", "")),
            published_at=published_at,
        )


@dataclass(frozen=True)
class NewsFeed:
    """A filtered, truncated set of articles for one category."""
    category: str
    updated_at: datetime
    articles: tuple[NewsArticle, ...] = field(default_factory=tuple)

    def to_json(self) -> dict:
        return {
            "category": self.category,
            "updatedAt": format_timestamp(self.updated_at),
            "articles": [a.to_json() for a in self.articles],
        }

    @staticmethod
    def from_json(data: dict) -> "NewsFeed":
        return NewsFeed(
            category=str(data.get("category", "")),
            updated_at=parse_timestamp(data.get("updatedAt")) or datetime.now(timezone.utc),
            articles=tuple(NewsArticle.from_json(a) for a in data.get("articles") or []),
        )


@dataclass(frozen=True)
class BuyWindow:
    """
    Buy-window classification of the current price against the multi-day range.

    Attributes:
        signal: "LOADING", "BUY_OK", "WATCH" or "WAIT"
        badge: Short display label
        title: Headline text
        description: Explanation, including the multi-day low/avg/high when known
        action: Suggested action
        time_label: Window covered, e.g. "Last 3 days"
        risk: "Low", "Medium" or "High"
        pos: Position of the current price in the range, 0..1
        days: Number of days that contributed to the range
    """
    signal: str
    badge: str
    title: str
    description: str
    action: str
    time_label: str
    risk: str
    pos: float
    multi_low: Optional[float] = None
    multi_avg: Optional[float] = None
    multi_high: Optional[float] = None
    days: int = 0


@dataclass(frozen=True)
class Volatility:
    label: str  # "HIGH", "MEDIUM", "LOW"
    score: int


@dataclass(frozen=True)
class MarketMood:
    """Composite short-window signal from gold/silver trends and volatility."""
    signal: str  # "BUY", "WAIT", "WATCH"
    confidence: int
    reason: str
    tip: str
    gold_trend: str
    silver_trend: str
    volatility: str
