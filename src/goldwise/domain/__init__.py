# src/goldwise/domain/__init__.py
"""
Domain Layer - Pure Business Objects

This package contains domain models and errors.
No dependencies on infrastructure or external systems.
"""

from goldwise.domain.models import (
    BuyWindow,
    CacheEntry,
    DayStats,
    FxRates,
    GoldPrices,
    HistoryEntry,
    MarketMood,
    NewsArticle,
    NewsFeed,
    PriceSample,
    Quote,
    SilverPrices,
    SpotPrices,
    Volatility,
)
from goldwise.domain.errors import (
    DomainError,
    ParseError,
    PersistenceReadError,
    UpstreamError,
    ValidationError,
)

__all__ = [
    "BuyWindow",
    "CacheEntry",
    "DayStats",
    "FxRates",
    "GoldPrices",
    "HistoryEntry",
    "MarketMood",
    "NewsArticle",
    "NewsFeed",
    "PriceSample",
    "Quote",
    "SilverPrices",
    "SpotPrices",
    "Volatility",
    "DomainError",
    "ParseError",
    "PersistenceReadError",
    "UpstreamError",
    "ValidationError",
]
