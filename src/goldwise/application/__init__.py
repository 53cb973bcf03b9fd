# src/goldwise/application/__init__.py
"""
Application Layer - Use Cases and Services

Server side: quote aggregation, calibration and news.
Client side: the live tracker and its analytics.
"""

from goldwise.application.calibration import Calibration, validate_premium_pct
from goldwise.application.fallback import Exhausted, FallbackChain, Resolved
from goldwise.application.news_service import NewsService
from goldwise.application.pricing import compute_quote
from goldwise.application.quote_service import QuoteService, build_fx_chain
from goldwise.application.tracker import LiveTracker, build_tracker

__all__ = [
    "Calibration",
    "validate_premium_pct",
    "FallbackChain",
    "Resolved",
    "Exhausted",
    "NewsService",
    "compute_quote",
    "QuoteService",
    "build_fx_chain",
    "LiveTracker",
    "build_tracker",
]
