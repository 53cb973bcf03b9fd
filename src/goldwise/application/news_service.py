# src/goldwise/application/news_service.py
"""
News Service - Category News with Relevance Filtering and Caching

Business logic behind ``GET /api/news``. Per category:
fetch RSS -> parse -> dedupe -> relevance filter -> truncate -> cache.

Each category has its own cache entry (TTL 120s by default). An upstream
failure raises ``UpstreamError``; expired entries are never served as a
fallback.

Files that USE this module:
- goldwise.adapters.web.api (news endpoint)
- tests.test_news_service

Files that this module USES:
- goldwise.adapters.providers.google_news (GoogleNewsProvider)
- goldwise.adapters.feeds.rss (parse_rss_items)
- goldwise.domain.models (NewsArticle, NewsFeed, CacheEntry)
"""
from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from typing import Callable, Dict, Iterable, List, Optional

from goldwise.adapters.feeds.rss import parse_rss_items
from goldwise.adapters.providers.google_news import GoogleNewsProvider
from goldwise.config import settings
from goldwise.domain.models import CacheEntry, NewsArticle, NewsFeed

log = logging.getLogger(__name__)

NEWS_QUERIES: Dict[str, str] = {
    "kashmir": "gold price Kashmir OR Srinagar OR bullion Kashmir OR jewellery Kashmir",
    "india": "gold price India OR MCX gold OR bullion India OR jewellery India",
    "global": "gold price global OR XAUUSD OR inflation OR Federal Reserve OR bullion market",
    "silver": "silver price India OR XAG OR silver demand OR silver market",
}

# A headline must mention at least one of these...
MUST_HAVE_KEYWORDS = (
    "gold", "bullion", "24k", "22k", "hallmark", "jewellery", "jewelry",
    "mcx", "xau", "xauusd", "sovereign", "karat", "carat",
)

# ...and none of these
BLOCKED_KEYWORDS = (
    "bitcoin", "crypto", "nft", "football", "cricket",
    "movie", "celebrity", "song", "game",
)


def resolve_category(raw: Optional[str], default: Optional[str] = None) -> str:
    """Normalise a category key; unknown or empty keys map to the default category."""
    default = default or settings.news_default_category
    if default not in NEWS_QUERIES:
        default = "india"
    key = (raw or "").strip().lower()
    return key if key in NEWS_QUERIES else default


def is_relevant(title: Optional[str]) -> bool:
    """Keep gold/bullion headlines, drop crypto/sport/entertainment noise."""
    t = (title or "").lower()
    if not any(k in t for k in MUST_HAVE_KEYWORDS):
        return False
    return not any(k in t for k in BLOCKED_KEYWORDS)


def dedupe_articles(articles: Iterable[NewsArticle]) -> List[NewsArticle]:
    """Drop repeats by URL (title when the URL is empty), keeping the first occurrence."""
    seen = set()
    unique = []
    for article in articles:
        if article.key in seen:
            continue
        seen.add(article.key)
        unique.append(article)
    return unique


class NewsService:
    """Category-keyed news aggregation with a per-category TTL cache."""

    def __init__(
        self,
        provider: GoogleNewsProvider,
        ttl_seconds: Optional[float] = None,
        max_articles: Optional[int] = None,
        default_category: Optional[str] = None,
        clock: Callable[[], float] = time.monotonic,
        now: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ):
        self.provider = provider
        self.ttl_seconds = settings.news_cache_seconds if ttl_seconds is None else ttl_seconds
        self.max_articles = max_articles or settings.news_max_articles
        self.default_category = resolve_category(default_category)
        self._clock = clock
        self._now = now
        self._cache: Dict[str, CacheEntry[NewsFeed]] = {}

    def _cached(self, category: str) -> Optional[NewsFeed]:
        entry = self._cache.get(category)
        if entry is not None and entry.is_fresh(self._clock(), self.ttl_seconds):
            return entry.value
        return None

    async def get_news(self, category: Optional[str] = None) -> NewsFeed:
        """
        Return filtered news for ``category``.

        Raises:
            UpstreamError: If the feed cannot be fetched
        """
        key = resolve_category(category, self.default_category)
        cached = self._cached(key)
        if cached is not None:
            log.debug("Serving cached news for %s", key)
            return cached

        xml = await self.provider.search(NEWS_QUERIES[key])
        parsed = parse_rss_items(xml, default_source=self.provider.source_label)
        relevant = [a for a in dedupe_articles(parsed) if is_relevant(a.title)]
        feed = NewsFeed(
            category=key,
            updated_at=self._now(),
            articles=tuple(relevant[: self.max_articles]),
        )
        self._cache[key] = CacheEntry(fetched_at=self._clock(), value=feed)
        log.info("News refreshed for %s: %d parsed, %d relevant, %d kept",
                 key, len(parsed), len(relevant), len(feed.articles))
        return feed
