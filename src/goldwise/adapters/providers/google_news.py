# src/goldwise/adapters/providers/google_news.py
"""
Google News RSS Provider

Fetches the raw RSS document for a search query. Parsing and filtering
happen in goldwise.adapters.feeds.rss and goldwise.application.news_service.

Files that USE this module:
- goldwise.application.news_service

Files that this module USES:
- goldwise.adapters.providers.base (HttpProvider)
- goldwise.config (endpoint URL)
"""
import logging
from typing import Optional

import httpx

from goldwise.adapters.providers.base import HttpProvider
from goldwise.config import settings

log = logging.getLogger(__name__)


class GoogleNewsProvider(HttpProvider):
    name = "google-news"
    source_label = "Google News"

    def __init__(self, client: httpx.AsyncClient, url: Optional[str] = None, timeout: Optional[float] = None):
        super().__init__(client, timeout)
        self.url = url or settings.google_news_url

    async def search(self, query: str) -> str:
        """
        Return the RSS XML for ``query`` (Indian English edition).

        Raises:
            UpstreamError: If the feed cannot be fetched
        """
        params = {"q": query, "hl": "en-IN", "gl": "IN", "ceid": "IN:en"}
        log.info("Fetching Google News RSS: %s", query)
        return await self.get_text(self.url, params=params)
