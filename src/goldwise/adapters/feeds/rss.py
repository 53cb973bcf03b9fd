# src/goldwise/adapters/feeds/rss.py
"""
RSS Feed Parser

Parses RSS 2.0 documents into NewsArticle objects using BeautifulSoup's XML
tree builder. Parsing is tolerant: an item without a title or link is
dropped, an unparsable publish date becomes None, and the rest of the feed
is still returned.

Files that USE this module:
- goldwise.application.news_service
- tests.test_rss

Files that this module USES:
- goldwise.domain.models (NewsArticle)
- goldwise.domain.errors (ParseError)
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import List, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from goldwise.domain.errors import ParseError
from goldwise.domain.models import NewsArticle

log = logging.getLogger(__name__)


def _text(item: Tag, name: str) -> Optional[str]:
    node = item.find(name)
    if node is None:
        return None
    value = node.get_text().strip()
    return value or None


def parse_pub_date(raw: Optional[str]) -> Optional[datetime]:
    """
    Parse an RFC 822 date (``Tue, 14 Oct 2025 07:12:00 GMT``) into UTC.

    Returns None for missing or unparsable values.
    """
    if not raw:
        return None
    try:
        parsed = parsedate_to_datetime(raw)
    except (TypeError, ValueError, IndexError):
        return None
    if parsed is None:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def parse_item(item: Tag, default_source: str) -> NewsArticle:
    """
    Convert one ``<item>`` element into a NewsArticle.

    Raises:
        ParseError: If the item has no title or no link
    """
    title = _text(item, "title")
    link = _text(item, "link")
    if not title or not link:
        raise ParseError("RSS item missing title or link")
    return NewsArticle(
        title=title,
        url=link,
        source=_text(item, "source") or default_source,
        published_at=parse_pub_date(_text(item, "pubDate")),
    )


def parse_rss_items(xml: str, default_source: str = "Google News") -> List[NewsArticle]:
    """
    Parse every usable ``<item>`` of an RSS document, in feed order.

    Args:
        xml: Raw RSS document
        default_source: Source label for items without a ``<source>`` element

    Returns:
        List of NewsArticle (possibly empty)
    """
    soup = BeautifulSoup(xml or "", "xml")
    articles: List[NewsArticle] = []
    for item in soup.find_all("item"):
        try:
            articles.append(parse_item(item, default_source))
        except ParseError as e:
            log.debug("Dropping RSS item: %s", e)
    return articles
