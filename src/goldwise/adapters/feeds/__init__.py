# src/goldwise/adapters/feeds/__init__.py
"""
Feed Adapters - Syndication Parsing
"""

from goldwise.adapters.feeds.rss import parse_pub_date, parse_rss_items

__all__ = ["parse_pub_date", "parse_rss_items"]
