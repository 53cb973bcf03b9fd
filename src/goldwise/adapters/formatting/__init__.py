# src/goldwise/adapters/formatting/__init__.py
"""
Formatting Adapters - Message Formatting

This package contains message formatting adapters for Telegram output.
"""

from goldwise.adapters.formatting.formatter import (
    format_buy_window,
    format_market_mood,
    format_news,
    format_quote,
    time_ago,
)

__all__ = [
    "format_buy_window",
    "format_market_mood",
    "format_news",
    "format_quote",
    "time_ago",
]
