# src/goldwise/adapters/formatting/formatter.py
"""
Message Formatter - Text Formatting and Presentation

Renders quotes, buy-window and market-mood classifications and news
headlines as plain-text Telegram messages.

Files that USE this module:
- goldwise.adapters.telegram.handlers (all command replies)
- tests.test_formatter (unit tests)

Files that this module USES:
- goldwise.domain.models (Quote, BuyWindow, MarketMood, NewsFeed)
- goldwise.shared.money (money_inr, money_usd)
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from goldwise.domain.models import BuyWindow, MarketMood, NewsFeed, Quote
from goldwise.shared.money import money_inr, money_usd

UNAVAILABLE_TEXT = "⚠️ Live data unavailable right now. Please try again later."
NEWS_UNAVAILABLE_TEXT = "News unavailable right now. Please try again later."
NO_NEWS_TEXT = "No relevant news found right now."

GRAMS_PER_KG = 1000


def time_ago(ts: Optional[datetime], now: Optional[datetime] = None) -> str:
    """
    Format elapsed time since ``ts`` as a short label.

    Returns:
        "just now", "5m ago", "3h ago", "2d ago", or "" when ``ts`` is unknown
    """
    if ts is None:
        return ""
    now = now or datetime.now(timezone.utc)
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)

    mins = int((now - ts).total_seconds() // 60)
    if mins < 1:
        return "just now"
    if mins < 60:
        return f"{mins}m ago"
    hrs = mins // 60
    if hrs < 24:
        return f"{hrs}h ago"
    return f"{hrs // 24}d ago"


def format_quote(quote: Quote) -> str:
    """Live prices: gold per purity, global USD/oz, FX and silver."""
    g = quote.gold
    s = quote.silver
    updated = quote.updated_at.astimezone().strftime("%Y-%m-%d %H:%M:%S")
    return (
        "🏆 Gold (INR / gram)\n"
        f"• 24K: {money_inr(g.inr_per_gram_24)}  (10g: {money_inr(g.inr_per_gram_24 * 10)})\n"
        f"• 22K: {money_inr(g.inr_per_gram_22)}  (10g: {money_inr(g.inr_per_gram_22 * 10)})\n"
        f"• 18K: {money_inr(g.inr_per_gram_18)}\n"
        f"🌍 Global 24K: {money_usd(g.usd_per_ounce_24)} / oz\n"
        f"💱 USD → INR: {quote.fx.usd_to_inr:.2f}\n"
        "\n"
        "🥈 Silver\n"
        f"• {money_usd(s.usd_per_ounce or None)} / oz\n"
        f"• {money_inr(s.inr_per_gram or None)} / g • 10g: {money_inr(s.inr_per_gram * 10 or None)}"
        f" • 1kg: {money_inr(s.inr_per_gram * GRAMS_PER_KG or None)}\n"
        "\n"
        f"⏱️ Updated: {updated} • Premium: {quote.premium_pct}%"
    )


def _position_bar(pos: float, width: int = 10) -> str:
    filled = round(max(0.0, min(1.0, pos)) * width)
    return "▰" * filled + "▱" * (width - filled)


def format_buy_window(window: BuyWindow, current: Optional[float] = None) -> str:
    """Buy-window card: badge, advice, position in the multi-day range."""
    lines = [
        f"{window.badge}",
        f"{window.title}",
        "",
        window.description,
        "",
        f"👉 {window.action}",
        f"🗓️ {window.time_label} • Risk: {window.risk}",
        f"Low {_position_bar(window.pos)} High",
    ]
    if current is not None:
        lines.append(f"Now: {money_inr(current)} / g")
    return "\n".join(lines)


def format_market_mood(mood: MarketMood) -> str:
    return (
        f"📊 Market Mood: {mood.signal} ({mood.confidence}% confidence)\n"
        f"Gold: {mood.gold_trend} • Silver: {mood.silver_trend} • Volatility: {mood.volatility}\n"
        "\n"
        f"{mood.reason}\n"
        f"💡 {mood.tip}"
    )


def format_news(feed: Optional[NewsFeed], limit: int = 3, now: Optional[datetime] = None) -> str:
    """
    Top headlines for a category; the first is flagged BREAKING.

    Args:
        feed: News feed to render (None means unavailable)
        limit: Number of headlines to show
        now: Reference time for "time ago" labels
    """
    if feed is None:
        return NEWS_UNAVAILABLE_TEXT

    top = feed.articles[:limit]
    if not top:
        return NO_NEWS_TEXT

    updated = feed.updated_at.astimezone().strftime("%H:%M")
    lines = [f"📰 {feed.category.title()} news • Updated: {updated}"]
    for i, article in enumerate(top):
        badge = "🚨 BREAKING" if i == 0 else "NEWS"
        ago = time_ago(article.published_at, now)
        meta = article.source or "Source"
        if ago:
            meta = f"{meta} • {ago}"
        lines.append("")
        lines.append(f"{badge} | {article.title}")
        lines.append(f"{meta}")
        lines.append(article.url)
    return "\n".join(lines)
