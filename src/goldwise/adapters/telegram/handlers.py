# src/goldwise/adapters/telegram/handlers.py
"""
Telegram Handlers - Command Processing and User Interaction

Commands:
- /start: usage
- /live: latest quote
- /buy: buy-window classification
- /mood: market mood
- /news [category]: top headlines (kashmir, india, global, silver)
- /refresh: fetch now and force a buy-window recompute
- /calibrate <pct>: set the server's retail premium

The tracker and API client live in ``context.bot_data``.

Files that USE this module:
- goldwise.adapters.telegram.bot (build_handlers)

Files that this module USES:
- goldwise.adapters.telegram.jobs (poll_live_once, poll_news_once)
- goldwise.adapters.formatting.formatter (all replies)
- goldwise.application.tracker (LiveTracker)
"""
from __future__ import annotations

import asyncio
import logging

from telegram import Update
from telegram.ext import CommandHandler, ContextTypes

from goldwise.adapters.client.api_client import GoldwiseApiClient
from goldwise.adapters.formatting.formatter import (
    NEWS_UNAVAILABLE_TEXT,
    UNAVAILABLE_TEXT,
    format_buy_window,
    format_market_mood,
    format_news,
    format_quote,
)
from goldwise.adapters.telegram.jobs import poll_live_once, poll_news_once
from goldwise.application.tracker import LiveTracker
from goldwise.domain.errors import DomainError, ValidationError

logger = logging.getLogger(__name__)

START_TEXT = (
    "👋 Welcome to GoldWise\n"
    "\n"
    "/live - live gold & silver rates\n"
    "/buy - best buy window (multi-day)\n"
    "/mood - market mood\n"
    "/news [kashmir|india|global|silver] - headlines\n"
    "/refresh - fetch now and recalculate\n"
    "/calibrate <pct> - set retail premium (0 to 12)"
)


def _tracker(context: ContextTypes.DEFAULT_TYPE) -> LiveTracker:
    return context.bot_data["tracker"]


def _client(context: ContextTypes.DEFAULT_TYPE) -> GoldwiseApiClient:
    return context.bot_data["client"]


def _current_gold(tracker: LiveTracker):
    latest = tracker.series.latest
    return latest.gold_per_gram if latest else None


async def start(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    await update.message.reply_text(START_TEXT)


async def live(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /live - show the most recent quote, fetching one if none is held yet."""
    tracker = _tracker(context)
    quote = tracker.latest_quote or await poll_live_once(tracker, _client(context))
    if quote is None:
        await update.message.reply_text(UNAVAILABLE_TEXT)
        return
    await update.message.reply_text(format_quote(quote))


async def buy(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    tracker = _tracker(context)
    await update.message.reply_text(format_buy_window(tracker.buy_window(), _current_gold(tracker)))


async def mood(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    await update.message.reply_text(format_market_mood(_tracker(context).market_mood()))


async def news(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle /news [category] - fetch headlines and make the category active.

    The server resolves unknown categories to its default, so the active
    category follows the category it reports back.
    """
    tracker = _tracker(context)
    category = context.args[0] if context.args else tracker.active_category
    feed = await poll_news_once(tracker, _client(context), category)
    if feed is None:
        await update.message.reply_text(NEWS_UNAVAILABLE_TEXT)
        return
    tracker.active_category = feed.category
    await update.message.reply_text(format_news(feed), disable_web_page_preview=True)


async def refresh(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    tracker = _tracker(context)
    quote = await poll_live_once(tracker, _client(context))
    if quote is None:
        await update.message.reply_text(UNAVAILABLE_TEXT)
        return
    window = tracker.buy_window(force=True)
    await update.message.reply_text(
        f"{format_quote(quote)}\n\n{format_buy_window(window, _current_gold(tracker))}"
    )


async def calibrate(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /calibrate <pct> - forward the premium to the server."""
    if not context.args:
        await update.message.reply_text("Usage: /calibrate <premium %>, e.g. /calibrate 5.2")
        return

    try:
        premium_pct = await asyncio.to_thread(_client(context).calibrate, context.args[0])
    except ValidationError as e:
        await update.message.reply_text(f"❌ {e}")
        return
    except DomainError as e:
        logger.warning("Calibration failed: %s", e)
        await update.message.reply_text(UNAVAILABLE_TEXT)
        return

    logger.info("Premium calibrated to %s%% by user %s", premium_pct,
                update.effective_user.id if update.effective_user else "unknown")
    await update.message.reply_text(f"✅ Premium updated to {premium_pct}%")


def build_handlers():
    """
    Build and return list of Telegram bot handlers.

    Returns:
        List of handler instances for registration with bot
    """
    return [
        CommandHandler("start", start),
        CommandHandler("live", live),
        CommandHandler("buy", buy),
        CommandHandler("mood", mood),
        CommandHandler("news", news),
        CommandHandler("refresh", refresh),
        CommandHandler("calibrate", calibrate),
    ]
