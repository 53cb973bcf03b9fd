# src/goldwise/adapters/telegram/jobs.py
"""
Telegram Jobs - Scheduled Polling of the Quote Server

Repeating jobs registered on the bot's job queue:
- live_poll_job: fetch the live quote and feed it to the tracker
- news_poll_job: refresh headlines for the tracker's active category

A tick that starts while the previous one is still running is skipped.
Failures are logged and the tracker is left untouched.

Files that USE this module:
- goldwise.adapters.telegram.bot (registers the jobs)
- goldwise.adapters.telegram.handlers (poll_live_once for /live and /refresh)
- tests.test_jobs

Files that this module USES:
- goldwise.adapters.client.api_client (GoldwiseApiClient)
- goldwise.application.tracker (LiveTracker)
"""
from __future__ import annotations

import asyncio
import logging
from typing import Optional

from telegram.ext import ContextTypes

from goldwise.adapters.client.api_client import GoldwiseApiClient
from goldwise.application.tracker import LiveTracker
from goldwise.domain.errors import DomainError
from goldwise.domain.models import NewsFeed, Quote

logger = logging.getLogger(__name__)

# Re-entrancy guards
_live_poll_lock = asyncio.Lock()
_news_poll_lock = asyncio.Lock()


async def poll_live_once(tracker: LiveTracker, client: GoldwiseApiClient) -> Optional[Quote]:
    """
    Fetch one quote and record it.

    Returns:
        The quote, or None if the server was unavailable
    """
    try:
        quote = await asyncio.to_thread(client.get_live)
    except DomainError as e:
        logger.warning("Live update failed: %s", e)
        return None
    tracker.record_quote(quote)
    return quote


async def poll_news_once(
    tracker: LiveTracker, client: GoldwiseApiClient, category: Optional[str] = None
) -> Optional[NewsFeed]:
    try:
        feed = await asyncio.to_thread(client.get_news, category or tracker.active_category)
    except DomainError as e:
        logger.warning("News update failed: %s", e)
        return None
    tracker.record_news(feed)
    return feed


async def live_poll_job(
    context: ContextTypes.DEFAULT_TYPE, tracker: LiveTracker, client: GoldwiseApiClient
) -> None:
    if _live_poll_lock.locked():
        logger.debug("live_poll_job: previous tick still running, skipping")
        return
    async with _live_poll_lock:
        await poll_live_once(tracker, client)


async def news_poll_job(
    context: ContextTypes.DEFAULT_TYPE, tracker: LiveTracker, client: GoldwiseApiClient
) -> None:
    if _news_poll_lock.locked():
        logger.debug("news_poll_job: previous tick still running, skipping")
        return
    async with _news_poll_lock:
        await poll_news_once(tracker, client)
