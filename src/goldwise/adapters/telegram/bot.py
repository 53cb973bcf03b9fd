# src/goldwise/adapters/telegram/bot.py
"""
Telegram Bot - Application Builder

Builds the python-telegram-bot Application, stores the session objects in
``bot_data``, registers command handlers and schedules the polling jobs.

Files that USE this module:
- goldwise.app (main)

Files that this module USES:
- goldwise.adapters.telegram.handlers (build_handlers)
- goldwise.adapters.telegram.jobs (live_poll_job, news_poll_job)
- goldwise.config (poll intervals)
"""
from __future__ import annotations

from datetime import timedelta
from functools import partial

from telegram.ext import Application

from goldwise.adapters.client.api_client import GoldwiseApiClient
from goldwise.adapters.telegram.handlers import build_handlers
from goldwise.adapters.telegram.jobs import live_poll_job, news_poll_job
from goldwise.application.tracker import LiveTracker
from goldwise.config import settings


def build_application(bot_token: str, tracker: LiveTracker, client: GoldwiseApiClient) -> Application:
    """
    Build Telegram bot application with handlers and repeating jobs.

    Args:
        bot_token: Telegram bot token
        tracker: Session state fed by the live poll
        client: Quote server client

    Returns:
        Configured Application instance
    """
    app = Application.builder().token(bot_token).build()
    app.bot_data["tracker"] = tracker
    app.bot_data["client"] = client

    for h in build_handlers():
        app.add_handler(h)

    app.job_queue.run_repeating(
        callback=partial(live_poll_job, tracker=tracker, client=client),
        interval=timedelta(seconds=settings.poll_interval_seconds),
        first=0,
        name="live_poll",
    )
    app.job_queue.run_repeating(
        callback=partial(news_poll_job, tracker=tracker, client=client),
        interval=timedelta(seconds=settings.news_poll_seconds),
        first=0,
        name="news_poll",
    )
    return app
