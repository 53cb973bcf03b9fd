# src/goldwise/adapters/telegram/__init__.py
"""
Telegram Adapters - Bot Interface

This package contains Telegram bot adapters:
- Bot application builder
- Command handlers
- Scheduled jobs
"""

from goldwise.adapters.telegram.bot import build_application
from goldwise.adapters.telegram.handlers import build_handlers
from goldwise.adapters.telegram.jobs import live_poll_job, news_poll_job

__all__ = [
    "build_application",
    "build_handlers",
    "live_poll_job",
    "news_poll_job",
]
