# src/goldwise/app.py
"""
Application Entry Point - Bot Initialization and Startup

Composition root for the GoldWise Telegram tracker. It wires the tracker
(restored from the data directory), the quote server client and the bot
application, then starts polling.

Files that USE this module:
- goldwise-bot console script
- python -m goldwise.app

Files that this module USES:
- goldwise.shared.logging_conf (setup_logging)
- goldwise.config (settings)
- goldwise.application.tracker (build_tracker)
- goldwise.adapters.client.api_client (GoldwiseApiClient)
- goldwise.adapters.telegram.bot (build_application)
"""
from __future__ import annotations

import atexit
import logging
import os
import sys
from pathlib import Path

from telegram.error import Conflict, NetworkError, TimedOut

from goldwise.adapters.client.api_client import GoldwiseApiClient
from goldwise.adapters.persistence.file_store import JsonFileStore
from goldwise.adapters.telegram.bot import build_application
from goldwise.application.tracker import build_tracker
from goldwise.config import settings
from goldwise.shared.logging_conf import setup_logging


def _get_pid_file() -> Path:
    """PID file path, overridable via GOLDWISE_PID_FILE."""
    pid_file = os.environ.get("GOLDWISE_PID_FILE")
    if pid_file:
        return Path(pid_file)
    return settings.data_dir / "bot.pid"


def _check_existing_instance() -> None:
    """
    Check if another bot instance is already running.

    Raises RuntimeError if the PID file points at a live process.
    """
    pid_file = _get_pid_file()
    if not pid_file.exists():
        return
    try:
        old_pid = int(pid_file.read_text().strip())
    except (ValueError, OSError):
        pid_file.unlink(missing_ok=True)
        return

    try:
        os.kill(old_pid, 0)  # signal 0 only probes
    except ProcessLookupError:
        pid_file.unlink(missing_ok=True)
        return
    except PermissionError:
        pass
    raise RuntimeError(
        f"Another bot instance is already running (PID: {old_pid}).\n"
        f"Please stop it first with: kill {old_pid}"
    )


def _create_pid_file() -> None:
    pid_file = _get_pid_file()
    pid_file.parent.mkdir(parents=True, exist_ok=True)
    pid_file.write_text(str(os.getpid()))


def _remove_pid_file() -> None:
    try:
        _get_pid_file().unlink(missing_ok=True)
    except OSError:
        pass


def main() -> None:
    """
    Initialize and start the Telegram tracker bot.

    1. Sets up logging and the single-instance lock
    2. Restores the tracker from the data directory
    3. Builds the bot with handlers and polling jobs
    4. Starts the polling loop
    """
    setup_logging(
        level=logging.INFO,
        log_file=settings.log_file,
        log_dir=settings.log_dir,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
    )
    logger = logging.getLogger(__name__)

    if not settings.bot_token:
        raise RuntimeError("BOT_TOKEN missing")

    try:
        _check_existing_instance()
        _create_pid_file()
        atexit.register(_remove_pid_file)
        logger.info("Bot instance lock acquired (PID: %d)", os.getpid())
    except RuntimeError as e:
        logger.error(str(e))
        sys.exit(1)

    tracker = build_tracker(JsonFileStore(settings.data_dir))
    client = GoldwiseApiClient()
    app = build_application(settings.bot_token, tracker, client)

    logger.info(
        "Starting bot polling… server=%s, live poll=%ds, news poll=%ds",
        client.base_url,
        settings.poll_interval_seconds,
        settings.news_poll_seconds,
    )

    try:
        app.run_polling(drop_pending_updates=False)
    except Conflict:
        logger.error("Telegram Conflict: another bot instance is polling with this token", exc_info=True)
        raise
    except (TimedOut, NetworkError) as e:
        logger.error("Network error talking to Telegram: %s", e, exc_info=True)
        raise
    finally:
        _remove_pid_file()


if __name__ == "__main__":
    main()
