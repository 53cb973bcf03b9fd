# src/goldwise/server.py
"""
Server Entry Point - Quote Server Startup

Composition root for the HTTP quote server: configures logging, builds the
FastAPI application and serves it with uvicorn.

Files that USE this module:
- goldwise-server console script
- python -m goldwise.server

Files that this module USES:
- goldwise.shared.logging_conf (setup_logging)
- goldwise.adapters.web.api (create_app)
- goldwise.config (host, port, log settings)
"""
from __future__ import annotations

import logging

import uvicorn

from goldwise.adapters.web.api import create_app
from goldwise.config import settings
from goldwise.shared.logging_conf import setup_logging


def main() -> None:
    setup_logging(
        level=logging.INFO,
        log_file=settings.log_file,
        log_dir=settings.log_dir,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
        file_name="goldwise-server.log",
    )
    logger = logging.getLogger(__name__)
    logger.info("Backend running on http://%s:%d", settings.server_host, settings.server_port)

    # log_config=None keeps uvicorn on the handlers configured above
    uvicorn.run(create_app(), host=settings.server_host, port=settings.server_port, log_config=None)


if __name__ == "__main__":
    main()
