# src/goldwise/shared/logging_conf.py
"""
Logging Configuration - Root Logger Setup for Server and Bot

Both processes log with the same line format. Output goes to stdout
(unless GOLDWISE_LOG_STDOUT=false), to a size-rotated file, or both.
Chatty client libraries are held at WARNING so per-poll requests do
not flood the log.

Files that USE this module:
- goldwise.server (server startup)
- goldwise.app (bot startup)
- tests.test_logging_conf

Files that this module USES:
- None (pure configuration module)
"""
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional, Union

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s :: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

QUIET_LOGGERS = ("httpx", "httpcore")

PathLike = Union[str, Path]


def _stdout_enabled() -> bool:
    return os.environ.get("GOLDWISE_LOG_STDOUT", "true").lower() == "true"


def resolve_log_path(
    log_file: Optional[PathLike],
    log_dir: Optional[PathLike],
    file_name: str,
) -> Optional[Path]:
    """``log_dir/file_name`` when a directory is given, else ``log_file``; parents are created."""
    if log_dir:
        path = Path(log_dir) / file_name
    elif log_file:
        path = Path(log_file)
    else:
        return None
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def setup_logging(
    level=logging.INFO,
    log_file: Optional[PathLike] = None,
    log_dir: Optional[PathLike] = None,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5,
    file_name: str = "goldwise.log",
) -> Optional[Path]:
    """
    Configure the root logger, replacing any handlers already installed.

    Args:
        level: Root logging level
        log_file: Explicit log file path
        log_dir: Directory for ``file_name``; takes precedence over ``log_file``
        max_bytes: Rotation threshold per file
        backup_count: Rotated files kept
        file_name: File name used inside ``log_dir``

    Returns:
        The log file path, or None when logging to stdout only
    """
    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    handlers: List[logging.Handler] = []

    if _stdout_enabled():
        handlers.append(logging.StreamHandler(sys.stdout))

    path = resolve_log_path(log_file, log_dir, file_name)
    if path is not None:
        handlers.append(
            RotatingFileHandler(path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8")
        )

    # Never leave the process silent
    if not handlers:
        handlers.append(logging.StreamHandler(sys.stdout))

    for handler in handlers:
        handler.setFormatter(formatter)
    logging.basicConfig(level=level, handlers=handlers, force=True)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging configured: %s, level=%s", f"file={path}" if path else "stdout", logging.getLevelName(level)
    )
    return path
