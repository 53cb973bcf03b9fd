# src/goldwise/adapters/persistence/file_store.py
"""
File Store - JSON Key-Value Persistence

One JSON file per key under the data directory. Writes are atomic
(temp file + fsync + rename) so a crash never leaves a half-written file.
A file that no longer decodes is backed up to ``<key>.json.corrupt`` and
reported as ``PersistenceReadError``.

Files that USE this module:
- goldwise.adapters.persistence.tracker_store (day stats and history repositories)
- goldwise.app (creates the store in the data directory)

Files that this module USES:
- goldwise.config (settings.data_dir)
- goldwise.domain.errors (PersistenceReadError)
"""
from __future__ import annotations

import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any, Optional

from goldwise.config import settings
from goldwise.domain.errors import PersistenceReadError

log = logging.getLogger(__name__)


class JsonFileStore:
    def __init__(self, directory: Optional[Path] = None):
        self.directory = Path(directory or settings.data_dir)

    def path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def save(self, key: str, data: Any) -> None:
        """
        Write ``data`` for ``key`` using an atomic replace.

        Raises:
            RuntimeError: If the file cannot be written
        """
        p = self.path(key)
        p.parent.mkdir(parents=True, exist_ok=True)

        temp_fd, temp_path = tempfile.mkstemp(suffix=".json.tmp", dir=str(p.parent), text=True)
        try:
            with os.fdopen(temp_fd, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
                f.flush()
                os.fsync(f.fileno())
            os.replace(temp_path, str(p))
        except Exception as e:
            try:
                os.unlink(temp_path)
            except OSError:
                pass
            raise RuntimeError(f"Failed to save {key}: {e}") from e

    def load(self, key: str) -> Optional[Any]:
        """
        Read the value stored for ``key``.

        Returns:
            The decoded JSON value, or None if nothing is stored

        Raises:
            PersistenceReadError: If the file exists but is not valid JSON
        """
        p = self.path(key)
        if not p.exists():
            return None

        try:
            with p.open("r", encoding="utf-8") as f:
                return json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            backup_path = p.with_suffix(".json.corrupt")
            try:
                shutil.copy2(p, backup_path)
                p.unlink()
                log.warning("%s corrupted, backed up to %s: %s", p.name, backup_path, e)
            except OSError as backup_error:
                log.error("Failed to back up corrupt file %s: %s", p, backup_error)
            raise PersistenceReadError(f"{key} could not be decoded: {e}") from e
