# src/goldwise/adapters/client/api_client.py
"""
GoldWise API Client - Client Session Access to the Quote Server

Synchronous ``requests`` client used by the Telegram bot to poll the quote
server. Every failure is raised as a domain error so callers only handle
one family of exceptions.

Files that USE this module:
- goldwise.adapters.telegram.jobs (live/news polling)
- goldwise.adapters.telegram.handlers (/live, /news, /refresh, /calibrate)
- tests.test_api_client

Files that this module USES:
- goldwise.config (api_base_url, http_timeout_seconds, user_agent)
- goldwise.domain.models (Quote, NewsFeed)
- goldwise.domain.errors (UpstreamError, ValidationError)
"""
from __future__ import annotations

import logging
import time
from typing import Any, Optional

import requests

from goldwise.config import settings
from goldwise.domain.errors import UpstreamError, ValidationError
from goldwise.domain.models import NewsFeed, Quote

log = logging.getLogger(__name__)


class GoldwiseApiClient:
    name = "goldwise-api"

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[int] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.timeout = timeout or settings.http_timeout_seconds
        self.session = session or requests.Session()
        self.session.headers.setdefault("User-Agent", settings.user_agent)

    def _request(self, method: str, path: str, **kwargs: Any) -> dict:
        """
        Call the server and return the decoded ``ok`` envelope.

        Raises:
            ValidationError: On HTTP 400 (rejected input)
            UpstreamError: On transport failure, invalid JSON or an error envelope
        """
        url = f"{self.base_url}{path}"
        try:
            resp = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.exceptions.Timeout as e:
            log.warning("%s %s timed out after %ss", method, path, self.timeout)
            raise UpstreamError(f"{path} timeout after {self.timeout}s", provider=self.name) from e
        except requests.exceptions.RequestException as e:
            log.warning("%s %s failed: %s", method, path, e)
            raise UpstreamError(f"{path} request failed: {e}", provider=self.name) from e

        try:
            data = resp.json()
        except ValueError as e:
            raise UpstreamError(
                f"{path} returned invalid JSON (HTTP {resp.status_code})",
                provider=self.name,
                status_code=resp.status_code,
            ) from e

        if not isinstance(data, dict) or not data.get("ok"):
            error = data.get("error") if isinstance(data, dict) else None
            error = error or f"{path} failed (HTTP {resp.status_code})"
            if resp.status_code == 400:
                raise ValidationError(error)
            raise UpstreamError(error, provider=self.name, status_code=resp.status_code)
        return data

    def get_live(self) -> Quote:
        """Fetch the live quote from ``GET /api/live``."""
        data = self._request("GET", "/api/live")
        try:
            return Quote.from_json(data)
        except (KeyError, TypeError, ValueError) as e:
            raise UpstreamError(f"/api/live schema error: {e}", provider=self.name) from e

    def get_news(self, category: Optional[str] = None) -> NewsFeed:
        """Fetch headlines from ``GET /api/news``; ``ts`` busts intermediary caches."""
        params = {"ts": int(time.time() * 1000)}
        if category:
            params["category"] = category
        data = self._request("GET", "/api/news", params=params)
        try:
            return NewsFeed.from_json(data)
        except (KeyError, TypeError, ValueError) as e:
            raise UpstreamError(f"/api/news schema error: {e}", provider=self.name) from e

    def calibrate(self, premium_pct: Any) -> float:
        """
        Set the server's retail premium.

        Returns:
            The premium the server stored

        Raises:
            ValidationError: If the server rejected the value
        """
        data = self._request("POST", "/api/calibrate", json={"premiumPct": premium_pct})
        return float(data["premiumPct"])
