# src/goldwise/adapters/providers/base.py
"""
Base Provider Interface for Upstream Price/FX/News Providers

Defines the shared HTTP plumbing for every upstream provider and the
abstract contracts for spot-price and FX providers. All providers share one
``httpx.AsyncClient`` so connections are pooled across requests.

Files that USE this module:
- goldwise.adapters.providers.gold_api (spot provider)
- goldwise.adapters.providers.fx (FX providers)
- goldwise.adapters.providers.google_news (news feed provider)
- goldwise.adapters.web.api (creates the shared client)

Files that this module USES:
- goldwise.config (timeouts and user agent)
- goldwise.domain.errors (UpstreamError)
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

import httpx

from goldwise.config import settings
from goldwise.domain.errors import UpstreamError

log = logging.getLogger(__name__)


def create_http_client(timeout: Optional[float] = None) -> httpx.AsyncClient:
    """Create the shared HTTP client used by all upstream providers."""
    return httpx.AsyncClient(
        timeout=timeout or settings.http_timeout_seconds,
        follow_redirects=True,
        headers={"User-Agent": settings.user_agent},
        limits=httpx.Limits(max_keepalive_connections=10, max_connections=30),
    )


class HttpProvider:
    """
    Common request/decoding logic for upstream providers.

    Every failure (transport error, timeout, non-2xx status, undecodable body)
    is converted into ``UpstreamError`` carrying the provider name.
    """

    name = "upstream"

    def __init__(self, client: httpx.AsyncClient, timeout: Optional[float] = None):
        self.client = client
        self.timeout = timeout or settings.http_timeout_seconds

    async def _get(self, url: str, params: Optional[Mapping[str, str]] = None) -> httpx.Response:
        try:
            resp = await self.client.get(url, params=params, timeout=self.timeout)
        except httpx.TimeoutException as e:
            log.warning("%s timeout after %s seconds", self.name, self.timeout)
            raise UpstreamError(f"{self.name} timeout after {self.timeout}s", provider=self.name) from e
        except httpx.HTTPError as e:
            log.warning("%s request failed: %s", self.name, e)
            raise UpstreamError(f"{self.name} request failed: {e}", provider=self.name) from e

        if resp.status_code >= 400:
            snippet = resp.text[:200]
            log.warning("%s returned HTTP %d: %s", self.name, resp.status_code, snippet)
            raise UpstreamError(
                f"Upstream {resp.status_code}: {snippet}",
                provider=self.name,
                status_code=resp.status_code,
            )
        return resp

    async def get_json(self, url: str, params: Optional[Mapping[str, str]] = None) -> Any:
        """
        GET ``url`` and decode the JSON body.

        Raises:
            UpstreamError: On transport failure, error status or invalid JSON
        """
        resp = await self._get(url, params)
        try:
            return resp.json()
        except ValueError as e:
            log.error("%s returned invalid JSON: %s", self.name, e)
            raise UpstreamError(f"{self.name} returned invalid JSON: {e}", provider=self.name) from e

    async def get_text(self, url: str, params: Optional[Mapping[str, str]] = None) -> str:
        """GET ``url`` and return the body as text."""
        resp = await self._get(url, params)
        return resp.text


class SpotPriceProvider(ABC):
    @abstractmethod
    async def usd_per_ounce(self, symbol: str) -> float:
        """Return the spot price in USD per troy ounce for a metal symbol (XAU, XAG)."""
        raise NotImplementedError


class FxRateProvider(ABC):
    name: str

    @abstractmethod
    async def usd_to_inr(self) -> float:
        """Return how many INR one USD buys."""
        raise NotImplementedError
