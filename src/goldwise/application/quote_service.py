# src/goldwise/application/quote_service.py
"""
Quote Service - Spot/FX Aggregation with a Single-Slot Cache

Business logic behind ``GET /api/live``:
1. Serve the cached quote while it is younger than the TTL (4s by default)
2. Otherwise fetch gold/silver spot (hard failure on error) and USD→INR
   (fallback chain with a static default), compute the quote and cache it

Cache misses are serialised by an asyncio lock so concurrent requests share
one upstream round-trip. A failed refresh never touches the cached entry.

Files that USE this module:
- goldwise.adapters.web.api (live endpoint)
- tests.test_quote_service

Files that this module USES:
- goldwise.adapters.providers (GoldApiProvider, FX providers)
- goldwise.application.fallback (FallbackChain)
- goldwise.application.pricing (compute_quote)
- goldwise.application.calibration (Calibration)
- goldwise.domain.models (Quote, SpotPrices, CacheEntry)
"""
from __future__ import annotations

import asyncio
import logging
import time
from datetime import datetime, timezone
from typing import Callable, Optional

import httpx

from goldwise.adapters.providers.base import SpotPriceProvider
from goldwise.adapters.providers.fx import ExchangeRateHostProvider, OpenErApiProvider
from goldwise.application.calibration import Calibration
from goldwise.application.fallback import FallbackChain
from goldwise.application.pricing import compute_quote
from goldwise.config import settings
from goldwise.domain.models import CacheEntry, Quote, SpotPrices

log = logging.getLogger(__name__)


def build_fx_chain(client: httpx.AsyncClient, default: Optional[float] = None) -> FallbackChain:
    """USD→INR chain: open.er-api first, exchangerate.host second, then the static default."""
    primary = OpenErApiProvider(client)
    secondary = ExchangeRateHostProvider(client)
    return FallbackChain(
        [
            (primary.name, primary.usd_to_inr),
            (secondary.name, secondary.usd_to_inr),
        ],
        default=settings.fallback_usd_inr if default is None else default,
    )


class QuoteService:
    """Fetches, computes and caches the live quote."""

    def __init__(
        self,
        spot_provider: SpotPriceProvider,
        fx_chain: FallbackChain,
        calibration: Calibration,
        ttl_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
        now: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ):
        """
        Args:
            spot_provider: Gold/silver spot price source
            fx_chain: USD→INR fallback chain
            calibration: Premium holder; updates invalidate the cache
            ttl_seconds: Cache freshness window (defaults to settings.live_cache_seconds)
            clock: Monotonic clock used for cache age
            now: Wall clock used for ``updatedAt``
        """
        self.spot_provider = spot_provider
        self.fx_chain = fx_chain
        self.calibration = calibration
        self.ttl_seconds = settings.live_cache_seconds if ttl_seconds is None else ttl_seconds
        self._clock = clock
        self._now = now
        self._entry: Optional[CacheEntry[Quote]] = None
        self._lock = asyncio.Lock()
        calibration.subscribe(self.invalidate)

    def invalidate(self) -> None:
        """Drop the cached quote so the next read recomputes."""
        self._entry = None
        log.debug("Quote cache invalidated")

    def cached_quote(self) -> Optional[Quote]:
        """Return the cached quote if it is still fresh."""
        entry = self._entry
        if entry is not None and entry.is_fresh(self._clock(), self.ttl_seconds):
            return entry.value
        return None

    async def fetch_spot(self) -> SpotPrices:
        """
        Fetch spot prices and the FX rate.

        Raises:
            UpstreamError: If either metal price is unavailable
        """
        gold_usd_oz = await self.spot_provider.usd_per_ounce("XAU")
        silver_usd_oz = await self.spot_provider.usd_per_ounce("XAG")
        fx = await self.fx_chain.resolve()
        return SpotPrices(gold_usd_oz=gold_usd_oz, silver_usd_oz=silver_usd_oz, usd_to_inr=fx.value)

    async def get_quote(self) -> Quote:
        """
        Return the live quote, recomputing it when the cache is stale.

        Raises:
            UpstreamError: If spot prices cannot be fetched (cache left intact)
        """
        quote = self.cached_quote()
        if quote is not None:
            return quote

        async with self._lock:
            # Another request may have refreshed the slot while we waited
            quote = self.cached_quote()
            if quote is not None:
                return quote

            spot = await self.fetch_spot()
            # No await between reading the premium and storing the entry
            quote = compute_quote(spot, self.calibration.premium_pct, self._now())
            self._entry = CacheEntry(fetched_at=self._clock(), value=quote)
            log.info(
                "Quote refreshed: gold24=%s INR/g, silver=%s INR/g, fx=%s (%s), premium=%s%%",
                quote.gold.inr_per_gram_24,
                quote.silver.inr_per_gram,
                quote.fx.usd_to_inr,
                self.fx_chain.last_used_provider,
                quote.premium_pct,
            )
            return quote
