# src/goldwise/adapters/providers/gold_api.py
"""
gold-api.com Provider for Gold/Silver Spot Prices

Fetches USD-per-troy-ounce spot prices for XAU and XAG. There is no
fallback chain for spot prices: any failure propagates as ``UpstreamError``.

Files that USE this module:
- goldwise.application.quote_service (spot price fetch)
- tests.test_providers

Files that this module USES:
- goldwise.adapters.providers.base (HttpProvider, SpotPriceProvider)
- goldwise.config (endpoint URL)
"""
import logging
from typing import Optional

import httpx

from goldwise.adapters.providers.base import HttpProvider, SpotPriceProvider
from goldwise.config import settings
from goldwise.domain.errors import UpstreamError
from goldwise.shared.validators import coerce_finite_number

log = logging.getLogger(__name__)

METAL_NAMES = {"XAU": "Gold", "XAG": "Silver"}


class GoldApiProvider(HttpProvider, SpotPriceProvider):
    name = "gold-api"

    def __init__(self, client: httpx.AsyncClient, base_url: Optional[str] = None, timeout: Optional[float] = None):
        """
        Args:
            client: Shared HTTP client
            base_url: Optional API root (defaults to settings.gold_api_url)
            timeout: Optional request timeout in seconds
        """
        super().__init__(client, timeout)
        self.base_url = (base_url or settings.gold_api_url).rstrip("/")

    async def usd_per_ounce(self, symbol: str) -> float:
        """
        Get the spot price for ``symbol``.

        Expects ``{"price": 2345.6, ...}``.

        Raises:
            UpstreamError: If the request fails or the price is missing/non-numeric
        """
        data = await self.get_json(f"{self.base_url}/{symbol}")
        raw = data.get("price") if isinstance(data, dict) else None
        price = coerce_finite_number(raw)
        if price is None or price < 0:
            metal = METAL_NAMES.get(symbol, symbol)
            log.error("gold-api returned invalid %s price: %r", symbol, raw)
            raise UpstreamError(f"{metal} upstream invalid price", provider=self.name)
        log.debug("gold-api %s = %s USD/oz", symbol, price)
        return price
