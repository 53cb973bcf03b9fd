# src/goldwise/adapters/providers/fx.py
"""
FX Providers for USD→INR

Two independent public endpoints that both answer with
``{"rates": {"INR": <number>}}``. They are tried in order by the fallback
resolver; a provider only has to raise when its answer is unusable.

Files that USE this module:
- goldwise.application.quote_service (builds the FX provider chain)
- tests.test_providers

Files that this module USES:
- goldwise.adapters.providers.base (HttpProvider, FxRateProvider)
- goldwise.config (endpoint URLs)
"""
import logging
from typing import Any, Optional

import httpx

from goldwise.adapters.providers.base import FxRateProvider, HttpProvider
from goldwise.config import settings
from goldwise.domain.errors import UpstreamError
from goldwise.shared.validators import coerce_finite_number

log = logging.getLogger(__name__)


def _inr_rate(data: Any, provider: str) -> float:
    rates = data.get("rates") if isinstance(data, dict) else None
    raw = rates.get("INR") if isinstance(rates, dict) else None
    rate = coerce_finite_number(raw)
    if rate is None or rate <= 0:
        raise UpstreamError(f"{provider} invalid", provider=provider)
    return rate


class OpenErApiProvider(HttpProvider, FxRateProvider):
    name = "open.er-api"

    def __init__(self, client: httpx.AsyncClient, url: Optional[str] = None, timeout: Optional[float] = None):
        super().__init__(client, timeout)
        self.url = url or settings.open_er_api_url

    async def usd_to_inr(self) -> float:
        data = await self.get_json(self.url)
        rate = _inr_rate(data, self.name)
        log.debug("open.er-api USD/INR=%s", rate)
        return rate


class ExchangeRateHostProvider(HttpProvider, FxRateProvider):
    name = "exchangerate.host"

    def __init__(self, client: httpx.AsyncClient, url: Optional[str] = None, timeout: Optional[float] = None):
        super().__init__(client, timeout)
        self.url = url or settings.exchangerate_host_url

    async def usd_to_inr(self) -> float:
        data = await self.get_json(self.url)
        rate = _inr_rate(data, self.name)
        log.debug("exchangerate.host USD/INR=%s", rate)
        return rate
