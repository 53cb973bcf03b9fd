# src/goldwise/adapters/providers/__init__.py
"""
Upstream Providers

- gold-api.com (gold/silver spot prices)
- open.er-api.com and exchangerate.host (USD→INR)
- Google News RSS (news search)
"""

from goldwise.adapters.providers.base import (
    FxRateProvider,
    HttpProvider,
    SpotPriceProvider,
    create_http_client,
)
from goldwise.adapters.providers.fx import ExchangeRateHostProvider, OpenErApiProvider
from goldwise.adapters.providers.gold_api import GoldApiProvider
from goldwise.adapters.providers.google_news import GoogleNewsProvider

__all__ = [
    "FxRateProvider",
    "HttpProvider",
    "SpotPriceProvider",
    "create_http_client",
    "ExchangeRateHostProvider",
    "OpenErApiProvider",
    "GoldApiProvider",
    "GoogleNewsProvider",
]
