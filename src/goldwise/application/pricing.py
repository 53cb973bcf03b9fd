# src/goldwise/application/pricing.py
"""
Price Computation - Spot/FX to Retail Quote

Pure functions that turn upstream spot prices, the USD→INR rate and the
retail premium into the published Quote. Rounding uses Decimal with
ROUND_HALF_UP (half away from zero) so results are reproducible.

Files that USE this module:
- goldwise.application.quote_service
- tests.test_pricing

Files that this module USES:
- goldwise.domain.models (SpotPrices, Quote and its parts)
"""
from __future__ import annotations

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

from goldwise.domain.models import FxRates, GoldPrices, Quote, SilverPrices, SpotPrices

GRAMS_PER_TROY_OUNCE = 31.1034768

KARAT_22_FRACTION = 22 / 24
KARAT_18_FRACTION = 18 / 24


def round2(value: float) -> float:
    """Round to 2 decimal places, halves away from zero."""
    return float(Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def compute_quote(spot: SpotPrices, premium_pct: float, updated_at: datetime) -> Quote:
    """
    Build the published quote.

    The premium applies to the 24K gold gram price only; 22K and 18K are
    fractions of the unrounded 24K figure. Silver and USD figures carry no
    markup.

    Args:
        spot: Gold/silver USD per ounce and USD→INR rate
        premium_pct: Retail premium in percent
        updated_at: Timestamp stamped on the quote

    Returns:
        Quote with every monetary figure rounded to 2 decimals
    """
    gold_inr_ounce = spot.gold_usd_oz * spot.usd_to_inr
    silver_inr_ounce = spot.silver_usd_oz * spot.usd_to_inr

    gold_spot_gram_24 = gold_inr_ounce / GRAMS_PER_TROY_OUNCE
    silver_spot_gram = silver_inr_ounce / GRAMS_PER_TROY_OUNCE

    factor = 1 + premium_pct / 100
    gold_gram_24 = gold_spot_gram_24 * factor

    return Quote(
        updated_at=updated_at,
        premium_pct=premium_pct,
        gold=GoldPrices(
            usd_per_ounce_24=round2(spot.gold_usd_oz),
            inr_per_gram_24=round2(gold_gram_24),
            inr_per_gram_22=round2(gold_gram_24 * KARAT_22_FRACTION),
            inr_per_gram_18=round2(gold_gram_24 * KARAT_18_FRACTION),
        ),
        silver=SilverPrices(
            usd_per_ounce=round2(spot.silver_usd_oz),
            inr_per_gram=round2(silver_spot_gram),
        ),
        fx=FxRates(usd_to_inr=round2(spot.usd_to_inr)),
    )
