# src/goldwise/shared/money.py
"""
Money Display Helpers

Files that USE this module:
- goldwise.application.buy_window (range summary in descriptions)
- goldwise.adapters.formatting.formatter
"""
from typing import Optional


def money_inr(value: Optional[float]) -> str:
    """Format rupees, e.g. ``₹ 6,543.21``; ``₹ --`` when unknown."""
    if value is None:
        return "₹ --"
    return f"₹ {value:,.2f}"


def money_usd(value: Optional[float]) -> str:
    if value is None:
        return "$ --"
    return f"$ {value:,.2f}"
