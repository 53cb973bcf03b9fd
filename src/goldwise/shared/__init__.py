# src/goldwise/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

- Validation
- Logging configuration
- Money display
"""

from goldwise.shared.validators import (
    coerce_finite_number,
    is_finite_number,
    validate_bot_token,
    validate_http_url,
)
from goldwise.shared.logging_conf import setup_logging
from goldwise.shared.money import money_inr, money_usd

__all__ = [
    "coerce_finite_number",
    "is_finite_number",
    "validate_bot_token",
    "validate_http_url",
    "setup_logging",
    "money_inr",
    "money_usd",
]
