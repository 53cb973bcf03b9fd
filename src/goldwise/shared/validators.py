# src/goldwise/shared/validators.py
"""
Input Validation Utilities - Configuration and Numeric Input Validation

Small predicates used by the settings layer and by any code that has to
decide whether an upstream or user-supplied value is a usable number.

Files that USE this module:
- goldwise.config.settings (field validators)
- goldwise.application.fallback (valid-result check)
- goldwise.application.calibration (premium input coercion)
- goldwise.adapters.providers.* (payload checks)

Files that this module USES:
- None (pure utility functions)
"""
import math
import re
from typing import Any, Optional


def validate_bot_token(token: str) -> bool:
    """
    Validate Telegram bot token format.

    Args:
        token: Bot token to validate

    Returns:
        True if valid, False otherwise
    """
    if not token:
        return False

    # Bot tokens should be in format: 123456789:ABCDEFghijklmnopQRSTUVwxyz
    pattern = r'^\d{8,10}:[A-Za-z0-9_-]{35}$'
    return bool(re.match(pattern, token))


def validate_http_url(url: str) -> bool:
    """Return True if ``url`` looks like an absolute http(s) URL."""
    if not url:
        return False
    return bool(re.match(r'^https?://[^\s/]+', url))


def is_finite_number(value: Any) -> bool:
    """
    Check that a value is a real, finite number.

    Booleans are rejected even though they subclass int.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def coerce_finite_number(value: Any) -> Optional[float]:
    """
    Convert a number or numeric string into a finite float.

    Args:
        value: Candidate value (int, float or str)

    Returns:
        The float value, or None if the input is not a finite number
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    return number if math.isfinite(number) else None
