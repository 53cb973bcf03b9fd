# src/goldwise/application/fallback.py
"""
Fallback Chain - First-Success Resolution over Ordered Providers

Tries an ordered list of asynchronous operations that all produce the same
logical quantity and returns the first finite number. Failures are recorded
and the next operation is tried; when every operation fails the chain
returns a static default. ``resolve`` never raises.

Files that USE this module:
- goldwise.application.quote_service (USD→INR resolution)
- tests.test_fallback

Files that this module USES:
- goldwise.shared.validators (is_finite_number)
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional, Sequence, Tuple, Union

from goldwise.shared.validators import is_finite_number

log = logging.getLogger(__name__)

Operation = Callable[[], Awaitable[Any]]


@dataclass(frozen=True)
class Resolved:
    """An operation produced a valid value."""
    value: float
    source: str


@dataclass(frozen=True)
class Exhausted:
    """Every operation failed; ``value`` is the configured default."""
    value: float
    errors: Tuple[str, ...] = ()

    source = "default"


ResolveResult = Union[Resolved, Exhausted]


class FallbackChain:
    """
    Ordered chain of named operations with a static default.

    Tracks which source answered last so callers can report it.
    """

    def __init__(self, operations: Sequence[Tuple[str, Operation]], default: float):
        """
        Args:
            operations: (name, zero-argument coroutine function) pairs, in priority order
            default: Value returned when every operation fails
        """
        self.operations = list(operations)
        self.default = default
        self.last_used_provider: Optional[str] = None

    async def resolve(self) -> ResolveResult:
        errors = []
        for name, operation in self.operations:
            try:
                value = await operation()
            except Exception as e:
                log.warning("Provider %s failed, trying next: %s", name, e)
                errors.append(f"{name}: {e}")
                continue

            if is_finite_number(value):
                self.last_used_provider = name
                return Resolved(value=float(value), source=name)

            log.warning("Provider %s returned non-numeric value %r, trying next", name, value)
            errors.append(f"{name}: invalid value {value!r}")

        log.error("All providers failed, using default %s. Errors: %s", self.default, "; ".join(errors))
        self.last_used_provider = Exhausted.source
        return Exhausted(value=self.default, errors=tuple(errors))
