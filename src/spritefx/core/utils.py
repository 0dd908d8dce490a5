"""Small numeric and async helpers used across the runtime."""

from __future__ import annotations

import logging
from typing import Any, Awaitable

logger = logging.getLogger(__name__)


def clamp(value: float, minimum: float, maximum: float) -> float:
    """Clamp value to [minimum, maximum], both inclusive."""
    return min(maximum, max(minimum, value))


async def settled(awaitable: Awaitable[Any]) -> None:
    """
    Wait for an awaitable to finish, whether it succeeds or fails.

    The result is discarded and any Exception raised by the awaitable is
    absorbed. Cancellation still propagates.
    """
    try:
        await awaitable
    except Exception:
        logger.debug("settled awaitable failed", exc_info=True)
