"""Short-lived cache of AI backend availability."""

import logging
import time
from typing import Awaitable, Callable, Optional

from ..core.types import BackendAvailability

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 60.0


class AvailabilityCache:
    """
    Holds one BackendAvailability for a fixed time-to-live.

    The clock is injectable so tests can move time forward. `clear()` is
    the hook for settings-changed events.
    """

    def __init__(
        self,
        ttl: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic
    ):
        self.ttl = ttl
        self.clock = clock
        self._value: Optional[BackendAvailability] = None
        self._stored_at: float = 0.0

    def get(self) -> Optional[BackendAvailability]:
        """Return the cached value if it is still fresh."""
        if self._value is None:
            return None
        if self.clock() - self._stored_at >= self.ttl:
            return None
        return self._value

    def set(self, value: BackendAvailability) -> BackendAvailability:
        """Store a value, stamping it with the current clock."""
        self._value = value
        self._stored_at = self.clock()
        return value

    def clear(self) -> None:
        """Drop the cached value."""
        self._value = None
        self._stored_at = 0.0

    async def get_or_refresh(
        self,
        refresh: Callable[[], Awaitable[BackendAvailability]],
        force_refresh: bool = False
    ) -> BackendAvailability:
        """
        Return the cached value, or call `refresh` and cache its result.

        Args:
            refresh: Coroutine factory producing a fresh value
            force_refresh: Ignore any cached value
        """
        if not force_refresh:
            cached = self.get()
            if cached is not None:
                logger.debug("Availability cache hit: %s", cached.provider)
                return cached

        logger.debug("Availability cache miss, refreshing")
        return self.set(await refresh())
