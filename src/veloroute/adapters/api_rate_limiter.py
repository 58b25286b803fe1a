"""Rate limiter for outgoing API requests.

Mapbox bills and throttles per access token, so all requests to one API share
a single limiter that keeps a minimum delay between them.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import ClassVar

logger = logging.getLogger(__name__)


class ApiRateLimiter:
    """Keeps a minimum delay between requests to one API.

    Async-safe: waiting callers queue on an asyncio.Lock.
    """

    _instances: ClassVar[dict[str, ApiRateLimiter]] = {}

    def __init__(self, api_name: str, min_delay_seconds: float = 0.0) -> None:
        """Initialize the rate limiter.

        Args:
            api_name: Name of the API (for logging).
            min_delay_seconds: Minimum delay between requests in seconds.
        """
        self.api_name = api_name
        self.min_delay_seconds = min_delay_seconds
        self._last_request_time: float | None = None
        self._lock = asyncio.Lock()

    @classmethod
    def shared(cls, api_name: str, min_delay_seconds: float = 0.0) -> ApiRateLimiter:
        """Get the limiter shared by all clients of an API, creating it on first use.

        Args:
            api_name: Name of the API.
            min_delay_seconds: Minimum delay used when the limiter is created.

        Returns:
            Shared ApiRateLimiter instance for the API.
        """
        limiter = cls._instances.get(api_name)
        if limiter is None:
            limiter = cls(api_name, min_delay_seconds)
            cls._instances[api_name] = limiter
            logger.info(f"Created rate limiter for {api_name} with {min_delay_seconds}s minimum delay")
        elif min_delay_seconds != limiter.min_delay_seconds:
            logger.debug(
                f"Rate limiter for {api_name} already exists with "
                f"{limiter.min_delay_seconds}s minimum delay, ignoring {min_delay_seconds}s"
            )
        return limiter

    @classmethod
    def reset(cls) -> None:
        """Forget all shared limiters."""
        cls._instances.clear()

    async def acquire(self) -> None:
        """Wait until the next request to the API may be sent."""
        async with self._lock:
            if self._last_request_time is not None and self.min_delay_seconds > 0:
                wait_time = self.min_delay_seconds - (time.monotonic() - self._last_request_time)
                if wait_time > 0:
                    logger.debug(f"{self.api_name}: waiting {wait_time:.2f}s before next request")
                    await asyncio.sleep(wait_time)
            self._last_request_time = time.monotonic()

    async def __aenter__(self) -> ApiRateLimiter:
        """Context manager entry - acquire rate limit."""
        await self.acquire()
        return self

    async def __aexit__(
        self, _exc_type: type | None, _exc_val: Exception | None, _exc_tb: object
    ) -> None:
        """Context manager exit - nothing to do."""
