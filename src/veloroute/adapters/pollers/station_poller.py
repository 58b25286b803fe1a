"""Poller that reloads the station catalog periodically."""

from __future__ import annotations

import asyncio
import logging

from veloroute.domain.contracts.station_poller import (
    RefreshableCatalogProtocol,
    StationPollerProtocol,
)

logger = logging.getLogger(__name__)


class StationPoller(StationPollerProtocol):
    """Refreshes the station catalog on a fixed interval."""

    def __init__(self, catalog: RefreshableCatalogProtocol, refresh_interval_seconds: float) -> None:
        """Initialize the station poller.

        Args:
            catalog: Catalog to refresh.
            refresh_interval_seconds: Seconds between reloads.
        """
        self.catalog = catalog
        self.refresh_interval_seconds = refresh_interval_seconds
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        """True while the polling task is alive."""
        return self._task is not None and not self._task.done()

    async def start(self) -> None:
        """Start the station poller."""
        if self.running:
            logger.warning("Station poller already running")
            return

        self._task = asyncio.create_task(self._poll_loop())
        logger.info(f"Started station poller (every {self.refresh_interval_seconds}s)")

    async def stop(self) -> None:
        """Stop the station poller."""
        if self._task and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                logger.info("Station poller cancelled")
            logger.info("Stopped station poller")
        self._task = None

    async def _poll_loop(self) -> None:
        """Main polling loop."""
        await self._refresh()
        while True:
            await asyncio.sleep(self.refresh_interval_seconds)
            await self._refresh()

    async def _refresh(self) -> None:
        """Reload stations, keeping the loop alive on unexpected errors."""
        try:
            await self.catalog.refresh()
        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.error(f"Station refresh failed: {e}", exc_info=True)
