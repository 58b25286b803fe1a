"""Canonical station set, reloaded wholesale from the provider feeds."""

import asyncio
import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from veloroute.application.station_merger import StationMerger
from veloroute.domain.models.station import Station

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from veloroute.domain.ports import StationFeed


class StationCatalog:
    """Holds the merged stations of the current refresh cycle."""

    def __init__(
        self,
        provider_a_feed: "StationFeed",
        provider_b_feed: "StationFeed",
        merger: StationMerger | None = None,
    ) -> None:
        """Initialize with both provider feeds and an optional merger."""
        self._provider_a_feed = provider_a_feed
        self._provider_b_feed = provider_b_feed
        self._merger = merger or StationMerger()
        self._stations: dict[str, Station] = {}
        self._last_refresh: datetime | None = None
        self._refresh_lock = asyncio.Lock()

    @property
    def last_refresh(self) -> datetime | None:
        """When the station set was last replaced."""
        return self._last_refresh

    def get(self, station_id: str) -> Station | None:
        """Get a station by id."""
        return self._stations.get(station_id)

    def all(self) -> list[Station]:
        """Get all stations, sorted by name."""
        return sorted(self._stations.values(), key=lambda s: (s.name, s.id))

    def __len__(self) -> int:
        return len(self._stations)

    async def refresh(self) -> dict[str, Station]:
        """Fetch both feeds, merge them and replace the station set.

        If neither feed delivered a single record the previous set is kept.
        """
        async with self._refresh_lock:
            provider_a_records, provider_b_records = await asyncio.gather(
                self._provider_a_feed.fetch_records(),
                self._provider_b_feed.fetch_records(),
            )
            if not provider_a_records and not provider_b_records:
                logger.warning(
                    f"No station records from {self._provider_a_feed.name} or "
                    f"{self._provider_b_feed.name}, keeping {len(self._stations)} stations"
                )
                return self._stations

            self._stations = self._merger.merge(provider_a_records, provider_b_records)
            self._last_refresh = datetime.now(UTC)
            logger.info(f"Station catalog refreshed with {len(self._stations)} stations")
            return self._stations
