"""Isochrone contours around a station for display."""

import logging
from typing import TYPE_CHECKING, Any

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from veloroute.domain.models.station import Station
    from veloroute.domain.ports import IsochroneRepository

DEFAULT_CONTOURS_MINUTES = [10, 20, 30]


class IsochroneService:
    """Provides the travel-time rings shown when a station is clicked."""

    def __init__(
        self,
        isochrone_repository: "IsochroneRepository",
        contours_minutes: list[int] | None = None,
    ) -> None:
        """Initialize with a repository and the contours to request."""
        self._isochrone_repository = isochrone_repository
        self._contours_minutes = sorted(contours_minutes or DEFAULT_CONTOURS_MINUTES)

    @property
    def contours_minutes(self) -> list[int]:
        """Contours requested, in ascending order."""
        return list(self._contours_minutes)

    async def contours(self, station: "Station") -> dict[str, Any]:
        """Get the isochrone FeatureCollection for a station.

        Returns an empty FeatureCollection if the service is unavailable, so
        the map simply shows no rings.
        """
        collection = await self._isochrone_repository.get_isochrones(
            station.longitude, station.latitude, self._contours_minutes
        )
        if collection is None or not isinstance(collection.get("features"), list):
            logger.warning(f"No isochrones available for station {station.id}")
            return {"type": "FeatureCollection", "features": []}
        return collection
