"""Mapbox isochrone repository adapter."""

import logging
from typing import Any

from veloroute.adapters.mapbox_api.constants import (
    DEFAULT_PROFILE,
    ISOCHRONE_PATH,
    MAX_CONTOUR_MINUTES,
    MAX_CONTOURS,
)
from veloroute.adapters.mapbox_api.http_client import MapboxHttpClient
from veloroute.domain.ports.isochrone_repository import IsochroneRepository

logger = logging.getLogger(__name__)


class MapboxIsochroneRepository(IsochroneRepository):
    """Adapter for the Mapbox Isochrone API."""

    def __init__(self, http_client: MapboxHttpClient, profile: str = DEFAULT_PROFILE) -> None:
        """Initialize with a Mapbox HTTP client and routing profile."""
        self._http_client = http_client
        self._profile = profile

    async def get_isochrones(
        self, longitude: float, latitude: float, contours_minutes: list[int]
    ) -> dict[str, Any] | None:
        """Get isochrone polygons around a point.

        Args:
            longitude: Longitude of the center.
            latitude: Latitude of the center.
            contours_minutes: Travel times in minutes, 1 to 60, at most 4.

        Returns:
            GeoJSON FeatureCollection with a `contour` property per feature, or None.
        """
        contours = sorted(set(contours_minutes))
        if not contours or len(contours) > MAX_CONTOURS:
            logger.warning(f"Unsupported number of isochrone contours: {contours}")
            return None
        if any(not 1 <= c <= MAX_CONTOUR_MINUTES for c in contours):
            logger.warning(f"Isochrone contours out of range: {contours}")
            return None

        path = ISOCHRONE_PATH.format(profile=self._profile, longitude=longitude, latitude=latitude)
        params = {
            "contours_minutes": ",".join(str(c) for c in contours),
            "polygons": "true",
        }
        data = await self._http_client.get_json(path, params)
        if not isinstance(data, dict) or data.get("type") != "FeatureCollection":
            if data is not None:
                logger.warning("Mapbox isochrone response is not a FeatureCollection")
            return None
        return data
