"""Mapbox directions repository adapter."""

import logging
from typing import Any

from veloroute.adapters.mapbox_api.constants import DEFAULT_PROFILE, DIRECTIONS_PATH
from veloroute.adapters.mapbox_api.http_client import MapboxHttpClient
from veloroute.domain.ports.directions_repository import DirectionsRepository

logger = logging.getLogger(__name__)


class MapboxDirectionsRepository(DirectionsRepository):
    """Adapter for the Mapbox Directions API."""

    def __init__(self, http_client: MapboxHttpClient, profile: str = DEFAULT_PROFILE) -> None:
        """Initialize with a Mapbox HTTP client and routing profile."""
        self._http_client = http_client
        self._profile = profile

    async def get_directions(
        self,
        origin_longitude: float,
        origin_latitude: float,
        destination_longitude: float,
        destination_latitude: float,
    ) -> dict[str, Any] | None:
        """Get the fastest cycling path between two points."""
        path = DIRECTIONS_PATH.format(
            profile=self._profile,
            origin_longitude=origin_longitude,
            origin_latitude=origin_latitude,
            destination_longitude=destination_longitude,
            destination_latitude=destination_latitude,
        )
        data = await self._http_client.get_json(
            path, {"geometries": "geojson", "overview": "full"}
        )
        if data is None:
            return None
        return self._parse_route(data)

    @staticmethod
    def _parse_route(data: Any) -> dict[str, Any] | None:
        """Extract distance, duration and geometry of the first route."""
        if not isinstance(data, dict):
            return None
        if data.get("code", "Ok") != "Ok":
            logger.warning(f"Mapbox directions returned code {data.get('code')}: {data.get('message', '')}")
            return None

        routes = data.get("routes")
        if not isinstance(routes, list) or not routes or not isinstance(routes[0], dict):
            logger.warning("Mapbox directions response contains no route")
            return None

        route = routes[0]
        try:
            return {
                "distance_meters": float(route["distance"]),
                "duration_seconds": float(route["duration"]),
                "geometry": route.get("geometry"),
            }
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Malformed Mapbox directions route: {e}")
            return None
