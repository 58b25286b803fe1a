"""Isochrone repository port."""

from typing import Any, Protocol


class IsochroneRepository(Protocol):
    """Port for retrieving travel-time polygons around a point."""

    async def get_isochrones(
        self, longitude: float, latitude: float, contours_minutes: list[int]
    ) -> dict[str, Any] | None:
        """Get a GeoJSON FeatureCollection with one polygon per contour.

        Returns None if the service could not be reached or answered with an error.
        """
        ...
