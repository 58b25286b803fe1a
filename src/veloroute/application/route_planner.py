"""Per-leg cycling directions for a route."""

import logging
from typing import TYPE_CHECKING

from veloroute.domain.models.leg import Leg, RoutePlan

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from veloroute.domain.models.route import Route
    from veloroute.domain.ports import DirectionsRepository


class RoutePlanner:
    """Fetches directions for each pair of consecutive stations."""

    def __init__(self, directions_repository: "DirectionsRepository") -> None:
        """Initialize with a directions repository."""
        self._directions_repository = directions_repository

    async def plan(self, route: "Route") -> RoutePlan:
        """Get distance, duration and path geometry for every leg of the route.

        Legs are fetched one after the other. A leg whose directions could not
        be fetched is listed in `missing_legs` instead of failing the plan.
        """
        legs: list[Leg] = []
        missing: list[tuple[str, str]] = []

        for origin, destination in zip(route.stations, route.stations[1:], strict=False):
            directions = await self._directions_repository.get_directions(
                origin.longitude, origin.latitude, destination.longitude, destination.latitude
            )
            if directions is None:
                logger.warning(f"No directions for leg {origin.id} -> {destination.id}")
                missing.append((origin.id, destination.id))
                continue

            legs.append(
                Leg(
                    origin_id=origin.id,
                    destination_id=destination.id,
                    distance_meters=float(directions.get("distance_meters", 0.0)),
                    duration_seconds=float(directions.get("duration_seconds", 0.0)),
                    geometry=directions.get("geometry"),
                )
            )

        return RoutePlan(route=route, legs=legs, missing_legs=missing)
