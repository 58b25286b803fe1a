"""Reachability oracle backed by isochrone polygons."""

import logging
from typing import TYPE_CHECKING, Any

from shapely.geometry import Point as ShapelyPoint
from shapely.geometry import shape

from veloroute.domain.contracts.reachability_oracle import ReachabilityOracleProtocol
from veloroute.domain.models.point import Point

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from veloroute.domain.ports import IsochroneRepository


class IsochroneReachabilityOracle(ReachabilityOracleProtocol):
    """Answers reachability by testing the destination against an isochrone polygon.

    One isochrone request is made per question. Transport failures and
    malformed payloads are reported as unreachable.
    """

    def __init__(self, isochrone_repository: "IsochroneRepository") -> None:
        """Initialize with the repository that serves isochrone polygons."""
        self._isochrone_repository = isochrone_repository

    async def is_reachable(self, origin: Point, destination: Point, budget_minutes: int) -> bool:
        """Check whether destination lies inside the budget isochrone around origin."""
        try:
            collection = await self._isochrone_repository.get_isochrones(
                origin.longitude, origin.latitude, [budget_minutes]
            )
            if collection is None:
                return False
            return self._covers(collection, destination)
        except Exception as e:
            logger.warning(
                f"Reachability check failed for {budget_minutes} min from "
                f"({origin.longitude}, {origin.latitude}): {e}"
            )
            return False

    @staticmethod
    def _covers(collection: dict[str, Any], destination: Point) -> bool:
        """Check whether any polygon of the collection covers the destination."""
        features = collection.get("features")
        if not isinstance(features, list):
            logger.warning("Isochrone payload has no feature list")
            return False

        target = ShapelyPoint(destination.longitude, destination.latitude)
        for feature in features:
            geometry = feature.get("geometry") if isinstance(feature, dict) else None
            if not geometry:
                continue
            polygon = shape(geometry)
            if polygon.geom_type == "LineString":
                # Mapbox returns contour lines unless polygons=true was requested
                continue
            if polygon.covers(target):
                return True
        return False
