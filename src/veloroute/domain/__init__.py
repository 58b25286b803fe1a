"""Domain layer - core business logic and models."""

from veloroute.domain.models import (
    Leg,
    Point,
    Route,
    RouteError,
    RoutePlan,
    RouteUpdate,
    Station,
)
from veloroute.domain.ports import (
    DirectionsRepository,
    IsochroneRepository,
    StationFeed,
)

__all__ = [
    "DirectionsRepository",
    "IsochroneRepository",
    "Leg",
    "Point",
    "Route",
    "RouteError",
    "RoutePlan",
    "RouteUpdate",
    "Station",
    "StationFeed",
]
