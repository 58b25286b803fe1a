"""Application services (use cases) for route building."""

from veloroute.application.distance_estimator import DistanceEstimator, find_minimal_budget
from veloroute.application.isochrone_service import IsochroneService
from veloroute.application.reachability_oracle import IsochroneReachabilityOracle
from veloroute.application.route_builder import RouteBuilder
from veloroute.application.route_planner import RoutePlanner
from veloroute.application.station_catalog import StationCatalog
from veloroute.application.station_merger import StationMerger

__all__ = [
    "DistanceEstimator",
    "IsochroneReachabilityOracle",
    "IsochroneService",
    "RouteBuilder",
    "RoutePlanner",
    "StationCatalog",
    "StationMerger",
    "find_minimal_budget",
]
