"""Contracts (protocols) implemented by application services and adapters."""

from veloroute.domain.contracts.reachability_oracle import ReachabilityOracleProtocol
from veloroute.domain.contracts.route_listener import RouteListenerProtocol
from veloroute.domain.contracts.station_poller import (
    RefreshableCatalogProtocol,
    StationPollerProtocol,
)

__all__ = [
    "ReachabilityOracleProtocol",
    "RouteListenerProtocol",
    "RefreshableCatalogProtocol",
    "StationPollerProtocol",
]
