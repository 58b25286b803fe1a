"""Ports (interfaces) for the ports-and-adapters architecture."""

from veloroute.domain.ports.directions_repository import DirectionsRepository
from veloroute.domain.ports.isochrone_repository import IsochroneRepository
from veloroute.domain.ports.station_feed import StationFeed

__all__ = [
    "DirectionsRepository",
    "IsochroneRepository",
    "StationFeed",
]
