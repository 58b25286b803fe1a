"""Adapters layer - external system integrations."""

from veloroute.adapters.config import AppConfig
from veloroute.adapters.mapbox_api import (
    MapboxDirectionsRepository,
    MapboxHttpClient,
    MapboxIsochroneRepository,
)
from veloroute.adapters.pollers import StationPoller
from veloroute.adapters.station_feeds import HttpStationFeed

__all__ = [
    "AppConfig",
    "HttpStationFeed",
    "MapboxDirectionsRepository",
    "MapboxHttpClient",
    "MapboxIsochroneRepository",
    "StationPoller",
]
