"""Mapbox API adapters."""

from veloroute.adapters.mapbox_api.http_client import MapboxHttpClient
from veloroute.adapters.mapbox_api.mapbox_directions_repository import (
    MapboxDirectionsRepository,
)
from veloroute.adapters.mapbox_api.mapbox_isochrone_repository import (
    MapboxIsochroneRepository,
)

__all__ = [
    "MapboxDirectionsRepository",
    "MapboxHttpClient",
    "MapboxIsochroneRepository",
]
