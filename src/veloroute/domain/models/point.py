"""Point domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A geographic position in degrees, longitude first as in GeoJSON."""

    longitude: float
    latitude: float
