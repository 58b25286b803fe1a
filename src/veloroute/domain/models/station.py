"""Station domain model."""

from dataclasses import dataclass

from veloroute.domain.models.point import Point

SOURCE_PROVIDER_A = "provider_a"
SOURCE_PROVIDER_B = "provider_b"
SOURCE_BOTH = "both"


@dataclass(frozen=True)
class Station:
    """A bike-share dock after both provider feeds have been merged."""

    id: str
    latitude: float
    longitude: float
    name: str
    address: str
    status: str
    ebikes: int
    regular_bikes: int
    source: str  # provider_a, provider_b or both

    @property
    def total_bikes(self) -> int:
        """Total number of bikes, electric and regular."""
        return self.ebikes + self.regular_bikes

    @property
    def point(self) -> Point:
        """Position of the station."""
        return Point(longitude=self.longitude, latitude=self.latitude)
