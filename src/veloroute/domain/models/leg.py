"""Leg and route plan domain models."""

from dataclasses import dataclass, field
from typing import Any

from veloroute.domain.models.route import Route


@dataclass(frozen=True)
class Leg:
    """Cycling directions between two consecutive route stations."""

    origin_id: str
    destination_id: str
    distance_meters: float
    duration_seconds: float
    geometry: dict[str, Any] | None = None  # GeoJSON, passed through to the map


@dataclass(frozen=True)
class RoutePlan:
    """A route with the legs that could be fetched for it."""

    route: Route
    legs: list[Leg] = field(default_factory=list)
    missing_legs: list[tuple[str, str]] = field(default_factory=list)  # (origin_id, destination_id)

    @property
    def total_distance_meters(self) -> float:
        """Sum of the known leg distances."""
        return sum(leg.distance_meters for leg in self.legs)

    @property
    def total_duration_seconds(self) -> float:
        """Sum of the known leg durations."""
        return sum(leg.duration_seconds for leg in self.legs)

    @property
    def is_complete(self) -> bool:
        """True if directions were fetched for every leg."""
        return not self.missing_legs
