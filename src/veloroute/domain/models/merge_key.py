"""Merge key domain model."""

from dataclasses import dataclass

DEFAULT_MERGE_PRECISION = 3  # ~111 m grid


@dataclass(frozen=True)
class MergeKey:
    """Coordinates rounded to a fixed number of decimals.

    Stations from different providers that share a key are treated as the
    same physical dock.
    """

    latitude: str
    longitude: str

    @classmethod
    def from_coordinates(
        cls, latitude: float, longitude: float, precision: int = DEFAULT_MERGE_PRECISION
    ) -> "MergeKey":
        """Build a key by rounding both coordinates to `precision` decimals."""
        return cls(latitude=f"{latitude:.{precision}f}", longitude=f"{longitude:.{precision}f}")
