"""Directions repository port."""

from typing import Any, Protocol


class DirectionsRepository(Protocol):
    """Port for retrieving cycling directions between two points."""

    async def get_directions(
        self,
        origin_longitude: float,
        origin_latitude: float,
        destination_longitude: float,
        destination_latitude: float,
    ) -> dict[str, Any] | None:
        """Get `distance_meters`, `duration_seconds` and `geometry` for the fastest path.

        Returns None if no directions could be fetched.
        """
        ...
