"""Station feed port."""

from typing import Any, Protocol


class StationFeed(Protocol):
    """Port for fetching raw station records from one provider."""

    name: str

    async def fetch_records(self) -> list[dict[str, Any]]:
        """Fetch the provider's raw station records, or an empty list on failure."""
        ...
