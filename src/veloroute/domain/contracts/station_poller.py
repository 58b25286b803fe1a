"""Protocol for periodic station reloads."""

from typing import Protocol


class StationPollerProtocol(Protocol):
    """Protocol for polling the station feeds and refreshing the catalog."""

    async def start(self) -> None:
        """Start the station poller."""
        ...

    async def stop(self) -> None:
        """Stop the station poller."""
        ...


class RefreshableCatalogProtocol(Protocol):
    """Protocol for a station set that can be reloaded from its feeds."""

    async def refresh(self) -> object:
        """Reload the station set."""
        ...
