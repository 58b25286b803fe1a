"""Protocol for route change notifications."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from veloroute.domain.models.route import Route


class RouteListenerProtocol(Protocol):
    """Protocol for consumers that re-render when the route changes."""

    async def route_changed(self, route: "Route") -> None:
        """Handle the new state of the route.

        Args:
            route: The route after the change.
        """
        ...
