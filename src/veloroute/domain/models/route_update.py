"""Route update domain model."""

from dataclasses import dataclass

from veloroute.domain.models.route import Route
from veloroute.domain.models.route_error import RouteError


@dataclass(frozen=True)
class RouteUpdate:
    """Outcome of a route operation: the current route and an optional error.

    On error the route is the unchanged route.
    """

    route: Route
    error: RouteError | None = None

    @property
    def ok(self) -> bool:
        """True if the operation was applied."""
        return self.error is None
