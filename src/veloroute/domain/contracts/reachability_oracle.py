"""Protocol for answering reachability questions."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from veloroute.domain.models.point import Point


class ReachabilityOracleProtocol(Protocol):
    """Protocol for checking whether a point is within a cycling time budget."""

    async def is_reachable(
        self, origin: "Point", destination: "Point", budget_minutes: int
    ) -> bool:
        """Check whether destination can be reached from origin within the budget.

        Implementations never raise; any failure is reported as unreachable.

        Args:
            origin: Starting point.
            destination: Point to reach.
            budget_minutes: Travel-time budget in minutes.

        Returns:
            True if destination is reachable within budget_minutes.
        """
        ...
