"""Minimal reachability budget between two stations."""

import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from veloroute.domain.contracts.reachability_oracle import ReachabilityOracleProtocol
    from veloroute.domain.models.station import Station

MIN_BUDGET_MINUTES = 1
MAX_BUDGET_MINUTES = 60


async def find_minimal_budget(
    is_reachable: Callable[[int], Awaitable[bool]],
    low: int = MIN_BUDGET_MINUTES,
    high: int = MAX_BUDGET_MINUTES,
) -> int:
    """Find the smallest budget in [low, high] for which `is_reachable` holds.

    Relies on reachability being monotonic in the budget. Probes are made one
    after the other since each midpoint depends on the previous answer, so a
    [1, 60] domain costs at most 6 calls.

    Args:
        is_reachable: Async predicate over a budget in minutes.
        low: Smallest budget to consider.
        high: Largest budget to consider.

    Returns:
        The minimal reachable budget, or `high` if no probe succeeded.
    """
    if low > high:
        raise ValueError(f"Invalid budget range [{low}, {high}]")

    best = high
    while low <= high:
        mid = (low + high) // 2
        if await is_reachable(mid):
            best = mid
            high = mid - 1
        else:
            low = mid + 1
    return best


class DistanceEstimator:
    """Estimates the cycling time between stations in whole minutes."""

    def __init__(
        self,
        oracle: "ReachabilityOracleProtocol",
        max_budget_minutes: int = MAX_BUDGET_MINUTES,
    ) -> None:
        """Initialize with a reachability oracle and the search cap."""
        self._oracle = oracle
        self._max_budget_minutes = max_budget_minutes

    @property
    def max_budget_minutes(self) -> int:
        """Upper bound of the search; returned when nothing was reachable."""
        return self._max_budget_minutes

    async def minimal_budget(self, origin: "Station", destination: "Station") -> int:
        """Get the smallest budget at which destination is reachable from origin."""
        if origin.id == destination.id:
            return MIN_BUDGET_MINUTES

        origin_point = origin.point
        destination_point = destination.point

        async def probe(budget_minutes: int) -> bool:
            return await self._oracle.is_reachable(origin_point, destination_point, budget_minutes)

        budget = await find_minimal_budget(probe, MIN_BUDGET_MINUTES, self._max_budget_minutes)
        logger.debug(f"Minimal budget {origin.id} -> {destination.id}: {budget} min")
        return budget
