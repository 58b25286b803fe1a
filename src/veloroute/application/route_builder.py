"""Route builder enforcing the reachability budget between consecutive stops."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from veloroute.domain.models.route import Route
from veloroute.domain.models.route_error import (
    DISCARDED,
    TOO_FAR,
    UNKNOWN_STATION,
    RouteError,
)
from veloroute.domain.models.route_update import RouteUpdate

if TYPE_CHECKING:
    from veloroute.application.distance_estimator import DistanceEstimator
    from veloroute.application.station_catalog import StationCatalog
    from veloroute.domain.contracts.route_listener import RouteListenerProtocol
    from veloroute.domain.models.station import Station

logger = logging.getLogger(__name__)

DEFAULT_ROUTE_BUDGET_MINUTES = 30


@dataclass(eq=False)
class _PendingAppend:
    """An append waiting for the lock or for its reachability answer."""

    station_id: str
    discarded: bool = False


class RouteBuilder:
    """Owns one route and serializes every change to it.

    The reachability budget is checked only when a station is appended.
    Removing a station in the middle joins its neighbours without a new
    check, unless `revalidate_on_remove` is set; then the route is cut
    before the first station that is out of reach of its new predecessor.
    """

    def __init__(
        self,
        estimator: DistanceEstimator,
        budget_minutes: int = DEFAULT_ROUTE_BUDGET_MINUTES,
        revalidate_on_remove: bool = False,
        catalog: StationCatalog | None = None,
    ) -> None:
        """Initialize an empty route.

        Args:
            estimator: Estimates minimal cycling time between stations.
            budget_minutes: Maximum minutes allowed between consecutive stops.
            revalidate_on_remove: Re-check the adjacency created by a removal.
            catalog: Station catalog used to resolve selection events by id.
        """
        self._estimator = estimator
        self._budget_minutes = budget_minutes
        self._revalidate_on_remove = revalidate_on_remove
        self._catalog = catalog
        self._route = Route()
        self._lock = asyncio.Lock()
        self._pending: list[_PendingAppend] = []
        self._listeners: list[RouteListenerProtocol] = []

    @property
    def route(self) -> Route:
        """The current route."""
        return self._route

    @property
    def budget_minutes(self) -> int:
        """Maximum minutes allowed between consecutive stops."""
        return self._budget_minutes

    def subscribe(self, listener: RouteListenerProtocol) -> None:
        """Register a listener that is notified after every route change."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: RouteListenerProtocol) -> None:
        """Remove a previously registered listener."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def is_pending(self, station_id: str) -> bool:
        """Check whether an append of the station is in flight and still wanted."""
        return any(p.station_id == station_id and not p.discarded for p in self._pending)

    async def try_append(self, candidate: Station) -> RouteUpdate:
        """Append a station if it is reachable from the last one within the budget."""
        pending = _PendingAppend(candidate.id)
        self._pending.append(pending)
        try:
            async with self._lock:
                before = self._route
                update = await self._append_locked(candidate, pending)
        finally:
            self._pending.remove(pending)

        if update.route is not before:
            await self._notify(update.route)
        return update

    async def _append_locked(self, candidate: Station, pending: _PendingAppend) -> RouteUpdate:
        if pending.discarded:
            return self._discarded(candidate)
        if self._route.contains(candidate.id):
            return RouteUpdate(route=self._route)

        last = self._route.last
        if last is not None:
            required = await self._estimator.minimal_budget(last, candidate)
            if pending.discarded:
                return self._discarded(candidate)
            if required > self._budget_minutes:
                logger.info(
                    f"Station {candidate.id} is too far from {last.id}: "
                    f"needs {required} min, budget is {self._budget_minutes} min"
                )
                return RouteUpdate(
                    route=self._route,
                    error=RouteError(
                        kind=TOO_FAR,
                        reason=(
                            f"{candidate.name or candidate.id} is not reachable from "
                            f"{last.name or last.id} within {self._budget_minutes} minutes"
                        ),
                        required_minutes=required,
                    ),
                )

        self._route = Route(stations=(*self._route.stations, candidate))
        logger.debug(f"Appended station {candidate.id}, route has {len(self._route)} stops")
        return RouteUpdate(route=self._route)

    def _discarded(self, candidate: Station) -> RouteUpdate:
        logger.debug(f"Discarding abandoned append of station {candidate.id}")
        return RouteUpdate(
            route=self._route,
            error=RouteError(
                kind=DISCARDED,
                reason=f"Selection of {candidate.name or candidate.id} was withdrawn",
            ),
        )

    async def toggle(self, station: Station) -> RouteUpdate:
        """Remove the station if it is selected, otherwise try to append it."""
        if self._route.contains(station.id) or self.is_pending(station.id):
            return RouteUpdate(route=await self.remove(station.id))
        return await self.try_append(station)

    async def remove(self, station_id: str) -> Route:
        """Remove a station by id, keeping the order of the others.

        Removing an id that is not on the route leaves it unchanged.
        """
        for pending in self._pending:
            if pending.station_id == station_id:
                pending.discarded = True

        async with self._lock:
            before = self._route
            index = next(
                (i for i, s in enumerate(before.stations) if s.id == station_id), None
            )
            if index is None:
                return before

            remaining = before.stations[:index] + before.stations[index + 1 :]
            if self._revalidate_on_remove:
                remaining = await self._revalidated(remaining, index)
            self._route = Route(stations=remaining)
            route = self._route

        await self._notify(route)
        return route

    async def _revalidated(self, stations: tuple[Station, ...], index: int) -> tuple[Station, ...]:
        """Cut the route at `index` if the joined neighbours are out of reach."""
        if index == 0 or index >= len(stations):
            return stations

        previous, following = stations[index - 1], stations[index]
        required = await self._estimator.minimal_budget(previous, following)
        if required > self._budget_minutes:
            logger.info(
                f"Removal joined {previous.id} and {following.id} ({required} min), "
                f"dropping {len(stations) - index} following stop(s)"
            )
            return stations[:index]
        return stations

    async def clear(self) -> Route:
        """Remove all stations and withdraw appends in flight."""
        for pending in self._pending:
            pending.discarded = True

        async with self._lock:
            changed = len(self._route) > 0
            self._route = Route()
            route = self._route

        if changed:
            await self._notify(route)
        return route

    async def select(self, station_id: str) -> RouteUpdate:
        """Handle a selection event from the map."""
        station = self._resolve(station_id)
        if station is None:
            return self._unknown(station_id)
        return await self.try_append(station)

    async def deselect(self, station_id: str) -> RouteUpdate:
        """Handle a deselection event from the map."""
        return RouteUpdate(route=await self.remove(station_id))

    def _resolve(self, station_id: str) -> Station | None:
        if self._catalog is None:
            return None
        return self._catalog.get(station_id)

    def _unknown(self, station_id: str) -> RouteUpdate:
        logger.warning(f"Selection of unknown station {station_id}")
        return RouteUpdate(
            route=self._route,
            error=RouteError(kind=UNKNOWN_STATION, reason=f"Unknown station {station_id}"),
        )

    async def _notify(self, route: Route) -> None:
        for listener in list(self._listeners):
            try:
                await listener.route_changed(route)
            except Exception as e:
                logger.error(f"Route listener failed: {e}", exc_info=True)
