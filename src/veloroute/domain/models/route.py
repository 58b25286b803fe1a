"""Route domain model."""

from dataclasses import dataclass

from veloroute.domain.models.station import Station


@dataclass(frozen=True)
class Route:
    """Ordered stations of a route, in visiting order, without duplicate ids."""

    stations: tuple[Station, ...] = ()

    @property
    def station_ids(self) -> list[str]:
        """Ids of the stations in visiting order."""
        return [station.id for station in self.stations]

    @property
    def last(self) -> Station | None:
        """The most recently appended station, if any."""
        return self.stations[-1] if self.stations else None

    def contains(self, station_id: str) -> bool:
        """Check whether a station is part of the route."""
        return any(station.id == station_id for station in self.stations)

    def __len__(self) -> int:
        return len(self.stations)
