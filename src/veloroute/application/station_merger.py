"""Merging of the two provider station feeds into one canonical station set."""

import logging
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from veloroute.domain.models.merge_key import DEFAULT_MERGE_PRECISION, MergeKey
from veloroute.domain.models.raw_records import PartnerRecord, PublibikeRecord
from veloroute.domain.models.station import (
    SOURCE_BOTH,
    SOURCE_PROVIDER_A,
    SOURCE_PROVIDER_B,
    Station,
)

logger = logging.getLogger(__name__)

PARTNER_DEFAULT_STATUS = "Active"
PARTNER_ID_PREFIX = "provider_b:"


@dataclass
class _PendingStation:
    """Mutable station while the merge is in progress."""

    id: str
    latitude: float
    longitude: float
    name: str
    address: str
    status: str
    ebikes: int
    regular_bikes: int
    source: str

    def freeze(self) -> Station:
        return Station(
            id=self.id,
            latitude=self.latitude,
            longitude=self.longitude,
            name=self.name,
            address=self.address,
            status=self.status,
            ebikes=self.ebikes,
            regular_bikes=self.regular_bikes,
            source=self.source,
        )


class StationMerger:
    """Reconciles provider A and provider B records keyed by rounded coordinates.

    Provider A is scanned first and owns the identity and descriptive fields
    of a dock. A provider B record on the same key only adds its bike counts.
    Records that fail validation are dropped one by one.
    """

    def __init__(self, precision: int = DEFAULT_MERGE_PRECISION) -> None:
        """Initialize with the number of decimals used for merge keys."""
        self._precision = precision

    def merge(
        self,
        provider_a_records: list[dict[str, Any]],
        provider_b_records: list[dict[str, Any]],
    ) -> dict[str, Station]:
        """Merge raw records from both providers.

        Args:
            provider_a_records: Raw PubliBike station records.
            provider_b_records: Raw partner station records, numeric fields as text.

        Returns:
            Stations keyed by id.
        """
        by_key: dict[MergeKey, _PendingStation] = {}

        for raw in provider_a_records:
            record = self._parse(PublibikeRecord, raw)
            if record is None:
                continue
            key = MergeKey.from_coordinates(record.latitude, record.longitude, self._precision)
            if key in by_key:
                logger.debug(
                    f"Provider A station {record.id} overwrites {by_key[key].id} at {key}"
                )
            by_key[key] = _PendingStation(
                id=str(record.id),
                latitude=record.latitude,
                longitude=record.longitude,
                name=record.name,
                address=record.full_address,
                status=record.state.name,
                ebikes=record.ebike_count,
                regular_bikes=record.regular_bike_count,
                source=SOURCE_PROVIDER_A,
            )

        taken_ids = {pending.id for pending in by_key.values()}
        merged_count = 0
        for raw in provider_b_records:
            record = self._parse(PartnerRecord, raw)
            if record is None:
                continue
            key = MergeKey.from_coordinates(record.lat, record.lng, self._precision)
            existing = by_key.get(key)
            if existing is not None:
                if existing.source == SOURCE_PROVIDER_A:
                    existing.source = SOURCE_BOTH
                existing.ebikes += record.totalElectricalBike
                existing.regular_bikes += record.totalNonElectricalBike
                merged_count += 1
                continue

            station_id = str(record.station_id)
            if station_id in taken_ids:
                station_id = f"{PARTNER_ID_PREFIX}{station_id}"
            taken_ids.add(station_id)
            by_key[key] = _PendingStation(
                id=station_id,
                latitude=record.lat,
                longitude=record.lng,
                name=record.station_name,
                address=record.station_address,
                status=PARTNER_DEFAULT_STATUS,
                ebikes=record.totalElectricalBike,
                regular_bikes=record.totalNonElectricalBike,
                source=SOURCE_PROVIDER_B,
            )

        stations = {pending.id: pending.freeze() for pending in by_key.values()}
        logger.info(
            f"Merged {len(provider_a_records)} provider A and {len(provider_b_records)} "
            f"provider B records into {len(stations)} stations ({merged_count} shared docks)"
        )
        return stations

    @staticmethod
    def _parse(model: type[PublibikeRecord] | type[PartnerRecord], raw: Any) -> Any:
        """Validate one raw record, returning None if it is malformed."""
        try:
            return model.model_validate(raw)
        except ValidationError as e:
            logger.warning(
                f"Dropping malformed {model.__name__}: {e.error_count()} error(s), "
                f"first: {e.errors()[0].get('msg') if e.errors() else 'unknown'}"
            )
            return None
