"""Raw station records as delivered by the two provider feeds.

Each feed gets its own explicit model so that the merger never has to guess
which provider a dictionary came from.
"""

from pydantic import BaseModel, ConfigDict, Field

EBIKE_VEHICLE_TYPE = "E-Bike"


class PublibikeState(BaseModel):
    """Operational state of a PubliBike station."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str = "Active"


class PublibikeVehicleType(BaseModel):
    """Vehicle type of a docked PubliBike vehicle."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str = ""


class PublibikeVehicle(BaseModel):
    """A vehicle docked at a PubliBike station."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    type: PublibikeVehicleType = Field(default_factory=PublibikeVehicleType)

    @property
    def is_electric(self) -> bool:
        """True for e-bikes."""
        return self.type.name == EBIKE_VEHICLE_TYPE


class PublibikeRecord(BaseModel):
    """Station record from provider A (PubliBike public stations API)."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: int | str
    latitude: float = Field(ge=-90, le=90, allow_inf_nan=False)
    longitude: float = Field(ge=-180, le=180, allow_inf_nan=False)
    name: str = ""
    address: str = ""
    zip: str | int | None = None
    city: str = ""
    state: PublibikeState = Field(default_factory=PublibikeState)
    vehicles: list[PublibikeVehicle] = Field(default_factory=list)

    @property
    def ebike_count(self) -> int:
        """Number of docked e-bikes."""
        return sum(1 for vehicle in self.vehicles if vehicle.is_electric)

    @property
    def regular_bike_count(self) -> int:
        """Number of docked non-electric bikes."""
        return sum(1 for vehicle in self.vehicles if not vehicle.is_electric)

    @property
    def full_address(self) -> str:
        """Street address followed by zip and city, where known."""
        locality = " ".join(part for part in (str(self.zip or ""), self.city) if part)
        return ", ".join(part for part in (self.address, locality) if part)


class PartnerRecord(BaseModel):
    """Station record from provider B. Numeric fields arrive as text."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    station_id: int | str
    station_name: str = ""
    lat: float = Field(ge=-90, le=90, allow_inf_nan=False)
    lng: float = Field(ge=-180, le=180, allow_inf_nan=False)
    station_address: str = ""
    totalElectricalBike: int = Field(default=0, ge=0)  # noqa: N815 - feed field name
    totalNonElectricalBike: int = Field(default=0, ge=0)  # noqa: N815 - feed field name
