"""Route error domain model."""

from pydantic import BaseModel, ConfigDict

TOO_FAR = "too_far"
DISCARDED = "discarded"
UNKNOWN_STATION = "unknown_station"


class RouteError(BaseModel):
    """Why a route operation was rejected. Recoverable, shown to the user."""

    model_config = ConfigDict(frozen=True)

    kind: str
    reason: str
    required_minutes: int | None = None
