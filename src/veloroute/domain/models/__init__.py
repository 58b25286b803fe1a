"""Domain models for bike-share route building."""

from veloroute.domain.models.leg import Leg, RoutePlan
from veloroute.domain.models.merge_key import MergeKey
from veloroute.domain.models.point import Point
from veloroute.domain.models.raw_records import PartnerRecord, PublibikeRecord
from veloroute.domain.models.route import Route
from veloroute.domain.models.route_error import RouteError
from veloroute.domain.models.route_update import RouteUpdate
from veloroute.domain.models.station import Station

__all__ = [
    "Leg",
    "MergeKey",
    "PartnerRecord",
    "Point",
    "PublibikeRecord",
    "Route",
    "RouteError",
    "RoutePlan",
    "RouteUpdate",
    "Station",
]
