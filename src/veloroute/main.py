"""Composition of the application components."""

import logging
import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING

from veloroute.adapters.config import AppConfig
from veloroute.adapters.mapbox_api import (
    MapboxDirectionsRepository,
    MapboxHttpClient,
    MapboxIsochroneRepository,
)
from veloroute.adapters.pollers import StationPoller
from veloroute.adapters.station_feeds import (
    PARTNER_FEED_NAME,
    PUBLIBIKE_FEED_NAME,
    HttpStationFeed,
)
from veloroute.application import (
    DistanceEstimator,
    IsochroneReachabilityOracle,
    IsochroneService,
    RouteBuilder,
    RoutePlanner,
    StationCatalog,
    StationMerger,
)

if TYPE_CHECKING:
    from aiohttp import ClientSession

logger = logging.getLogger(__name__)


def configure_logging(level: int = logging.INFO) -> None:
    """Configure process-wide logging to stderr."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


@dataclass
class Components:
    """Wired application services sharing one HTTP session."""

    config: AppConfig
    catalog: StationCatalog
    estimator: DistanceEstimator
    route_builder: RouteBuilder
    route_planner: RoutePlanner
    isochrone_service: IsochroneService
    station_poller: StationPoller


def build_components(config: AppConfig, session: "ClientSession | None") -> Components:
    """Create all services from configuration.

    Args:
        config: Application configuration.
        session: aiohttp session shared by every adapter.

    Returns:
        The wired components.
    """
    if not config.mapbox_api_key:
        logger.warning("MAPBOX_API_KEY is not set; every station will be treated as unreachable")

    http_client = MapboxHttpClient(
        session,
        access_token=config.mapbox_api_key,
        timeout_seconds=config.mapbox_api_timeout,
        min_delay_seconds=config.mapbox_min_delay_seconds,
    )
    isochrone_repository = MapboxIsochroneRepository(http_client, profile=config.cycling_profile)
    directions_repository = MapboxDirectionsRepository(http_client, profile=config.cycling_profile)

    catalog = StationCatalog(
        HttpStationFeed(PUBLIBIKE_FEED_NAME, config.publibike_stations_url, session),
        HttpStationFeed(PARTNER_FEED_NAME, config.partner_stations_url, session),
        StationMerger(precision=config.merge_precision),
    )
    estimator = DistanceEstimator(
        IsochroneReachabilityOracle(isochrone_repository),
        max_budget_minutes=config.max_budget_minutes,
    )
    route_builder = RouteBuilder(
        estimator,
        budget_minutes=config.route_budget_minutes,
        revalidate_on_remove=config.revalidate_on_remove,
        catalog=catalog,
    )

    return Components(
        config=config,
        catalog=catalog,
        estimator=estimator,
        route_builder=route_builder,
        route_planner=RoutePlanner(directions_repository),
        isochrone_service=IsochroneService(isochrone_repository, config.isochrone_contours),
        station_poller=StationPoller(catalog, config.station_refresh_interval_seconds),
    )
