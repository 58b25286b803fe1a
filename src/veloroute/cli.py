"""Command line interface for building bike-share routes."""

import argparse
import asyncio
import json
import logging
import sys
from dataclasses import asdict
from typing import Any

import aiohttp

from veloroute.adapters.config import AppConfig
from veloroute.domain.models import Route, RoutePlan, Station
from veloroute.main import Components, build_components, configure_logging

logger = logging.getLogger(__name__)


class PrintingRouteListener:
    """Prints the route after every change."""

    async def route_changed(self, route: Route) -> None:
        """Print the stops of the changed route."""
        stops = " -> ".join(route.station_ids) if route.stations else "(empty)"
        print(f"Route: {stops}")


def station_to_dict(station: Station) -> dict[str, Any]:
    """Convert a station to a JSON-friendly dict."""
    data = asdict(station)
    data["total_bikes"] = station.total_bikes
    return data


def format_station(station: Station) -> str:
    """Format a station as a single line."""
    return (
        f"{station.id:>8}  {station.name or '(unnamed)'}  "
        f"[{station.status}, {station.total_bikes} bikes: "
        f"{station.ebikes} e / {station.regular_bikes} regular, {station.source}]"
    )


def format_plan(plan: RoutePlan) -> str:
    """Format a route plan with one line per leg and a total."""
    lines = []
    for leg in plan.legs:
        lines.append(
            f"  {leg.origin_id} -> {leg.destination_id}: "
            f"{leg.distance_meters / 1000:.1f} km, {leg.duration_seconds / 60:.0f} min"
        )
    for origin_id, destination_id in plan.missing_legs:
        lines.append(f"  {origin_id} -> {destination_id}: directions unavailable")
    lines.append(
        f"Total: {plan.total_distance_meters / 1000:.1f} km, "
        f"{plan.total_duration_seconds / 60:.0f} min"
        f"{'' if plan.is_complete else ' (incomplete)'}"
    )
    return "\n".join(lines)


async def list_stations(components: Components, source: str | None, format_json: bool) -> int:
    """Print the merged stations, optionally filtered by source."""
    await components.catalog.refresh()
    stations = [s for s in components.catalog.all() if source is None or s.source == source]
    if format_json:
        print(json.dumps([station_to_dict(s) for s in stations], indent=2, ensure_ascii=False))
        return 0
    if not stations:
        print("No stations found.", file=sys.stderr)
        return 1
    print(f"\n{len(stations)} station(s):\n")
    for station in stations:
        print(format_station(station))
    return 0


def _require_station(components: Components, station_id: str) -> Station | None:
    station = components.catalog.get(station_id)
    if station is None:
        print(f"Station {station_id} not found.", file=sys.stderr)
    return station


async def show_reach(components: Components, origin_id: str, destination_id: str) -> int:
    """Print the minimal cycling budget between two stations."""
    await components.catalog.refresh()
    origin = _require_station(components, origin_id)
    destination = _require_station(components, destination_id)
    if origin is None or destination is None:
        return 1

    budget = await components.estimator.minimal_budget(origin, destination)
    limit = components.config.route_budget_minutes
    if budget >= components.estimator.max_budget_minutes:
        print(
            f"{destination_id} is not reachable from {origin_id} within the search cap "
            f"of {budget} minutes"
        )
    else:
        print(f"{destination_id} is reachable from {origin_id} within {budget} minutes")
    print(f"Route budget: {limit} minutes ({'ok' if budget <= limit else 'too far'})")
    return 0


async def build_route(components: Components, station_ids: list[str]) -> int:
    """Select the given stations in order and print the resulting plan."""
    await components.catalog.refresh()
    builder = components.route_builder
    builder.subscribe(PrintingRouteListener())

    rejected = 0
    for station_id in station_ids:
        update = await builder.select(station_id)
        if update.error is not None:
            rejected += 1
            print(f"Skipped {station_id}: {update.error.reason}", file=sys.stderr)

    if len(builder.route) < 2:
        print("Route needs at least two reachable stations for directions.")
        return 1 if rejected else 0

    plan = await components.route_planner.plan(builder.route)
    print(format_plan(plan))
    return 1 if rejected else 0


async def show_isochrones(components: Components, station_id: str) -> int:
    """Print the isochrone FeatureCollection around a station."""
    await components.catalog.refresh()
    station = _require_station(components, station_id)
    if station is None:
        return 1
    collection = await components.isochrone_service.contours(station)
    print(json.dumps(collection, indent=2))
    return 0 if collection["features"] else 1


async def watch_stations(components: Components) -> int:
    """Keep the station catalog refreshed until interrupted."""
    await components.station_poller.start()
    try:
        while True:
            await asyncio.sleep(components.config.station_refresh_interval_seconds)
            logger.info(f"{len(components.catalog)} stations loaded")
    finally:
        await components.station_poller.stop()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Bike-share route builder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List merged stations
  veloroute stations

  # Minimal cycling time between two stations
  veloroute reach 231 187

  # Build a route, skipping stops more than 30 minutes apart
  veloroute route 231 187 402

  # 10/20/30 minute isochrones around a station
  veloroute isochrones 231
        """,
    )
    parser.add_argument("--config", help="Path to TOML configuration file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    stations_parser = subparsers.add_parser("stations", help="List merged stations")
    stations_parser.add_argument(
        "--source", choices=["provider_a", "provider_b", "both"], help="Filter by source"
    )
    stations_parser.add_argument("--json", action="store_true", help="Output as JSON")

    reach_parser = subparsers.add_parser("reach", help="Minimal cycling time between stations")
    reach_parser.add_argument("origin_id", help="Origin station ID")
    reach_parser.add_argument("destination_id", help="Destination station ID")

    route_parser = subparsers.add_parser("route", help="Build a route from station IDs")
    route_parser.add_argument("station_ids", nargs="+", help="Station IDs in visiting order")

    isochrones_parser = subparsers.add_parser("isochrones", help="Isochrones around a station")
    isochrones_parser.add_argument("station_id", help="Station ID")

    subparsers.add_parser("watch", help="Reload stations periodically until interrupted")

    return parser


async def _dispatch(args: argparse.Namespace, components: Components) -> int:
    if args.command == "stations":
        return await list_stations(components, args.source, args.json)
    if args.command == "reach":
        return await show_reach(components, args.origin_id, args.destination_id)
    if args.command == "route":
        return await build_route(components, args.station_ids)
    if args.command == "isochrones":
        return await show_isochrones(components, args.station_id)
    if args.command == "watch":
        return await watch_stations(components)
    raise ValueError(f"Unknown command: {args.command}")


async def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        config = AppConfig()
        if args.config:
            config.config_file = args.config
        config.load_toml()
    except (ValueError, FileNotFoundError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    async with aiohttp.ClientSession() as session:
        components = build_components(config, session)
        return await _dispatch(args, components)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    cli_main()
