"""Tests for CLI helpers and wiring."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from veloroute.adapters.config import AppConfig
from veloroute.cli import (
    build_route,
    format_plan,
    format_station,
    main,
    show_reach,
    station_to_dict,
)
from veloroute.domain.models import Leg, Route, RoutePlan, RouteUpdate, Station
from veloroute.main import build_components


def make_station(station_id: str = "231") -> Station:
    """Create a station for testing."""
    return Station(
        id=station_id,
        latitude=47.3769,
        longitude=8.5417,
        name="Hauptbahnhof",
        address="",
        status="Active",
        ebikes=1,
        regular_bikes=3,
        source="both",
    )


def test_station_to_dict_includes_total() -> None:
    """Given a station, when converting to dict, then the derived total is included."""
    data = station_to_dict(make_station())

    assert data["id"] == "231"
    assert data["total_bikes"] == 4
    assert data["source"] == "both"


def test_format_station_shows_counts() -> None:
    """Given a station, when formatting, then counts and source are shown."""
    line = format_station(make_station())

    assert "Hauptbahnhof" in line
    assert "4 bikes: 1 e / 3 regular, both" in line


def test_format_plan_lists_legs_and_total() -> None:
    """Given a plan with one leg and one missing leg, when formatting, then both are listed."""
    plan = RoutePlan(
        route=Route(),
        legs=[Leg("a", "b", distance_meters=2500.0, duration_seconds=600.0)],
        missing_legs=[("b", "c")],
    )

    text = format_plan(plan)

    assert "a -> b: 2.5 km, 10 min" in text
    assert "b -> c: directions unavailable" in text
    assert "Total: 2.5 km, 10 min (incomplete)" in text


@pytest.mark.asyncio
async def test_main_without_command_returns_error(capsys: pytest.CaptureFixture[str]) -> None:
    """Given no subcommand, when running, then help is printed and 1 returned."""
    assert await main([]) == 1
    assert "usage" in capsys.readouterr().out.lower()


@pytest.mark.asyncio
async def test_build_route_reports_rejected_stops(capsys: pytest.CaptureFixture[str]) -> None:
    """Given a rejected stop, when building a route, then it is reported and exit code is 1."""
    components = MagicMock()
    components.catalog.refresh = AsyncMock()
    builder = components.route_builder
    route = Route(stations=(make_station("a"), make_station("b")))
    builder.route = route
    builder.select = AsyncMock(
        side_effect=[
            RouteUpdate(route=route),
            RouteUpdate(
                route=route,
                error=MagicMock(reason="c is not reachable from b within 30 minutes"),
            ),
        ]
    )
    components.route_planner.plan = AsyncMock(
        return_value=RoutePlan(route=route, legs=[Leg("a", "b", 1000.0, 300.0)])
    )

    result = await build_route(components, ["b", "c"])

    captured = capsys.readouterr()
    assert result == 1
    assert "Skipped c: c is not reachable from b within 30 minutes" in captured.err
    assert "a -> b: 1.0 km, 5 min" in captured.out


def test_build_components_wires_configuration() -> None:
    """Given a configuration, when building components, then settings reach the services."""
    config = AppConfig(
        mapbox_api_key="pk.test",
        route_budget_minutes=25,
        max_budget_minutes=50,
        isochrone_contours=[15],
    )

    components = build_components(config, session=None)

    assert components.route_builder.budget_minutes == 25
    assert components.estimator.max_budget_minutes == 50
    assert components.isochrone_service.contours_minutes == [15]
    assert components.station_poller.refresh_interval_seconds == 300


@pytest.mark.asyncio
async def test_show_reach_at_search_cap_does_not_claim_unreachable(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Given a budget at the search cap, when showing reach, then the cap is named instead."""
    components = MagicMock()
    components.catalog.refresh = AsyncMock()
    components.catalog.get = lambda station_id: make_station(station_id)
    components.estimator.minimal_budget = AsyncMock(return_value=60)
    components.estimator.max_budget_minutes = 60
    components.config.route_budget_minutes = 30

    result = await show_reach(components, "231", "187")

    out = capsys.readouterr().out
    assert result == 0
    assert "187 is not reachable from 231 within the search cap of 60 minutes" in out
    assert "too far" in out
