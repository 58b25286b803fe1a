"""Tests for the isochrone-backed reachability oracle."""

from typing import Any
from unittest.mock import AsyncMock

import pytest

from veloroute.application.reachability_oracle import IsochroneReachabilityOracle
from veloroute.domain.models import Point

ORIGIN = Point(longitude=8.5417, latitude=47.3769)
INSIDE = Point(longitude=8.55, latitude=47.38)
OUTSIDE = Point(longitude=8.70, latitude=47.50)


def square_collection(contour: int = 20) -> dict[str, Any]:
    """Create a FeatureCollection with one square polygon around the origin."""
    return {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "properties": {"contour": contour},
                "geometry": {
                    "type": "Polygon",
                    "coordinates": [
                        [[8.50, 47.35], [8.60, 47.35], [8.60, 47.40], [8.50, 47.40], [8.50, 47.35]]
                    ],
                },
            }
        ],
    }


def make_oracle(result: Any = None, side_effect: Any = None) -> tuple[IsochroneReachabilityOracle, AsyncMock]:
    """Create an oracle over a mocked isochrone repository."""
    repository = AsyncMock()
    repository.get_isochrones = AsyncMock(return_value=result, side_effect=side_effect)
    return IsochroneReachabilityOracle(repository), repository.get_isochrones


@pytest.mark.asyncio
async def test_destination_inside_polygon_is_reachable() -> None:
    """Given a polygon covering the destination, when checking, then it is reachable."""
    oracle, _ = make_oracle(square_collection())

    assert await oracle.is_reachable(ORIGIN, INSIDE, 20) is True


@pytest.mark.asyncio
async def test_destination_outside_polygon_is_unreachable() -> None:
    """Given a polygon not covering the destination, when checking, then it is unreachable."""
    oracle, _ = make_oracle(square_collection())

    assert await oracle.is_reachable(ORIGIN, OUTSIDE, 20) is False


@pytest.mark.asyncio
async def test_requests_single_contour_at_origin() -> None:
    """Given a budget, when checking, then exactly that contour is requested around the origin."""
    oracle, get_isochrones = make_oracle(square_collection())

    await oracle.is_reachable(ORIGIN, INSIDE, 17)

    get_isochrones.assert_awaited_once_with(ORIGIN.longitude, ORIGIN.latitude, [17])


@pytest.mark.asyncio
async def test_transport_failure_is_unreachable() -> None:
    """Given the repository reports no data, when checking, then it is unreachable."""
    oracle, _ = make_oracle(None)

    assert await oracle.is_reachable(ORIGIN, INSIDE, 20) is False


@pytest.mark.asyncio
async def test_exception_is_not_raised() -> None:
    """Given the repository raises, when checking, then unreachable is returned instead."""
    oracle, _ = make_oracle(side_effect=RuntimeError("boom"))

    assert await oracle.is_reachable(ORIGIN, INSIDE, 20) is False


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"type": "FeatureCollection"},
        {"type": "FeatureCollection", "features": "nope"},
        {"type": "FeatureCollection", "features": [{"geometry": {"type": "Polygon"}}]},
        {"type": "FeatureCollection", "features": [None, {"geometry": None}]},
    ],
)
async def test_malformed_payload_is_unreachable(payload: dict[str, Any]) -> None:
    """Given a malformed payload, when checking, then unreachable is returned."""
    oracle, _ = make_oracle(payload)

    assert await oracle.is_reachable(ORIGIN, INSIDE, 20) is False


@pytest.mark.asyncio
async def test_contour_lines_are_ignored() -> None:
    """Given only contour lines, when checking, then nothing is considered covered."""
    collection = {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "properties": {"contour": 20},
                "geometry": {"type": "LineString", "coordinates": [[8.50, 47.35], [8.60, 47.40]]},
            }
        ],
    }
    oracle, _ = make_oracle(collection)

    assert await oracle.is_reachable(ORIGIN, INSIDE, 20) is False
