"""Tests for the destination catalog and route detail tables."""

from datetime import date

import pytest

from camino.api.data.destinations import (
    get_all_destinations,
    get_destination,
    nearest_destination,
)
from camino.api.data.route_details import get_route_detail
from camino.api.geo import calculate_bounds, fit_region, haversine_m, polyline_length_m
from camino.api.models import Coordinate


def test_catalog_is_ordered_by_day():
    destinations = get_all_destinations()
    assert [d.day for d in destinations] == list(range(len(destinations)))
    assert destinations[0].location_name == "Saint-Jean-Pied-de-Port"


def test_cumulative_distance_and_dates():
    destinations = get_all_destinations()
    assert destinations[0].cumulative_distance == 0.0
    assert destinations[2].cumulative_distance == pytest.approx(23.9 + 21.5)
    assert destinations[0].date == date(2025, 5, 1)
    assert destinations[3].date == date(2025, 5, 4)


def test_get_destination():
    assert get_destination(3).location_name == "Zubiri to Pamplona"
    assert get_destination(-1) is None
    assert get_destination(99) is None


def test_nearest_destination():
    pamplona = get_destination(3).coordinate
    destination, distance = nearest_destination(Coordinate(pamplona.lat + 0.001, pamplona.lng))

    assert destination.day == 3
    assert distance == pytest.approx(111, abs=2)


def test_table_route_detail():
    detail = get_route_detail(1)
    assert detail.start_point.name == "Saint Jean Pied de Port"
    assert detail.end_point.name == "Roncesvalles"
    assert len(detail.points()) == 2 + len(detail.waypoints)


def test_rest_day_has_only_a_start():
    detail = get_route_detail(6)
    assert detail.end_point is None
    assert detail.points() == [detail.start_point]


def test_derived_route_detail_uses_catalog():
    detail = get_route_detail(20)
    previous = get_destination(19)
    current = get_destination(20)

    assert detail.start_point.coordinate == previous.coordinate
    assert detail.end_point.coordinate == current.coordinate
    assert detail.waypoints == ()


def test_route_detail_outside_itinerary():
    assert get_route_detail(99) is None
    assert get_route_detail(-3) is None


def test_haversine():
    a = Coordinate(42.0, -1.0)
    assert haversine_m(a, a) == 0
    assert haversine_m(a, Coordinate(43.0, -1.0)) == pytest.approx(111195, rel=1e-3)
    assert polyline_length_m([a, Coordinate(43.0, -1.0), a]) == pytest.approx(2 * 111195, rel=1e-3)
    assert polyline_length_m([a]) == 0.0


def test_bounds_and_region():
    coords = [Coordinate(42.0, -2.0), Coordinate(43.0, -1.0)]
    assert calculate_bounds(coords) == {"north": 43.0, "south": 42.0, "east": -1.0, "west": -2.0}
    assert calculate_bounds([]) == {}

    region = fit_region(coords, 0.5)
    assert region.center == Coordinate(42.5, -1.5)
    assert region.lat_span == pytest.approx(2.0)
    assert fit_region([], 0.5) is None
