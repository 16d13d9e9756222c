"""Tests for stitching walking segments into a route path."""

from camino.api.data.destinations import get_all_destinations
from camino.api.data.route_details import get_route_detail
from camino.api.models import Coordinate, LocationPoint
from camino.api.services.route_builder import CancellationToken, RouteBuilder, RouteMode

from conftest import FakeDirections


class RecordingToken(CancellationToken):
    def __init__(self):
        super().__init__()
        self.waits = []

    def wait(self, seconds):
        self.waits.append(seconds)
        return self.cancelled


def make_points(*names):
    return [LocationPoint(name, Coordinate(42.0 + i * 0.1, -1.0 - i * 0.1)) for i, name in enumerate(names)]


def test_fewer_than_two_points_builds_nothing(route_builder, directions):
    assert route_builder.build(make_points("Only")) is None
    assert route_builder.build([]) is None
    assert directions.calls == []


def test_points_without_coordinates_are_skipped(route_builder, directions):
    detail = get_route_detail(1)
    path = route_builder.build(detail.points())

    # 7 points, Arnéguy has no coordinate
    assert len(directions.calls) == 5
    assert path.segment_count == 5
    assert all(c is not None for c in path.coordinates)


def test_segments_are_concatenated_in_order(route_builder):
    points = make_points("A", "B", "C")
    path = route_builder.build(points)

    assert path.segment_count == 2
    assert len(path.coordinates) == 6
    assert path.coordinates[0] == points[0].coordinate
    assert path.coordinates[-1] == points[-1].coordinate


def test_failed_segment_is_skipped():
    builder = RouteBuilder(FakeDirections(fail={1}), overview_delay=0)
    points = make_points("A", "B", "C", "D")
    path = builder.build(points)

    assert path.segment_count == 2
    assert path.coordinates[0] == points[0].coordinate
    assert path.coordinates[2] == points[1].coordinate
    assert path.coordinates[3] == points[2].coordinate
    assert path.coordinates[-1] == points[3].coordinate


def test_raising_segment_is_skipped():
    builder = RouteBuilder(FakeDirections(raise_on={0}), overview_delay=0)
    path = builder.build(make_points("A", "B", "C"))

    assert path.segment_count == 1


def test_all_segments_failing_builds_nothing():
    builder = RouteBuilder(FakeDirections(fail={0, 1}), overview_delay=0)
    assert builder.build(make_points("A", "B", "C")) is None


def test_cancelled_before_start_makes_no_requests(route_builder, directions):
    token = CancellationToken()
    token.cancel()

    assert route_builder.build(make_points("A", "B", "C"), token=token) is None
    assert directions.calls == []


def test_cancel_during_build_stops_remaining_segments():
    token = CancellationToken()

    class CancellingDirections(FakeDirections):
        def walking_segment(self, origin, destination):
            token.cancel()
            return super().walking_segment(origin, destination)

    directions = CancellingDirections()
    builder = RouteBuilder(directions, overview_delay=0)

    assert builder.build(make_points("A", "B", "C", "D"), token=token) is None
    assert len(directions.calls) == 1


def test_overview_mode_pauses_between_requests():
    builder = RouteBuilder(FakeDirections(), overview_delay=0.5)
    destinations = get_all_destinations()[:5]
    token = RecordingToken()

    path = builder.build(destinations, RouteMode.OVERVIEW, token)

    assert path.segment_count == 4
    assert token.waits == [0.5, 0.5, 0.5]


def test_detail_mode_does_not_pause():
    builder = RouteBuilder(FakeDirections(), overview_delay=0.5)
    token = RecordingToken()

    builder.build(make_points("A", "B", "C"), RouteMode.DETAIL, token)

    assert token.waits == []
