"""Tests for location events and the off-route tracker."""

import pytest

from camino.api.data.destinations import get_destination
from camino.api.models import Coordinate
from camino.api.services.location_service import (
    EventStream,
    LocationFailure,
    LocationTracker,
    LocationUpdate,
)


def test_stream_delivers_in_subscription_order():
    stream = EventStream()
    received = []
    stream.subscribe(lambda e: received.append(("a", e)))
    stream.subscribe(lambda e: received.append(("b", e)))

    assert stream.publish("event") == 2
    assert received == [("a", "event"), ("b", "event")]


def test_failing_subscriber_does_not_stop_others():
    stream = EventStream()
    received = []

    def broken(event):
        raise ValueError("nope")

    stream.subscribe(broken)
    stream.subscribe(received.append)

    assert stream.publish(1) == 1
    assert received == [1]


def test_cancelled_subscription_stops_delivery():
    stream = EventStream()
    received = []
    subscription = stream.subscribe(received.append)

    subscription.cancel()
    subscription.cancel()
    stream.publish(1)

    assert received == []
    assert stream.subscriber_count == 0


@pytest.fixture
def stream():
    return EventStream()


@pytest.fixture
def tracker(stream):
    return LocationTracker(stream, off_route_threshold_m=500)


def test_update_near_destination_is_on_route(stream, tracker):
    zubiri = get_destination(2).coordinate
    stream.publish(LocationUpdate(Coordinate(zubiri.lat + 0.001, zubiri.lng), accuracy=10))

    assert tracker.nearest_day == 2
    assert tracker.distance_to_route_m == pytest.approx(111, abs=2)
    assert not tracker.is_off_route
    assert tracker.accuracy == 10


def test_update_far_from_destinations_is_off_route(stream, tracker):
    zubiri = get_destination(2).coordinate
    stream.publish(LocationUpdate(Coordinate(zubiri.lat + 0.01, zubiri.lng)))

    assert tracker.nearest_day == 2
    assert tracker.distance_to_route_m > 500
    assert tracker.is_off_route


def test_failure_is_recorded_not_raised(stream, tracker):
    stream.publish(LocationFailure("Permission denied"))
    assert tracker.last_error == "Permission denied"
    assert tracker.user_location is None

    stream.publish(LocationUpdate(get_destination(1).coordinate))
    assert tracker.last_error is None
    assert tracker.to_dict()["nearest_day"] == 1


def test_stopped_tracker_ignores_events(stream, tracker):
    tracker.stop()
    stream.publish(LocationUpdate(get_destination(1).coordinate))
    assert tracker.user_location is None
