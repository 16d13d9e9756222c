"""Tests for the Google walking directions wrapper."""

from unittest.mock import MagicMock, patch

import pytest
from googlemaps import convert, exceptions

from camino.api.directions import DirectionsService
from camino.api.models import Coordinate

ORIGIN = Coordinate(43.1636, -1.2386)
DESTINATION = Coordinate(43.0093, -1.3192)


def test_decodes_overview_polyline():
    encoded = convert.encode_polyline([ORIGIN.as_tuple(), DESTINATION.as_tuple()])
    client = MagicMock()
    client.directions.return_value = [{"overview_polyline": {"points": encoded}}]

    segment = DirectionsService(client=client).walking_segment(ORIGIN, DESTINATION)

    client.directions.assert_called_once_with(ORIGIN.as_tuple(), DESTINATION.as_tuple(), mode="walking")
    assert len(segment) == 2
    assert segment[0].lat == pytest.approx(ORIGIN.lat)
    assert segment[-1].lng == pytest.approx(DESTINATION.lng)


def test_no_route_is_none():
    client = MagicMock()
    client.directions.return_value = []

    assert DirectionsService(client=client).walking_segment(ORIGIN, DESTINATION) is None


def test_api_error_is_none():
    client = MagicMock()
    client.directions.side_effect = exceptions.ApiError("ZERO_RESULTS")

    assert DirectionsService(client=client).walking_segment(ORIGIN, DESTINATION) is None


def test_missing_key_is_none():
    with patch("camino.api.directions.get_google_maps_config", return_value={"api_key": ""}):
        service = DirectionsService()
        assert service.walking_segment(ORIGIN, DESTINATION) is None


class CountingSession:
    """Stands in for ``client.session``; replays the given responses in order."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = 0

    def get(self, url, **kwargs):
        response = self.responses[min(self.calls, len(self.responses) - 1)]
        self.calls += 1
        return response


def make_response(status_code, body=None):
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = body or {}
    return response


def real_service(session):
    service = DirectionsService(api_key="AIzaTestKeyForCamino")
    client = service._get_client()
    client.session = session
    return service


def test_server_error_is_not_retried():
    encoded = convert.encode_polyline([ORIGIN.as_tuple(), DESTINATION.as_tuple()])
    ok = make_response(200, {"status": "OK", "routes": [{"overview_polyline": {"points": encoded}}]})
    session = CountingSession(make_response(503), make_response(503), make_response(503), ok)

    assert real_service(session).walking_segment(ORIGIN, DESTINATION) is None
    assert session.calls == 1


def test_over_query_limit_is_not_retried():
    session = CountingSession(make_response(200, {"status": "OVER_QUERY_LIMIT"}))

    assert real_service(session).walking_segment(ORIGIN, DESTINATION) is None
    assert session.calls == 1


def test_real_client_decodes_route():
    encoded = convert.encode_polyline([ORIGIN.as_tuple(), DESTINATION.as_tuple()])
    session = CountingSession(
        make_response(200, {"status": "OK", "routes": [{"overview_polyline": {"points": encoded}}]})
    )

    segment = real_service(session).walking_segment(ORIGIN, DESTINATION)

    assert len(segment) == 2
    assert session.calls == 1
