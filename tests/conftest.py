"""Shared pytest fixtures for the camino test suite."""

import threading

import pytest
import requests_cache

from camino.api.container import build_services
from camino.api.models import Coordinate
from camino.api.services.route_builder import RouteBuilder
from camino.api.services.weather_service import WeatherService


class FakeDirections:
    """Straight-line directions; pairs listed in ``fail`` return None."""

    def __init__(self, fail=(), raise_on=()):
        self.fail = set(fail)
        self.raise_on = set(raise_on)
        self.calls = []
        self._lock = threading.Lock()

    def walking_segment(self, origin, destination):
        with self._lock:
            index = len(self.calls)
            self.calls.append((origin, destination))
        if index in self.raise_on:
            raise RuntimeError("boom")
        if index in self.fail:
            return None
        midpoint = Coordinate((origin.lat + destination.lat) / 2, (origin.lng + destination.lng) / 2)
        return [origin, midpoint, destination]


@pytest.fixture
def directions():
    return FakeDirections()


@pytest.fixture
def route_builder(directions):
    return RouteBuilder(directions, overview_delay=0)


@pytest.fixture
def weather_service():
    session = requests_cache.CachedSession(backend="memory", expire_after=900)
    return WeatherService(session=session, api_key="", base_url="https://weather.test")


@pytest.fixture
def services(directions, weather_service):
    container = build_services(directions=directions, weather=weather_service, start_cleanup=False)
    container.route_builder.overview_delay = 0
    yield container
    container.sessions.shutdown()


@pytest.fixture
def app(services):
    from camino.app import create_app

    flask_app, socketio, _ = create_app(services=services)
    flask_app.config["TESTING"] = True
    flask_app.extensions["test_socketio"] = socketio
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()
