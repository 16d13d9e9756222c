"""Tests for the /camino/ws Socket.IO namespace."""

import threading
import time

import pytest

from camino.routes.websocket import NAMESPACE


@pytest.fixture
def ws(app):
    socketio = app.extensions["test_socketio"]
    client = socketio.test_client(app, namespace=NAMESPACE)
    yield client
    if client.is_connected(NAMESPACE):
        client.disconnect(namespace=NAMESPACE)


def events(client, name):
    return [msg["args"][0] for msg in client.get_received(NAMESPACE) if msg["name"] == name]


def wait_for(client, name, timeout=5.0):
    deadline = time.time() + timeout
    while time.time() < deadline:
        found = events(client, name)
        if found:
            return found
        time.sleep(0.05)
    return []


def test_connect_creates_session(ws, services):
    connected = events(ws, "connected")

    assert connected[0]["status"] == "connected"
    assert connected[0]["snapshot"]["state"] == "idle"
    assert services.sessions.get_stats()["total_sessions"] == 1


def test_disconnect_removes_session(ws, services):
    ws.disconnect(namespace=NAMESPACE)
    assert services.sessions.get_stats()["total_sessions"] == 0


def test_ping(ws):
    ws.get_received(NAMESPACE)
    ws.emit("ping", namespace=NAMESPACE)
    assert "timestamp" in events(ws, "pong")[0]


def test_focus_day_emits_map_state(ws):
    ws.get_received(NAMESPACE)
    ws.emit("focus_day", {"day": 2}, namespace=NAMESPACE)

    states = wait_for(ws, "map_state")
    assert states[0]["focused_day"] == 2
    assert states[0]["state"] == "success"


def test_superseded_focus_emits_only_latest_day(ws, directions, monkeypatch):
    entered = threading.Event()
    release = threading.Event()
    walking_segment = directions.walking_segment

    def slow_segment(origin, destination):
        if not entered.is_set():
            entered.set()
            release.wait(5)
        return walking_segment(origin, destination)

    monkeypatch.setattr(directions, "walking_segment", slow_segment)
    ws.get_received(NAMESPACE)

    ws.emit("focus_day", {"day": 1}, namespace=NAMESPACE)
    assert entered.wait(5)
    ws.emit("focus_day", {"day": 2}, namespace=NAMESPACE)

    states = wait_for(ws, "map_state")
    release.set()
    time.sleep(0.3)
    states += events(ws, "map_state")

    assert [s["focused_day"] for s in states] == [2]
    assert states[0]["state"] == "success"


def test_focus_unknown_day_is_an_error(ws):
    ws.get_received(NAMESPACE)
    ws.emit("focus_day", {"day": 77}, namespace=NAMESPACE)

    error = events(ws, "error")[0]
    assert error["event"] == "focus_day"
    assert error["error"] == "Not Found"


def test_location_update_emits_route_status(ws):
    ws.get_received(NAMESPACE)
    ws.emit("location_update", {"lat": 42.9331, "lng": -1.5036, "accuracy": 5}, namespace=NAMESPACE)

    status = events(ws, "route_status")[0]
    assert status["nearest_day"] == 2
    assert status["is_off_route"] is False


def test_location_error_is_reported(ws):
    ws.get_received(NAMESPACE)
    ws.emit("location_error", {"message": "Permission denied"}, namespace=NAMESPACE)

    assert events(ws, "route_status")[0]["last_error"] == "Permission denied"


def test_invalid_location(ws):
    ws.get_received(NAMESPACE)
    ws.emit("location_update", {"lat": "north"}, namespace=NAMESPACE)

    assert events(ws, "error")[0]["error"] == "Data Error"
