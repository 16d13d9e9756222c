"""Tests for map session lifecycle."""

from datetime import datetime, timedelta

import pytest

from camino.api.services.map_service import MapDisplay
from camino.api.services.session_manager import SessionManager

CONFIG = {
    "max_concurrent_sessions": 2,
    "session_timeout_seconds": 60,
    "cleanup_interval_seconds": 60,
}


@pytest.fixture
def manager(route_builder):
    manager = SessionManager(lambda: MapDisplay(route_builder, margin_degrees=0.05),
                             config=CONFIG, start_cleanup=False)
    yield manager
    manager.shutdown()


def test_create_and_get(manager):
    session = manager.create_session("sid-1", "127.0.0.1")

    assert manager.get_session("sid-1") is session
    assert manager.create_session("sid-1") is session
    assert manager.get_stats()["total_sessions"] == 1


def test_sessions_have_independent_displays(manager):
    first = manager.create_session("sid-1")
    second = manager.create_session("sid-2")

    first.display.refresh(1)

    assert first.display.focused_day == 1
    assert second.display.focused_day is None


def test_capacity_limit(manager):
    manager.create_session("sid-1")
    manager.create_session("sid-2")

    assert manager.create_session("sid-3") is None


def test_remove_cancels_inflight_refresh(manager):
    session = manager.create_session("sid-1")
    refresh = session.display.focus(2)

    assert manager.remove_session("sid-1")
    assert refresh.token.cancelled
    assert manager.get_session("sid-1") is None
    assert not manager.remove_session("sid-1")


def test_idle_sessions_expire(manager):
    manager.create_session("old")
    manager.create_session("new")
    manager.sessions["old"].last_activity = datetime.now() - timedelta(seconds=120)

    assert manager.cleanup_expired_sessions() == 1
    assert list(manager.sessions) == ["new"]
