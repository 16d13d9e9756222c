"""Tests for the error taxonomy and alert log."""

import logging

import pytest

from camino.api.errors import (
    AlertManager,
    AuthenticationError,
    InvalidDataError,
    NetworkError,
    NotFoundError,
    PermissionDeniedError,
    ServerError,
    Severity,
    error_for_status,
)


@pytest.mark.parametrize("status, error_type", [
    (400, InvalidDataError),
    (401, AuthenticationError),
    (403, PermissionDeniedError),
    (404, NotFoundError),
    (429, NetworkError),
    (500, ServerError),
    (599, ServerError),
    (302, NetworkError),
])
def test_error_for_status(status, error_type):
    assert type(error_for_status(status, "msg")) is error_type


def test_to_dict():
    error = NotFoundError("No destination for day 40")
    assert error.to_dict() == {
        "error": "Not Found",
        "message": "No destination for day 40",
        "severity": "warning",
    }
    assert error.status_code == 404


def test_severity_titles():
    assert Severity.CRITICAL.title == "Critical Error"
    assert ServerError("x").severity is Severity.CRITICAL


def test_alert_manager_tracks_active_error_and_log(caplog):
    alerts = AlertManager()

    with caplog.at_level(logging.WARNING, logger="camino.api.errors"):
        alerts.show_app_error(NetworkError("No internet connection"))
    alerts.show_error("Second", Severity.INFO)

    assert alerts.is_showing_error
    assert alerts.active_error.message == "Second"
    assert [e.message for e in alerts.get_error_log()] == ["No internet connection", "Second"]
    assert "No internet connection" in caplog.text

    alerts.dismiss_error()
    assert not alerts.is_showing_error
    assert len(alerts.get_error_log()) == 2
