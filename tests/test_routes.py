"""Tests for the /camino HTTP API."""

from datetime import datetime, timezone
from unittest.mock import patch

import pytest

from camino.api.errors import NetworkError


def test_health(client):
    response = client.get("/camino/health")
    assert response.status_code == 200
    assert response.get_json() == {"status": "ok", "service": "camino"}


def test_blueprint_serves_no_static_files(app):
    assert not app.blueprints["camino"].has_static_folder


def test_config_without_key(client, monkeypatch):
    monkeypatch.setenv("GOOGLE_MAPS_API_KEY", "")
    response = client.get("/camino/api/config")
    assert response.status_code == 500


def test_config_with_key(client, monkeypatch):
    monkeypatch.setenv("GOOGLE_MAPS_API_KEY", "abc123")
    response = client.get("/camino/api/config")
    assert response.get_json()["google_maps_api_key"] == "abc123"


def test_destinations(client):
    data = client.get("/camino/api/destinations").get_json()
    assert data["count"] == len(data["destinations"])
    assert data["destinations"][1]["hotel_name"] == "Hotel Roncesvalles"


def test_destination_not_found(client, services):
    response = client.get("/camino/api/destinations/99")

    assert response.status_code == 404
    assert response.get_json() == {
        "error": "Not Found",
        "message": "No destination for day 99",
        "severity": "warning",
    }
    assert services.alerts.active_error.message == "No destination for day 99"


def test_route_details(client):
    data = client.get("/camino/api/route-details/1").get_json()
    assert data["end_point"]["name"] == "Roncesvalles"
    assert client.get("/camino/api/route-details/99").status_code == 404


def test_map_overview(client):
    data = client.get("/camino/api/map").get_json()
    assert data["state"] == "success"
    assert data["mode"] == "overview"
    assert data["focused_day"] is None


def test_map_day(client):
    data = client.get("/camino/api/map?day=2").get_json()
    assert data["mode"] == "detail"
    assert data["path"]["segment_count"] > 0


def test_map_unknown_day(client):
    assert client.get("/camino/api/map?day=50").status_code == 404


def test_translate(client):
    response = client.post("/camino/api/translate", json={"text": "hello", "source": "en", "target": "es"})
    data = response.get_json()

    assert data["translation"] == "hola"
    assert data["url"].startswith("https://translate.google.com/?sl=en&tl=es")


def test_translate_validation(client):
    assert client.post("/camino/api/translate", json={"text": ""}).status_code == 400
    response = client.post("/camino/api/translate", json={"text": "hi", "target": "xx"})
    assert response.status_code == 400
    assert response.get_json()["error"] == "Data Error"


def test_languages(client):
    codes = [l["code"] for l in client.get("/camino/api/languages").get_json()["languages"]]
    assert "pt-PT" in codes


def test_weather(client, services):
    fetched_at = datetime(2025, 5, 3, 8, 0, tzinfo=timezone.utc)
    report = ({1: {"name": "Roncesvalles"}}, fetched_at)
    with patch.object(services.weather, "get_weather_report", return_value=report) as get_report:
        data = client.get("/camino/api/weather?days=1").get_json()

    get_report.assert_called_once_with([1])
    assert data["weather"] == {"1": {"name": "Roncesvalles"}}
    assert data["last_updated"] == fetched_at.isoformat()


@pytest.mark.parametrize("days", ["", "one,two"])
def test_weather_bad_days(client, days):
    assert client.get(f"/camino/api/weather?days={days}").status_code == 400


def test_forecast_error_is_rendered(client, services):
    with patch.object(services.weather, "get_forecast", side_effect=NetworkError("No internet connection")):
        response = client.get("/camino/api/weather/3/forecast")

    assert response.status_code == 502
    assert response.get_json()["severity"] == "warning"


def test_alerts(client):
    client.get("/camino/api/destinations/99")
    data = client.get("/camino/api/alerts").get_json()
    assert data["showing"] is True
    assert data["active"]["message"] == "No destination for day 99"

    client.post("/camino/api/alerts/dismiss")
    data = client.get("/camino/api/alerts").get_json()
    assert data["active"] is None
    assert data["showing"] is False


def test_translate_destination(client):
    data = client.get("/camino/api/destinations/2/translate?target=fr").get_json()

    assert data["text"] == "Roncesvalles to Zubiri - Hosteria de Zubiri"
    assert "tl=fr" in data["url"]
    assert client.get("/camino/api/destinations/99/translate").status_code == 404
