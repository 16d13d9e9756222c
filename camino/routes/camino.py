# camino/routes/camino.py
"""Camino HTTP routes and blueprint configuration."""

import logging

from flask import Blueprint, jsonify, request

from camino.api.config import get_google_maps_config
from camino.api.data.destinations import get_all_destinations, get_destination
from camino.api.data.route_details import get_route_detail
from camino.api.errors import AppError, InvalidDataError, NotFoundError
from camino.api.services.translation_service import (
    Language,
    build_google_translate_url,
    destination_translation_text,
)

logger = logging.getLogger(__name__)


def _parse_days(raw):
    """Parse ``"1,2, 3"`` into ``[1, 2, 3]``."""
    try:
        days = [int(part) for part in raw.split(",") if part.strip()]
    except ValueError:
        raise InvalidDataError(f"Invalid days parameter: {raw!r}")
    if not days:
        raise InvalidDataError("At least one day is required")
    return days


def _parse_language(code, field):
    try:
        return Language(code)
    except ValueError:
        raise InvalidDataError(f"Unsupported {field} language: {code!r}")


def create_camino_blueprint(services):
    """Create and configure the camino blueprint.

    Args:
        services: ServiceContainer shared with the Socket.IO handlers

    Returns:
        Configured Flask Blueprint
    """
    camino_bp = Blueprint(
        "camino",
        __name__,
        url_prefix="/camino"
    )

    @camino_bp.errorhandler(AppError)
    def handle_app_error(error):
        services.alerts.show_app_error(error)
        return jsonify(error.to_dict()), error.status_code

    @camino_bp.route("/health")
    def health():
        """Health check endpoint."""
        return jsonify({"status": "ok", "service": "camino"})

    @camino_bp.route("/api/config")
    def api_config():
        """Return Google Maps configuration for frontend."""
        config = get_google_maps_config()

        if config.get("api_key"):
            return jsonify({
                "auth_type": "api_key",
                "google_maps_api_key": config["api_key"],
                "google_maps_client_id": config.get("client_id", ""),
                "client_secret_configured": bool(config.get("client_secret"))
            })
        else:
            return jsonify({
                "error": "No Google Maps API key configured"
            }), 500

    @camino_bp.route("/api/destinations")
    def api_destinations():
        destinations = get_all_destinations()
        return jsonify({
            "count": len(destinations),
            "destinations": [d.to_dict() for d in destinations],
        })

    @camino_bp.route("/api/destinations/<int:day>")
    def api_destination(day):
        destination = get_destination(day)
        if destination is None:
            raise NotFoundError(f"No destination for day {day}")
        return jsonify(destination.to_dict())

    @camino_bp.route("/api/route-details/<int:day>")
    def api_route_details(day):
        detail = get_route_detail(day)
        if detail is None:
            raise NotFoundError(f"No route details for day {day}")
        return jsonify(detail.to_dict())

    @camino_bp.route("/api/map")
    def api_map():
        """Refresh a one-off map display and return its state.

        Without ``day`` the whole itinerary is shown (overview mode).
        """
        day = request.args.get("day", type=int)
        if day is not None and get_destination(day) is None:
            raise NotFoundError(f"No destination for day {day}")

        display = services.new_map_display()
        display.refresh(day)
        return jsonify(display.snapshot())

    @camino_bp.route("/api/translate", methods=["POST"])
    def api_translate():
        data = request.get_json(silent=True) or {}
        text = data.get("text")
        if not isinstance(text, str) or not text.strip():
            raise InvalidDataError("Field 'text' is required")

        source = _parse_language(data.get("source", Language.ENGLISH.value), "source")
        target = _parse_language(data.get("target", Language.SPANISH.value), "target")

        translation = services.translation.translate(text, source, target)
        return jsonify({
            "translation": translation,
            "url": build_google_translate_url(text, source, target),
        })

    @camino_bp.route("/api/destinations/<int:day>/translate")
    def api_translate_destination(day):
        """Google Translate hand-off for a destination card."""
        destination = get_destination(day)
        if destination is None:
            raise NotFoundError(f"No destination for day {day}")

        target = _parse_language(request.args.get("target", Language.SPANISH.value), "target")
        text = destination_translation_text(destination.location_name, destination.hotel_name)
        return jsonify({
            "text": text,
            "translation": services.translation.translate(text, Language.ENGLISH, target),
            "url": build_google_translate_url(text, Language.ENGLISH, target),
        })

    @camino_bp.route("/api/languages")
    def api_languages():
        return jsonify({"languages": Language.supported()})

    @camino_bp.route("/api/weather")
    def api_weather():
        days = _parse_days(request.args.get("days", ""))
        weather, last_updated = services.weather.get_weather_report(days)
        return jsonify({
            "weather": {str(day): blob for day, blob in weather.items()},
            "last_updated": last_updated.isoformat() if last_updated else None,
        })

    @camino_bp.route("/api/weather/<int:day>/forecast")
    def api_forecast(day):
        return jsonify(services.weather.get_forecast(day))

    @camino_bp.route("/api/alerts")
    def api_alerts():
        active = services.alerts.active_error
        return jsonify({
            "showing": services.alerts.is_showing_error,
            "active": active.to_dict() if active else None,
            "log": [e.to_dict() for e in services.alerts.get_error_log()],
        })

    @camino_bp.route("/api/alerts/dismiss", methods=["POST"])
    def api_dismiss_alert():
        services.alerts.dismiss_error()
        return jsonify({"status": "dismissed"})

    return camino_bp


__all__ = ['create_camino_blueprint']
