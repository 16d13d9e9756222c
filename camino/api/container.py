# camino/api/container.py
"""Wiring of the long-lived services shared by HTTP routes and Socket.IO."""

import logging
from dataclasses import dataclass
from typing import Optional

from camino.api.directions import DirectionsService
from camino.api.errors import AlertManager
from camino.api.services.map_service import MapDisplay
from camino.api.services.route_builder import RouteBuilder
from camino.api.services.session_manager import SessionManager
from camino.api.services.translation_service import TranslationService
from camino.api.services.weather_service import WeatherService

logger = logging.getLogger(__name__)


@dataclass
class ServiceContainer:
    directions: DirectionsService
    route_builder: RouteBuilder
    translation: TranslationService
    weather: WeatherService
    sessions: SessionManager
    alerts: AlertManager

    def new_map_display(self) -> MapDisplay:
        return MapDisplay(self.route_builder)


def build_services(directions: Optional[DirectionsService] = None,
                   weather: Optional[WeatherService] = None,
                   start_cleanup: bool = True) -> ServiceContainer:
    """Create every service once; arguments replace the defaults (tests)."""
    directions = directions or DirectionsService()
    route_builder = RouteBuilder(directions)

    weather = weather or WeatherService()

    sessions = SessionManager(lambda: MapDisplay(route_builder), start_cleanup=start_cleanup)

    logger.info("Camino services initialized")
    return ServiceContainer(
        directions=directions,
        route_builder=route_builder,
        translation=TranslationService(),
        weather=weather,
        sessions=sessions,
        alerts=AlertManager(),
    )


__all__ = ["ServiceContainer", "build_services"]
