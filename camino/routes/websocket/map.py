# camino/routes/websocket/map.py
"""WebSocket handlers for map focus changes and user location."""

import logging
from flask import request

from camino.api.data.destinations import get_destination
from camino.api.errors import GeneralError, InvalidDataError, NotFoundError
from camino.api.models import Coordinate
from camino.api.services.location_service import LocationFailure, LocationUpdate
from camino.api.services.map_service import MapDisplayState

from .base import BaseWebSocketHandler

logger = logging.getLogger(__name__)


def _parse_day(data):
    day = (data or {}).get('day')
    if day is None:
        return None
    if isinstance(day, bool) or not isinstance(day, int):
        raise InvalidDataError(f"Invalid day: {day!r}")
    if get_destination(day) is None:
        raise NotFoundError(f"No destination for day {day}")
    return day


def _parse_location(data):
    data = data or {}
    try:
        coordinate = Coordinate(float(data['lat']), float(data['lng']))
    except (KeyError, TypeError, ValueError):
        raise InvalidDataError("Location requires numeric 'lat' and 'lng'")
    if not (-90 <= coordinate.lat <= 90 and -180 <= coordinate.lng <= 180):
        raise InvalidDataError(f"Location out of range: {coordinate.lat}, {coordinate.lng}")

    accuracy = data.get('accuracy')
    if accuracy is not None:
        try:
            accuracy = float(accuracy)
        except (TypeError, ValueError):
            raise InvalidDataError("Location 'accuracy' must be numeric")
    return LocationUpdate(coordinate=coordinate, accuracy=accuracy)


class MapHandler(BaseWebSocketHandler):
    """Handles map refreshes and location events."""

    def _run_refresh(self, sid, map_session, refresh):
        """Background task: build the path and publish it if still current."""
        try:
            state = map_session.display.run(refresh)
        except Exception as e:
            logger.error(f"[WS] Map refresh #{refresh.generation} failed for {sid}: {e}")
            payload = GeneralError(f"Map refresh failed: {e}").to_dict()
            payload['event'] = 'focus_day'
            self.emit_to_client('error', payload, to=sid)
            return

        if state == MapDisplayState.CANCELLED:
            logger.debug(f"[WS] Dropping superseded refresh #{refresh.generation} for {sid}")
            return

        map_session.refresh_count += 1
        self.emit_to_client('map_state', map_session.display.snapshot(), to=sid)

    def register_handlers(self):

        @self.socketio.on('focus_day', namespace=self.namespace)
        def handle_focus_day(data=None):
            """Refresh the map for a day, or the overview when day is null."""
            try:
                day = _parse_day(data)
            except (InvalidDataError, NotFoundError) as e:
                self.handle_error(e, 'focus_day')
                return

            map_session = self.current_session()
            if map_session is None:
                return

            self.log_event('focus_day', {'day': day})
            refresh = map_session.display.focus(day)
            self.socketio.start_background_task(self._run_refresh, request.sid, map_session, refresh)

        @self.socketio.on('location_update', namespace=self.namespace)
        def handle_location_update(data=None):
            try:
                event = _parse_location(data)
            except InvalidDataError as e:
                self.handle_error(e, 'location_update')
                return

            map_session = self.current_session()
            if map_session is None:
                return

            map_session.location_count += 1
            map_session.location_events.publish(event)
            self.emit_to_client('route_status', map_session.tracker.to_dict())

        @self.socketio.on('location_error', namespace=self.namespace)
        def handle_location_error(data=None):
            map_session = self.current_session()
            if map_session is None:
                return

            message = (data or {}).get('message') or 'Location unavailable'
            map_session.location_events.publish(LocationFailure(message=str(message)))
            self.emit_to_client('route_status', map_session.tracker.to_dict())
