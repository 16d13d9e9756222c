# camino/routes/websocket/base.py
"""Base WebSocket handler with common functionality."""

import logging
from flask import request
from flask_socketio import emit

logger = logging.getLogger(__name__)

NAMESPACE = "/camino/ws"


class BaseWebSocketHandler:
    """Base class for WebSocket handlers with common functionality."""

    def __init__(self, socketio, services, namespace=NAMESPACE):
        self.socketio = socketio
        self.services = services
        self.namespace = namespace

    def emit_to_client(self, event, data, to=None):
        """Emit to the current client, or to ``to`` from outside a request."""
        try:
            if to:
                self.socketio.emit(event, data, to=to, namespace=self.namespace)
            else:
                emit(event, data, namespace=self.namespace)
        except Exception as e:
            logger.error(f"Failed to emit {event}: {e}")

    def get_client_info(self):
        return {
            "sid": request.sid,
            "ip": request.remote_addr,
            "origin": request.headers.get('Origin', 'unknown'),
        }

    def current_session(self):
        """MapSession of the calling client, or None after an error was emitted."""
        map_session = self.services.sessions.get_session(request.sid)
        if map_session is None:
            self.emit_to_client('error', {'message': 'No session available'})
        return map_session

    def log_event(self, event_name, data=None):
        if data:
            logger.info(f"[WS] {event_name} - Client: {request.sid}, Data: {data}")
        else:
            logger.info(f"[WS] {event_name} - Client: {request.sid}")

    def handle_error(self, error, event_name=""):
        logger.error(f"[WS] Error in {event_name} - Client: {request.sid}, Error: {error}")
        payload = error.to_dict() if hasattr(error, "to_dict") else {'message': str(error)}
        payload['event'] = event_name
        self.emit_to_client('error', payload)
