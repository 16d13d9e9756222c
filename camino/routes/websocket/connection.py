# camino/routes/websocket/connection.py
"""WebSocket connection and disconnection handlers."""

import logging
import time
from flask_socketio import disconnect

from .base import BaseWebSocketHandler

logger = logging.getLogger(__name__)


class ConnectionHandler(BaseWebSocketHandler):
    """Handles WebSocket connection lifecycle events."""

    def register_handlers(self):

        @self.socketio.on('connect', namespace=self.namespace)
        def handle_connect(auth=None):
            client_info = self.get_client_info()
            self.log_event('connect')

            map_session = self.services.sessions.create_session(
                client_info['sid'],
                client_info['ip'],
            )
            if map_session is None:
                logger.error("Failed to create map session - server at capacity")
                self.emit_to_client('error', {
                    'message': 'Server at capacity, try again later'
                })
                disconnect()
                return

            self.emit_to_client('connected', {
                'session_id': map_session.session_id,
                'status': 'connected',
                'snapshot': map_session.display.snapshot(),
            })

        @self.socketio.on('disconnect', namespace=self.namespace)
        def handle_disconnect(reason=None):
            client_info = self.get_client_info()
            if self.services.sessions.remove_session(client_info['sid'], 'client_disconnect'):
                logger.info(f"WebSocket disconnected, session {client_info['sid']} removed")
            else:
                self.log_event('disconnect', {'no_session': True})

        @self.socketio.on('ping', namespace=self.namespace)
        def handle_ping(data=None):
            """Handle ping for connection testing."""
            self.emit_to_client('pong', {'timestamp': time.time()})
