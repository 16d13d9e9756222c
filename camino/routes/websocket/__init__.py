# camino/routes/websocket/__init__.py
"""WebSocket route handlers initialization."""

import logging

from .base import NAMESPACE
from .connection import ConnectionHandler
from .map import MapHandler

logger = logging.getLogger(__name__)


def register_websocket_handlers(socketio, services):
    """Register all WebSocket event handlers with SocketIO.

    Args:
        socketio: Flask-SocketIO instance
        services: ServiceContainer holding the session manager
    """
    logger.info("Registering WebSocket handlers...")

    try:
        connection_handler = ConnectionHandler(socketio, services, NAMESPACE)
        map_handler = MapHandler(socketio, services, NAMESPACE)

        logger.info(f"Registering connection handler for namespace: {NAMESPACE}")
        connection_handler.register_handlers()

        logger.info(f"Registering map handler for namespace: {NAMESPACE}")
        map_handler.register_handlers()

        logger.info("WebSocket handlers registered successfully")

    except Exception as e:
        logger.error(f"Failed to register WebSocket handlers: {e}")
        logger.exception("WebSocket registration error:")
        raise


__all__ = ['register_websocket_handlers', 'NAMESPACE']
