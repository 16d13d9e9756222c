"""
Camino – Flask application factory

* Flask app + Socket.IO (threading mode, no eventlet/gevent required).
* HTTP routes live under `/camino`, the real-time map channel on the
  `/camino/ws` namespace.
"""

import os
import logging

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO

from camino.api.config import get_websocket_config
from camino.api.container import build_services
from camino.routes import create_camino_blueprint, register_websocket_handlers

logger = logging.getLogger(__name__)


def create_app(services=None):
    """Build the Flask app and its SocketIO server.

    Returns:
        (app, socketio, services)
    """
    services = services or build_services()

    app = Flask(__name__)

    flask_secret_key = os.getenv("FLASK_SECRET_KEY") or os.urandom(32).hex()
    if "FLASK_SECRET_KEY" not in os.environ:
        logger.warning("No FLASK_SECRET_KEY found. Generated a temporary key.")
    app.secret_key = flask_secret_key

    app.config.update(
        SESSION_COOKIE_HTTPONLY=True,
        SESSION_COOKIE_SAMESITE="Lax",
    )

    # CORS for local dev / cross‑origin front‑end requests
    CORS(app, origins="*", supports_credentials=True)

    ws_config = get_websocket_config()
    origins = ws_config["cors_allowed_origins"]
    if origins == ["*"]:
        origins = "*"

    socketio = SocketIO(
        app,
        cors_allowed_origins=origins,
        async_mode="threading",
        ping_interval=ws_config["ping_interval"],
        ping_timeout=ws_config["ping_timeout"],
        logger=False,
        engineio_logger=False,
    )
    logger.info("Socket.IO initialised (async_mode=threading)")

    app.register_blueprint(create_camino_blueprint(services))
    register_websocket_handlers(socketio, services)

    app.extensions["camino_services"] = services
    return app, socketio, services


__all__ = ["create_app"]
