"""
Camino – main application entry point

Run locally with `python main.py`; the Socket.IO client must connect to the
`/camino/ws` namespace.
"""

import logging

from dotenv import load_dotenv

# --------------------------------------------------------------------------- #
# Environment & logging
# --------------------------------------------------------------------------- #
load_dotenv()

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

from camino.api.config import get_port  # noqa: E402
from camino.app import create_app  # noqa: E402

app, socketio, services = create_app()


@app.route("/debug")
def debug():
    """Simple JSON health endpoint."""
    return {
        "status": "ok",
        "socketio_initialized": True,
        "sessions": services.sessions.get_stats(),
        "endpoints": {
            "health": "/camino/health",
            "websocket_namespace": "/camino/ws",
        },
    }


if __name__ == "__main__":
    port = get_port()
    logger.info("Starting camino app on http://localhost:%d", port)
    socketio.run(app, host="0.0.0.0", port=port, debug=False, allow_unsafe_werkzeug=True)

__all__ = ["app", "socketio"]
