# camino/routes/__init__.py
from .camino import create_camino_blueprint
from .websocket import NAMESPACE, register_websocket_handlers

__all__ = ["create_camino_blueprint", "register_websocket_handlers", "NAMESPACE"]
