"""REST routes and WebSocket handler for game sessions."""

from .routes import router
from .websocket import websocket_endpoint

__all__ = ["router", "websocket_endpoint"]
