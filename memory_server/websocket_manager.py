"""WebSocket connection manager."""

import asyncio
import logging
from fastapi import WebSocket
from pydantic import BaseModel


logger = logging.getLogger(__name__)


class WebSocketManager:
    """Tracks the clients watching one game session."""

    def __init__(self):
        self.active_connections: list[WebSocket] = []
        self._lock = asyncio.Lock()

    async def connect(self, websocket: WebSocket) -> None:
        """Accept and register a new connection."""
        await websocket.accept()
        async with self._lock:
            self.active_connections.append(websocket)

    async def disconnect(self, websocket: WebSocket) -> None:
        """Remove a connection."""
        async with self._lock:
            if websocket in self.active_connections:
                self.active_connections.remove(websocket)

    async def send_event(self, websocket: WebSocket, event: BaseModel) -> None:
        """Send an event to a specific connection, dropping it if the send fails."""
        try:
            await websocket.send_text(event.model_dump_json())
        except Exception as e:
            logger.debug("Dropping client after failed send: %s", e)
            await self.disconnect(websocket)

    async def broadcast(self, event: BaseModel) -> None:
        """Send an event to every connected client."""
        message = event.model_dump_json()

        async with self._lock:
            connections = list(self.active_connections)

        stale = []
        for connection in connections:
            try:
                await connection.send_text(message)
            except Exception as e:
                logger.debug("Dropping client after failed broadcast: %s", e)
                stale.append(connection)

        for conn in stale:
            await self.disconnect(conn)

    @property
    def connection_count(self) -> int:
        """Number of active connections."""
        return len(self.active_connections)

    async def close_all(self) -> None:
        """Close all connections."""
        async with self._lock:
            for connection in self.active_connections:
                try:
                    await connection.close()
                except Exception as e:
                    logger.debug("Error closing websocket: %s", e)
            self.active_connections.clear()
