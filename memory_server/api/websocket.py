"""WebSocket endpoint handler."""

import json
import logging
from fastapi import WebSocket, WebSocketDisconnect
from pydantic import ValidationError

from ..exceptions import InvalidIndexError
from ..game import GameSessionManager
from ..models.events import ErrorEvent, SelectCardMessage


logger = logging.getLogger(__name__)


async def websocket_endpoint(
    websocket: WebSocket,
    session_id: str,
    session_manager: GameSessionManager,
):
    """Handle WebSocket connection for a game session."""
    logger.info("[WS] New connection for session %s", session_id)

    session = await session_manager.get_session(session_id)
    if session is None:
        logger.info("[WS] Session %s not found", session_id)
        await websocket.close(code=4004, reason="Session not found")
        return

    await session.on_client_connect(websocket)

    try:
        while True:
            data = await websocket.receive_text()

            try:
                message = json.loads(data)
            except json.JSONDecodeError:
                await session.ws_manager.send_event(
                    websocket,
                    ErrorEvent(code="invalid_json", message="Invalid JSON message"),
                )
                continue

            msg_type = message.get("type") if isinstance(message, dict) else None

            if msg_type == "select_card":
                try:
                    index = SelectCardMessage.model_validate(message).index
                except ValidationError:
                    await session.ws_manager.send_event(
                        websocket,
                        ErrorEvent(code="invalid_index", message="index must be an integer"),
                    )
                    continue
                try:
                    await session.select_card(index)
                except InvalidIndexError as e:
                    logger.info("[WS] Session %s: %s", session_id, e)
                    await session.ws_manager.send_event(
                        websocket,
                        ErrorEvent(code="invalid_index", message=str(e)),
                    )

            elif msg_type == "shuffle":
                await session.shuffle()

            elif msg_type == "new_game":
                await session.new_game()

            elif msg_type == "ping":
                await websocket.send_text(json.dumps({"type": "pong"}))

            else:
                await session.ws_manager.send_event(
                    websocket,
                    ErrorEvent(code="unknown_message", message=f"Unknown message type: {msg_type}"),
                )

    except WebSocketDisconnect:
        logger.info("[WS] Client left session %s", session_id)
    finally:
        await session.on_client_disconnect(websocket)
