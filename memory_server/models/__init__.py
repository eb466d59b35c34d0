"""Pydantic models for game state and events."""

from .game import (
    DEFAULT_SYMBOLS,
    SelectionOutcome,
    Card,
    GameConfig,
    GameState,
)
from .events import (
    # Server to client
    ConnectionAckEvent,
    GameStateEvent,
    CardFlippedEvent,
    MatchFoundEvent,
    MismatchEvent,
    CardsRevertedEvent,
    GameOverEvent,
    ErrorEvent,
    # Client to server
    SelectCardMessage,
    ShuffleMessage,
    NewGameMessage,
    PingMessage,
)
from .api import (
    SessionConfigRequest,
    SessionResponse,
    SelectCardRequest,
    SelectCardResponse,
    HealthResponse,
)

__all__ = [
    # Game models
    "DEFAULT_SYMBOLS",
    "SelectionOutcome",
    "Card",
    "GameConfig",
    "GameState",
    # Events
    "ConnectionAckEvent",
    "GameStateEvent",
    "CardFlippedEvent",
    "MatchFoundEvent",
    "MismatchEvent",
    "CardsRevertedEvent",
    "GameOverEvent",
    "ErrorEvent",
    "SelectCardMessage",
    "ShuffleMessage",
    "NewGameMessage",
    "PingMessage",
    # API
    "SessionConfigRequest",
    "SessionResponse",
    "SelectCardRequest",
    "SelectCardResponse",
    "HealthResponse",
]
