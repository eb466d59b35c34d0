"""WebSocket event models."""

import time
from typing import Literal
from pydantic import BaseModel, Field, StrictInt

from .game import GameState


# =============================================================================
# Server to Client Events
# =============================================================================


class ConnectionAckEvent(BaseModel):
    """Connection acknowledged."""

    type: Literal["connection_ack"] = "connection_ack"
    session_id: str


class GameStateEvent(BaseModel):
    """Full game state snapshot."""

    type: Literal["game_state"] = "game_state"
    state: GameState


class CardFlippedEvent(BaseModel):
    """First card of a pair turned face-up."""

    type: Literal["card_flipped"] = "card_flipped"
    index: int
    content: str


class MatchFoundEvent(BaseModel):
    """Second card matched the first."""

    type: Literal["match_found"] = "match_found"
    index: int
    content: str
    score: int
    moves: int


class MismatchEvent(BaseModel):
    """Second card did not match; the pair flips back after a delay."""

    type: Literal["mismatch"] = "mismatch"
    index: int
    content: str
    score: int
    moves: int
    revert_in_seconds: float
    timestamp: float = Field(default_factory=time.time)


class CardsRevertedEvent(BaseModel):
    """A mismatched pair was turned face-down."""

    type: Literal["cards_reverted"] = "cards_reverted"
    timestamp: float = Field(default_factory=time.time)


class GameOverEvent(BaseModel):
    """All pairs found."""

    type: Literal["game_over"] = "game_over"
    score: int
    moves: int


class ErrorEvent(BaseModel):
    """Error notification."""

    type: Literal["error"] = "error"
    code: str
    message: str


# =============================================================================
# Client to Server Messages
# =============================================================================


class SelectCardMessage(BaseModel):
    """Player picked a card."""

    type: Literal["select_card"] = "select_card"
    index: StrictInt


class ShuffleMessage(BaseModel):
    """Request to reshuffle the deck."""

    type: Literal["shuffle"] = "shuffle"


class NewGameMessage(BaseModel):
    """Request to deal a new game."""

    type: Literal["new_game"] = "new_game"


class PingMessage(BaseModel):
    """Keep-alive ping."""

    type: Literal["ping"] = "ping"
