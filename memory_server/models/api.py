"""API request/response models."""

from typing import Optional
from pydantic import BaseModel, StrictInt

from .game import GameState, SelectionOutcome


class SessionConfigRequest(BaseModel):
    """Request to create a new game session."""

    symbols: Optional[list[str]] = None
    revert_delay_seconds: Optional[float] = None


class SessionResponse(BaseModel):
    """Response after creating a session."""

    session_id: str
    websocket_url: str
    card_count: int


class SelectCardRequest(BaseModel):
    """Card selection."""

    index: StrictInt


class SelectCardResponse(BaseModel):
    """Outcome of a card selection plus the resulting state."""

    outcome: SelectionOutcome
    state: GameState


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    active_sessions: int
