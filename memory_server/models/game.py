"""Game state models."""

import uuid
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, field_validator


DEFAULT_SYMBOLS = ["🍎", "🍌", "🍒", "🍇", "🍉", "🥑", "🍍", "🍓"]


class SelectionOutcome(str, Enum):
    """Result of selecting a card."""

    IGNORED = "ignored"
    FIRST_PICK = "first_pick"
    MATCH = "match"
    MISMATCH = "mismatch"
    GAME_OVER = "game_over"


class Card(BaseModel):
    """Memory card."""

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    content: str
    is_face_up: bool = False
    is_matched: bool = False

    def __str__(self) -> str:
        if self.is_face_up:
            return self.content
        return "??"


class GameConfig(BaseModel):
    """Game configuration."""

    symbols: list[str] = Field(default_factory=lambda: list(DEFAULT_SYMBOLS))
    revert_delay_seconds: float = Field(default=1.0, gt=0)

    @field_validator("symbols")
    @classmethod
    def check_symbols(cls, value: list[str]) -> list[str]:
        if len(value) < 2:
            raise ValueError("At least 2 symbols are required")
        if len(set(value)) != len(value):
            raise ValueError("Symbols must be distinct")
        return value

    @property
    def card_count(self) -> int:
        """Number of cards in a dealt deck."""
        return len(self.symbols) * 2


class GameState(BaseModel):
    """Complete game state for client."""

    session_id: str
    cards: list[Card]
    score: int
    moves: int
    game_over: bool
    pending_first_selection: Optional[int] = None
    pending_reverts: int = 0
