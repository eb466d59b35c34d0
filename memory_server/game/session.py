"""Game session management."""

import asyncio
import logging
import random
import uuid
from typing import Optional

from ..models.game import GameConfig, GameState, SelectionOutcome
from ..models.events import (
    ConnectionAckEvent,
    GameStateEvent,
    CardFlippedEvent,
    MatchFoundEvent,
    MismatchEvent,
    CardsRevertedEvent,
    GameOverEvent,
)
from ..websocket_manager import WebSocketManager
from .engine import MemoryEngine
from .timer import RevertTimer


logger = logging.getLogger(__name__)


class GameSession:
    """Manages a single memory game and its connected clients."""

    def __init__(
        self,
        session_id: str,
        config: GameConfig,
        rng: Optional[random.Random] = None,
    ):
        self.session_id = session_id
        self.config = config

        # Components
        self.ws_manager = WebSocketManager()
        self.revert_timer = RevertTimer(on_fired=self._on_cards_reverted)
        self.engine = MemoryEngine(config, scheduler=self.revert_timer, rng=rng)

    @property
    def status(self) -> str:
        """in_progress or complete."""
        return "complete" if self.engine.game_over else "in_progress"

    def get_state(self) -> GameState:
        """Snapshot of the current game."""
        return self.engine.build_game_state(self.session_id)

    async def broadcast(self, event) -> None:
        """Broadcast event to all connected clients."""
        await self.ws_manager.broadcast(event)

    async def on_client_connect(self, websocket) -> None:
        """Handle new client connection."""
        await self.ws_manager.connect(websocket)

        await self.ws_manager.send_event(
            websocket,
            ConnectionAckEvent(session_id=self.session_id),
        )
        await self.ws_manager.send_event(websocket, GameStateEvent(state=self.get_state()))

    async def on_client_disconnect(self, websocket) -> None:
        """Handle client disconnection."""
        await self.ws_manager.disconnect(websocket)

    async def select_card(self, index: int) -> SelectionOutcome:
        """
        Select a card and broadcast the result.

        Raises:
            InvalidIndexError: index is outside the deck; nothing is broadcast
        """
        outcome = self.engine.select_card(index)

        if outcome == SelectionOutcome.IGNORED:
            return outcome

        card = self.engine.cards[index]
        if outcome == SelectionOutcome.FIRST_PICK:
            await self.broadcast(CardFlippedEvent(index=index, content=card.content))
        elif outcome == SelectionOutcome.MISMATCH:
            await self.broadcast(
                MismatchEvent(
                    index=index,
                    content=card.content,
                    score=self.engine.score,
                    moves=self.engine.moves,
                    revert_in_seconds=self.config.revert_delay_seconds,
                )
            )
        else:
            await self.broadcast(
                MatchFoundEvent(
                    index=index,
                    content=card.content,
                    score=self.engine.score,
                    moves=self.engine.moves,
                )
            )
            if outcome == SelectionOutcome.GAME_OVER:
                await self.broadcast(
                    GameOverEvent(score=self.engine.score, moves=self.engine.moves)
                )

        await self.broadcast(GameStateEvent(state=self.get_state()))
        return outcome

    async def new_game(self) -> GameState:
        """Deal a new game and broadcast it."""
        self.engine.start_new_game()
        state = self.get_state()
        await self.broadcast(GameStateEvent(state=state))
        return state

    async def shuffle(self) -> GameState:
        """Reshuffle the deck and broadcast it."""
        self.engine.shuffle_cards()
        state = self.get_state()
        await self.broadcast(GameStateEvent(state=state))
        return state

    async def _on_cards_reverted(self) -> None:
        """Tell clients a mismatched pair went face-down."""
        await self.broadcast(CardsRevertedEvent())
        await self.broadcast(GameStateEvent(state=self.get_state()))

    async def cleanup(self) -> None:
        """Cleanup session resources."""
        await self.revert_timer.shutdown()
        await self.ws_manager.close_all()


class GameSessionManager:
    """Manages all active game sessions."""

    def __init__(self):
        self._sessions: dict[str, GameSession] = {}
        self._lock = asyncio.Lock()

    async def create_session(self, config: GameConfig) -> GameSession:
        """Create a new game session."""
        async with self._lock:
            session_id = str(uuid.uuid4())[:8]
            session = GameSession(session_id, config)
            self._sessions[session_id] = session
            logger.info("Created session %s with %d cards", session_id, len(session.engine.cards))
            return session

    async def get_session(self, session_id: str) -> Optional[GameSession]:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    async def remove_session(self, session_id: str) -> None:
        """Remove and cleanup a session."""
        async with self._lock:
            if session_id in self._sessions:
                await self._sessions[session_id].cleanup()
                del self._sessions[session_id]
                logger.info("Removed session %s", session_id)

    @property
    def active_session_count(self) -> int:
        """Number of active sessions."""
        return len(self._sessions)

    async def cleanup_all(self) -> None:
        """Cleanup all sessions."""
        async with self._lock:
            for session in self._sessions.values():
                await session.cleanup()
            self._sessions.clear()
