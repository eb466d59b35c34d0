"""REST API routes."""

from fastapi import APIRouter, HTTPException
from pydantic import ValidationError

from ..config import settings
from ..exceptions import InvalidIndexError
from ..models.api import (
    SessionConfigRequest,
    SessionResponse,
    SelectCardRequest,
    SelectCardResponse,
    HealthResponse,
)
from ..models.game import GameConfig, GameState
from ..game import GameSession, GameSessionManager

router = APIRouter()

# Global session manager (will be initialized in main.py)
session_manager: GameSessionManager = None


def init_dependencies(sm: GameSessionManager):
    """Initialize route dependencies."""
    global session_manager
    session_manager = sm


async def _require_session(session_id: str) -> GameSession:
    if session_manager is None:
        raise HTTPException(status_code=500, detail="Server not initialized")

    session = await session_manager.get_session(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


@router.post("/sessions", response_model=SessionResponse)
async def create_session(request: SessionConfigRequest):
    """Create a new game session."""
    if session_manager is None:
        raise HTTPException(status_code=500, detail="Server not initialized")

    try:
        config = GameConfig(
            symbols=request.symbols if request.symbols is not None else settings.default_symbols,
            revert_delay_seconds=(
                request.revert_delay_seconds
                if request.revert_delay_seconds is not None
                else settings.revert_delay_seconds
            ),
        )
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.errors(include_url=False, include_context=False))

    session = await session_manager.create_session(config)

    return SessionResponse(
        session_id=session.session_id,
        websocket_url=f"/ws/{session.session_id}",
        card_count=len(session.engine.cards),
    )


@router.get("/sessions/{session_id}", response_model=GameState)
async def get_session(session_id: str):
    """Get current game state."""
    session = await _require_session(session_id)
    return session.get_state()


@router.post("/sessions/{session_id}/select", response_model=SelectCardResponse)
async def select_card(session_id: str, request: SelectCardRequest):
    """Select a card by index."""
    session = await _require_session(session_id)

    try:
        outcome = await session.select_card(request.index)
    except InvalidIndexError as e:
        raise HTTPException(status_code=400, detail=f"invalid_index: {e}")

    return SelectCardResponse(outcome=outcome, state=session.get_state())


@router.post("/sessions/{session_id}/shuffle", response_model=GameState)
async def shuffle_cards(session_id: str):
    """Reshuffle the deck."""
    session = await _require_session(session_id)
    return await session.shuffle()


@router.post("/sessions/{session_id}/new-game", response_model=GameState)
async def new_game(session_id: str):
    """Deal a new game in the same session."""
    session = await _require_session(session_id)
    return await session.new_game()


@router.delete("/sessions/{session_id}")
async def delete_session(session_id: str):
    """End and cleanup a session."""
    await _require_session(session_id)
    await session_manager.remove_session(session_id)
    return {"status": "deleted"}


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    active_sessions = session_manager.active_session_count if session_manager else 0

    return HealthResponse(
        status="healthy",
        active_sessions=active_sessions,
    )
