"""Game engine components."""

from .engine import MemoryEngine
from .session import GameSession, GameSessionManager
from .timer import ManualScheduler, RevertTimer

__all__ = ["MemoryEngine", "GameSession", "GameSessionManager", "ManualScheduler", "RevertTimer"]
