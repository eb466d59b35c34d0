"""Root conftest for path setup and shared fixtures.

This file is loaded first by pytest and ensures the project root
is on sys.path before any test modules are imported.
"""

import sys
from pathlib import Path

# Add project root to path IMMEDIATELY
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import asyncio
import json
import random
from typing import Any

import pytest

from memory_server.game.engine import MemoryEngine
from memory_server.game.timer import ManualScheduler
from memory_server.models.game import Card, GameConfig


# =============================================================================
# Deterministic Dealing
# =============================================================================


class NoShuffleRandom(random.Random):
    """Random source that leaves sequences in place.

    Dealing ``symbols * 2`` without shuffling gives ``[A, B, A, B]`` for
    symbols ``["A", "B"]``.
    """

    def shuffle(self, x) -> None:
        pass


class FakeClock:
    """Controllable clock for ManualScheduler."""

    def __init__(self):
        self.now = 0.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def ab_config() -> GameConfig:
    """Two pairs, four cards."""
    return GameConfig(symbols=["A", "B"], revert_delay_seconds=1.0)


@pytest.fixture
def fake_clock() -> FakeClock:
    """Clock that only moves when told to."""
    return FakeClock()


@pytest.fixture
def scheduler(fake_clock) -> ManualScheduler:
    """Scheduler driven by the fake clock."""
    return ManualScheduler(clock=fake_clock)


@pytest.fixture
def ab_engine(ab_config, scheduler) -> MemoryEngine:
    """Engine dealt as [A, B, A, B]."""
    return MemoryEngine(ab_config, scheduler=scheduler, rng=NoShuffleRandom())


@pytest.fixture
def engine_factory(scheduler):
    """Build unshuffled engines for arbitrary symbol sets."""

    def factory(symbols: list[str], delay: float = 1.0) -> MemoryEngine:
        config = GameConfig(symbols=symbols, revert_delay_seconds=delay)
        return MemoryEngine(config, scheduler=scheduler, rng=NoShuffleRandom())

    return factory


@pytest.fixture
def sample_cards() -> list[Card]:
    """Cards in each visible state."""
    return [
        Card(content="A"),
        Card(content="B", is_face_up=True),
        Card(content="C", is_face_up=True, is_matched=True),
    ]


@pytest.fixture
def no_shuffle_rng() -> NoShuffleRandom:
    """Random source that deals symbols in order."""
    return NoShuffleRandom()


# =============================================================================
# Mock WebSocket Fixture
# =============================================================================


class MockWebSocket:
    """Mock WebSocket for testing."""

    def __init__(self):
        self.accepted = False
        self.closed = False
        self.sent_messages: list[str] = []
        self.receive_queue: list[str] = []
        self._should_fail = False

    async def accept(self) -> None:
        """Accept the connection."""
        self.accepted = True

    async def close(self) -> None:
        """Close the connection."""
        self.closed = True

    async def send_text(self, message: str) -> None:
        """Send a text message."""
        if self._should_fail:
            raise ConnectionError("Connection closed")
        self.sent_messages.append(message)

    async def receive_text(self) -> str:
        """Receive a text message."""
        if self.receive_queue:
            return self.receive_queue.pop(0)
        raise asyncio.TimeoutError("No message")

    def queue_message(self, message: str) -> None:
        """Queue a message to be received."""
        self.receive_queue.append(message)

    def set_should_fail(self, should_fail: bool) -> None:
        """Set whether send should fail."""
        self._should_fail = should_fail

    def get_sent_events(self) -> list[dict]:
        """Parse sent messages as JSON events."""
        return [json.loads(msg) for msg in self.sent_messages]

    def get_event_types(self) -> list[str]:
        """Types of the sent events, in order."""
        return [event["type"] for event in self.get_sent_events()]


@pytest.fixture
def mock_websocket() -> MockWebSocket:
    """Create a mock WebSocket."""
    return MockWebSocket()


@pytest.fixture
def mock_websocket_factory():
    """Factory to create multiple mock WebSockets."""

    def factory() -> MockWebSocket:
        return MockWebSocket()

    return factory


# =============================================================================
# Async Helpers
# =============================================================================


@pytest.fixture
def async_callback_tracker():
    """Track async callback invocations."""

    class CallbackTracker:
        def __init__(self):
            self.calls: list[Any] = []

        async def callback(self, *args, **kwargs) -> None:
            self.calls.append((args, kwargs))

    return CallbackTracker()
