"""Matching-pairs game engine."""

import itertools
import logging
import random
import threading
from dataclasses import dataclass
from typing import Any, Optional

from ..exceptions import InvalidIndexError
from ..models.game import Card, GameConfig, GameState, SelectionOutcome
from .timer import ManualScheduler


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PendingRevert:
    """Two mismatched cards waiting to be turned face-down."""

    card_ids: tuple[str, str]
    generation: int


class MemoryEngine:
    """
    Owns the deck and all mutable game state.

    Rep:
      - cards holds exactly two cards per configured symbol
      - matched => face up
      - game_over == all cards matched
      - score >= 0
    Safety:
      - every mutation, including deferred reverts, runs under one
        re-entrant lock
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        scheduler: Any = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Create an engine and deal the first game.

        Args:
            config: Symbol set and revert delay
            scheduler: Object with schedule(delay, callback) and cancel_all();
                defaults to a ManualScheduler the owner must drive
            rng: Random source used for dealing and shuffling
        """
        self.config = config or GameConfig()
        self.scheduler = scheduler if scheduler is not None else ManualScheduler()
        self._rng = rng or random.Random()
        self._lock = threading.RLock()

        self.cards: list[Card] = []
        self.score = 0
        self.moves = 0
        self.game_over = False

        # First pick is tracked by card id so a reshuffle cannot orphan it
        self._pending_card_id: Optional[str] = None
        self._generation = 0
        self._tokens = itertools.count(1)
        self._reverts: dict[int, PendingRevert] = {}

        self.start_new_game()

    @property
    def pending_first_selection(self) -> Optional[int]:
        """Index of the first card of an in-progress comparison."""
        if self._pending_card_id is None:
            return None
        for i, card in enumerate(self.cards):
            if card.id == self._pending_card_id:
                return i
        return None

    @property
    def pending_reverts(self) -> int:
        """Number of mismatches still waiting to flip back."""
        return len(self._reverts)

    @property
    def remaining_pairs(self) -> int:
        """Number of pairs not yet found."""
        return sum(1 for card in self.cards if not card.is_matched) // 2

    def start_new_game(self) -> None:
        """Deal a fresh shuffled deck and reset score, moves and game over."""
        with self._lock:
            pairs = list(self.config.symbols) * 2
            self._rng.shuffle(pairs)
            self.cards = [Card(content=symbol) for symbol in pairs]

            self.score = 0
            self.moves = 0
            self.game_over = False
            self._pending_card_id = None

            # Reverts from the previous deal must never touch this one
            self._generation += 1
            self._reverts.clear()
            self.scheduler.cancel_all()

            logger.info(
                "New game dealt: %d cards (generation %d)",
                len(self.cards),
                self._generation,
            )

    def shuffle_cards(self) -> None:
        """Re-randomize card positions, keeping every card's flags."""
        with self._lock:
            self._rng.shuffle(self.cards)
            logger.debug("Deck reshuffled with %d pending reverts", len(self._reverts))

    def select_card(self, index: int) -> SelectionOutcome:
        """
        Select the card at index.

        Raises:
            InvalidIndexError: index is outside the deck
        """
        with self._lock:
            if not 0 <= index < len(self.cards):
                raise InvalidIndexError(index, len(self.cards))

            card = self.cards[index]
            if card.is_matched or card.is_face_up:
                return SelectionOutcome.IGNORED

            card.is_face_up = True

            first_index = self.pending_first_selection
            if first_index is None:
                self._pending_card_id = card.id
                return SelectionOutcome.FIRST_PICK

            self._pending_card_id = None
            self.moves += 1
            first = self.cards[first_index]

            if first.content == card.content:
                first.is_matched = True
                card.is_matched = True
                self.score += 2
                logger.debug("Match at %d/%d, score %d", first_index, index, self.score)

                if all(c.is_matched for c in self.cards):
                    self.game_over = True
                    logger.info("Game over after %d moves, score %d", self.moves, self.score)
                    return SelectionOutcome.GAME_OVER
                return SelectionOutcome.MATCH

            self._schedule_revert(first, card)
            if self.score > 0:
                self.score -= 1
            logger.debug("Mismatch at %d/%d, score %d", first_index, index, self.score)
            return SelectionOutcome.MISMATCH

    def _schedule_revert(self, first: Card, second: Card) -> None:
        """Queue the face-down flip for a mismatched pair."""
        token = next(self._tokens)
        self._reverts[token] = PendingRevert(
            card_ids=(first.id, second.id),
            generation=self._generation,
        )
        self.scheduler.schedule(
            self.config.revert_delay_seconds,
            lambda: self.apply_revert(token),
        )

    def apply_revert(self, token: int) -> bool:
        """Turn a mismatched pair face-down. Returns False if already applied or stale."""
        with self._lock:
            revert = self._reverts.pop(token, None)
            if revert is None or revert.generation != self._generation:
                return False

            for card in self.cards:
                if card.id in revert.card_ids and not card.is_matched:
                    card.is_face_up = False
            return True

    def flush_reverts(self) -> int:
        """Apply every outstanding revert now. Returns how many were applied."""
        with self._lock:
            return sum(1 for token in sorted(self._reverts) if self.apply_revert(token))

    def build_game_state(self, session_id: str = "") -> GameState:
        """Build complete game state for client."""
        with self._lock:
            return GameState(
                session_id=session_id,
                cards=[card.model_copy() for card in self.cards],
                score=self.score,
                moves=self.moves,
                game_over=self.game_over,
                pending_first_selection=self.pending_first_selection,
                pending_reverts=self.pending_reverts,
            )
