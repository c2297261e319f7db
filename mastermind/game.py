"""
Game session
Holds the secret and the guess history for one game, scores each guess and
enforces the guess limit. A perfect match does not end the game; callers
decide what to do with the scores.
"""

import logging
import operator
from threading import RLock
from typing import List, Optional, Sequence, Tuple

from pydantic import TypeAdapter, ValidationError

from .engine import is_win, score_guess
from .errors import InvalidGuess, NoGuessesLeft
from .schemas import GameState, GuessEntry
from .types import GameStatus, Pegs, Score

logger = logging.getLogger(__name__)

_pegs_adapter = TypeAdapter(Pegs)


class Game:
    """
    Build one with GameBuilder (or Game.default()) rather than by hand.

    Args:
        pegs: the secret, fixed for the life of the game.
        max_guesses: guess limit, or None for unlimited guesses.
    """

    def __init__(self, pegs: Sequence[int], max_guesses: Optional[int] = None) -> None:
        if len(pegs) == 0:
            raise ValueError("A game needs at least one peg.")
        if max_guesses is not None and max_guesses < 0:
            raise ValueError(f"max_guesses cannot be negative, got {max_guesses}.")

        self._pegs: Tuple[int, ...] = tuple(_pegs_adapter.validate_python(list(pegs)))
        self._guesses: List[Tuple[int, ...]] = []
        self._max_guesses = max_guesses
        self._lock = RLock()

    @classmethod
    def default(cls) -> "Game":
        from .builder import GameBuilder

        return GameBuilder().build()

    @classmethod
    def from_variant(cls, variant) -> "Game":
        from .variant import builder_for

        return builder_for(variant).build()

    # --- Read-only accessors ---

    @property
    def pegs(self) -> Tuple[int, ...]:
        return self._pegs

    @property
    def guesses(self) -> Tuple[Tuple[int, ...], ...]:
        with self._lock:
            return tuple(self._guesses)

    @property
    def max_guesses(self) -> Optional[int]:
        return self._max_guesses

    @property
    def guesses_left(self) -> Optional[int]:
        if self._max_guesses is None:
            return None
        with self._lock:
            return self._max_guesses - len(self._guesses)

    @property
    def is_exhausted(self) -> bool:
        return self.guesses_left == 0

    @property
    def status(self) -> GameStatus:
        return "exhausted" if self.is_exhausted else "active"

    @property
    def is_solved(self) -> bool:
        with self._lock:
            return any(is_win(self._pegs, g) for g in self._guesses)

    # --- Play ---

    def guess(self, pegs: Sequence[int]) -> Score:
        attempt = self._validate_guess(pegs)

        with self._lock:
            if self._max_guesses is not None and len(self._guesses) >= self._max_guesses:
                logger.info("guess refused, limit of %d reached", self._max_guesses)
                raise NoGuessesLeft(self._max_guesses)

            self._guesses.append(attempt)
            score = score_guess(self._pegs, attempt)
            logger.debug("guess %d recorded: %s", len(self._guesses), score)
            return score

    def hits(self, index: int) -> Optional[Score]:
        """Score of a recorded guess, or None if there is no guess at that index."""
        try:
            index = operator.index(index)
        except TypeError:
            raise TypeError(f"Guess index must be an integer, got {index!r}.") from None

        with self._lock:
            if index < 0 or index >= len(self._guesses):
                return None
            attempt = self._guesses[index]
        return score_guess(self._pegs, attempt)

    def snapshot(self, reveal: bool = False) -> GameState:
        with self._lock:
            history = []
            for attempt in self._guesses:
                hits, near_hits = score_guess(self._pegs, attempt)
                history.append(GuessEntry(guess=list(attempt), hits=hits, near_hits=near_hits))

            return GameState(
                peg_count=len(self._pegs),
                max_guesses=self._max_guesses,
                guesses_left=self.guesses_left,
                status=self.status,
                solved=any(is_win(self._pegs, g) for g in self._guesses),
                history=history,
                secret=list(self._pegs) if reveal else None,
            )

    def _validate_guess(self, pegs: Sequence[int]) -> Tuple[int, ...]:
        expected = len(self._pegs)

        # --- value guard ---
        try:
            attempt = _pegs_adapter.validate_python(list(pegs), strict=True)
        except (TypeError, ValidationError) as err:
            raise InvalidGuess(pegs, expected, f"Guess pegs must be integers between 0 and 255: {err}") from err

        # --- length guard ---
        if len(attempt) != expected:
            raise InvalidGuess(pegs, expected, f"Guess must have exactly {expected} pegs, got {len(attempt)}.")

        return tuple(attempt)

    def __repr__(self) -> str:
        return f"Game(peg_count={len(self._pegs)}, guesses={len(self._guesses)}, max_guesses={self._max_guesses})"
