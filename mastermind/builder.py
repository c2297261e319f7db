"""
Explicit validation & the game builder
- GameBuilder collects optional settings, each setter hands back a new,
  validated builder so calls can be chained.
- build() resolves defaults in one place and produces the Game.

    game = GameBuilder().with_peg_count(5).with_max_guesses(10).build()
"""

import logging
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from . import settings
from .errors import PegLengthMismatch
from .game import Game
from .random_client import ByteSource, fetch_pegs
from .types import PegValue

logger = logging.getLogger(__name__)


class GameBuilder(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    pegs: Optional[List[PegValue]] = Field(None, description="Explicit secret; generated when omitted")
    peg_range: Optional[int] = Field(None, ge=1, le=256, description="Exclusive upper bound for generated pegs")
    peg_count: Optional[int] = Field(None, ge=1, le=255, description="Length of the secret")
    max_guesses: Optional[int] = Field(None, ge=0, le=255, description="Guess limit")
    unlimited_guesses: bool = Field(False, description="Disables the guess limit when true")

    @classmethod
    def from_variant(cls, variant) -> "GameBuilder":
        from .variant import builder_for

        return builder_for(variant)

    # --- Fluent setters (each returns a new builder) ---

    def with_pegs(self, pegs) -> "GameBuilder":
        """None clears explicit pegs so the secret is generated again."""
        return self._with(pegs=pegs)

    def with_peg_range(self, peg_range: int) -> "GameBuilder":
        return self._with(peg_range=peg_range)

    def with_peg_count(self, peg_count: int) -> "GameBuilder":
        return self._with(peg_count=peg_count)

    def with_max_guesses(self, max_guesses: int) -> "GameBuilder":
        return self._with(max_guesses=max_guesses)

    def with_unlimited_guesses(self, unlimited_guesses: bool = True) -> "GameBuilder":
        return self._with(unlimited_guesses=unlimited_guesses)

    def _with(self, **changes) -> "GameBuilder":
        # model_copy(update=...) skips validation, so go through the constructor
        return type(self).model_validate({**self.model_dump(), **changes})

    # --- Defaults resolution ---

    def resolved_peg_count(self) -> int:
        return self.peg_count if self.peg_count is not None else settings.DEFAULT_PEG_COUNT

    def resolved_peg_range(self) -> int:
        return self.peg_range if self.peg_range is not None else settings.DEFAULT_PEG_RANGE

    def resolved_max_guesses(self) -> Optional[int]:
        if self.unlimited_guesses:
            return None
        return self.max_guesses if self.max_guesses is not None else settings.DEFAULT_MAX_GUESSES

    # --- Build ---

    def calculate_pegs(self, byte_source: Optional[ByteSource] = None) -> List[int]:
        peg_count = self.resolved_peg_count()

        if self.pegs is not None:
            if len(self.pegs) != peg_count:
                raise PegLengthMismatch(self.pegs, peg_count)
            return list(self.pegs)

        return fetch_pegs(peg_count, self.resolved_peg_range(), byte_source)

    def build(self, byte_source: Optional[ByteSource] = None) -> Game:
        pegs = self.calculate_pegs(byte_source)
        max_guesses = self.resolved_max_guesses()
        logger.debug(
            "building game: peg_count=%d explicit_pegs=%s max_guesses=%s",
            len(pegs), self.pegs is not None, max_guesses,
        )
        return Game(pegs, max_guesses)
