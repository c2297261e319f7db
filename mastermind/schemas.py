"""
Pydantic read models
- Snapshots of a game that a caller (CLI, UI, storage layer) can serialize.
- The secret is never included unless the caller asks for it.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from .types import GameStatus


# 1. Describes the feedback for a single guess
class GuessEntry(BaseModel):
    guess: List[int] = Field(..., description="The player's guess")
    hits: int = Field(..., ge=0, description="Pegs with the right value in the right position")
    near_hits: int = Field(..., ge=0, description="Pegs with the right value in another position")


# 2. Represents the overall state of the game
class GameState(BaseModel):
    peg_count: int = Field(..., description="Length of the secret and of every guess")
    max_guesses: Optional[int] = Field(None, description="Guess limit; None means unlimited")
    guesses_left: Optional[int] = Field(None, description="How many guesses remain; None means unlimited")
    status: GameStatus = Field(..., description="Current state of the game")
    solved: bool = Field(..., description="True once any guess matched the secret exactly")
    history: List[GuessEntry] = Field(..., description="All guesses made so far with feedback")
    secret: Optional[List[int]] = Field(None, description="The secret (only when revealed)")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "peg_count": 4,
                    "max_guesses": 12,
                    "guesses_left": 11,
                    "status": "active",
                    "solved": False,
                    "history": [{"guess": [3, 5, 1, 0], "hits": 1, "near_hits": 2}],
                    "secret": None,
                },
            ]
        }
    }
