"""
Errors raised by the engine.
Everything derives from GameError so callers can catch the whole family.
"""

from typing import Optional, Sequence


class GameError(Exception):
    pass


class PegLengthMismatch(GameError, ValueError):
    """Explicit pegs do not agree with the configured peg count."""

    def __init__(self, pegs: Sequence[int], peg_count: int) -> None:
        self.pegs = list(pegs)
        self.peg_count = peg_count
        super().__init__(
            f"Trying to build a game with pegs {self.pegs} (length {len(self.pegs)}) "
            f"and peg_count {peg_count}."
        )


class NoGuessesLeft(GameError):
    def __init__(self, max_guesses: Optional[int]) -> None:
        self.max_guesses = max_guesses
        super().__init__(f"No guesses left: the limit of {max_guesses} has been reached.")


class InvalidGuess(GameError, ValueError):
    def __init__(self, guess, expected_length: int, reason: str) -> None:
        self.guess = guess
        self.expected_length = expected_length
        super().__init__(reason)


class UnsupportedVariant(GameError, NotImplementedError):
    def __init__(self, variant) -> None:
        self.variant = variant
        super().__init__(f"{variant} is not supported yet.")
