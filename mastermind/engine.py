"""
Pure game logic (no state, no I/O).
We compute two feedback numbers for each guess:
- hits: how many positions are exactly correct (right value, right place)
- near_hits: how many of the remaining guess pegs match a remaining secret peg
  somewhere else

A peg in either sequence counts towards at most one match.
We allow duplicates in the secret and in the guess.
"""

import logging
from typing import Sequence

from .types import Score

logger = logging.getLogger(__name__)


def score_guess(secret: Sequence[int], guess: Sequence[int]) -> Score:
    """
    Example:
      secret = [1, 5, 6, 3]
      guess  = [3, 5, 1, 0]
      hits      = 1  (the 5 in position 1)
      near_hits = 2  (the 1 and the 3, both in the wrong place)
      Returns a tuple: (hits, near_hits)
    """

    # 0. Validate lengths match
    n = len(secret)
    if n == 0 or len(guess) != n:
        raise ValueError("Secret and guess must be the same non-zero length.")

    secret_used = [False] * n
    guess_used = [False] * n

    # 1. Exact position matches --> hits
    hits = 0
    i = 0
    while i < n:
        if secret[i] == guess[i]:
            secret_used[i] = True
            guess_used[i] = True
            hits += 1
        i += 1

    # 2. Pair every leftover secret peg with the first leftover guess peg
    #    of the same value in another position --> near_hits
    near_hits = 0
    for i in range(n):
        if secret_used[i]:
            continue
        for j in range(n):
            if i != j and not guess_used[j] and secret[i] == guess[j]:
                secret_used[i] = True
                guess_used[j] = True
                near_hits += 1
                break

    logger.debug("scored %s against secret: hits=%d near_hits=%d", list(guess), hits, near_hits)
    return (hits, near_hits)


def is_win(secret: Sequence[int], guess: Sequence[int]) -> bool:
    """
    Win = all pegs match in order, for all positions.
    Works for any length, as long as lengths match.
    """
    n = len(secret)
    if n == 0 or len(guess) != n:
        return False

    i = 0
    while i < n:
        if secret[i] != guess[i]:
            return False
        i += 1
    return True
