"""
Testing pure game logic.
"""

import itertools
import random

import pytest

from mastermind.engine import score_guess, is_win


@pytest.mark.parametrize("guess,expected", [
    ([1, 1, 1, 1], (2, 0)),
    ([0, 2, 1, 4], (0, 2)),
    ([1, 2, 3, 1], (1, 2)),
    ([1, 1, 2, 2], (4, 0)),
])
def test_score_guess_with_duplicates_in_secret(guess, expected):
    assert score_guess([1, 1, 2, 2], guess) == expected


@pytest.mark.parametrize("guess,expected", [
    ([0, 0, 0, 0], (0, 0)),
    ([0, 0, 1, 0], (0, 1)),
    ([0, 5, 1, 0], (1, 1)),
    ([3, 5, 1, 0], (1, 2)),
])
def test_score_guess_distinct_secret(guess, expected):
    assert score_guess([1, 5, 6, 3], guess) == expected


def test_score_guess_no_matches():
    result = score_guess([0, 1, 2, 3], [4, 5, 6, 7])
    hits = result[0]
    near_hits = result[1]

    assert hits == 0
    assert near_hits == 0


def test_score_guess_peg_counted_once():
    # One 2 in the secret, three in the guess: only one near hit
    assert score_guess([2, 0, 0, 0], [1, 2, 2, 2]) == (0, 1)
    # The exact hit uses up the 2, nothing left for a near hit
    assert score_guess([2, 0, 0, 0], [2, 2, 2, 2]) == (1, 0)


def test_score_guess_full_permutation():
    assert score_guess([1, 2, 3, 4], [4, 3, 2, 1]) == (0, 4)


def test_score_guess_rejects_length_mismatch():
    with pytest.raises(ValueError):
        score_guess([1, 2, 3, 4], [1, 2, 3])
    with pytest.raises(ValueError):
        score_guess([], [])


def test_score_guess_never_exceeds_length():
    rng = random.Random(7)
    for n, colors in itertools.product(range(1, 7), range(1, 7)):
        for _ in range(20):
            secret = [rng.randrange(colors) for _ in range(n)]
            guess = [rng.randrange(colors) for _ in range(n)]
            hits, near_hits = score_guess(secret, guess)
            assert hits >= 0 and near_hits >= 0
            assert hits + near_hits <= n


def test_is_win_true_and_false():
    assert is_win([1, 2, 3, 4], [1, 2, 3, 4]) is True
    assert is_win([1, 2, 3, 4], [1, 2, 3, 5]) is False
    assert is_win([1, 2, 3, 4], [1, 2, 3]) is False
