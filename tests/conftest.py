"""
- Provide a fixed byte source so generated secrets are predictable.
- Provide small game factories used across the test modules.
"""

import pytest

from mastermind.builder import GameBuilder
from mastermind.random_client import seeded_source


@pytest.fixture
def byte_source():
    return seeded_source(1234)


@pytest.fixture
def make_game():
    """Build a game with a known secret; extra builder settings via kwargs."""
    def _make_game(pegs, **settings):
        builder = GameBuilder(**settings).with_pegs(pegs)
        if "peg_count" not in settings:
            builder = builder.with_peg_count(len(pegs))
        return builder.build()
    return _make_game
