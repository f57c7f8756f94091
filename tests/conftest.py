import random

import pytest

from pingis.models.player import IdAllocator, Player


@pytest.fixture
def allocator():
    return IdAllocator()


@pytest.fixture
def rng():
    return random.Random(42)


@pytest.fixture
def make_players(allocator):
    def _make(n, points=None):
        players = [Player.create(allocator, f"P{i + 1:02d}") for i in range(n)]
        if points is not None:
            for player, value in zip(players, points):
                player.total_points = value
        return players

    return _make
