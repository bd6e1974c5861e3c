"""Shared fixtures for engine tests."""

from __future__ import annotations

import pytest

from merge_game.session import GameSession
from merge_game.spawn import RandomSource, SeededRandomSource


class FixedRandomSource(RandomSource):
    """Always picks the first empty cell and the smallest spawn value."""

    def __init__(self) -> None:
        super().__init__(None)

    def index(self, n):
        return 0

    def choice(self, values, weights):
        return values[0]


@pytest.fixture()
def fixed_random() -> FixedRandomSource:
    return FixedRandomSource()


@pytest.fixture()
def seeded_session() -> GameSession:
    return GameSession(random_source=SeededRandomSource(1234))


@pytest.fixture()
def fixed_session(fixed_random: FixedRandomSource) -> GameSession:
    return GameSession(random_source=fixed_random)
