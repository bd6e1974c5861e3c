"""Tests for merge_game.spawn – spawn policy and random sources."""

from __future__ import annotations

import datetime

import numpy as np
import pytest

import config
from merge_game.spawn import (
    SeededRandomSource,
    SpawnPolicy,
    SystemRandomSource,
    daily_random_source,
    daily_seed,
    resolve_distribution,
)


# ---------------------------------------------------------------------------
# resolve_distribution
# ---------------------------------------------------------------------------

class TestResolveDistribution:
    @pytest.mark.parametrize("name", sorted(config.DIFFICULTIES))
    def test_named_tables(self, name):
        values, weights = resolve_distribution(name)
        assert values == sorted(config.DIFFICULTIES[name])
        assert sum(weights) == pytest.approx(1.0)

    def test_hard_can_spawn_eight(self):
        values, _ = resolve_distribution("hard")
        assert values == [2, 4, 8]

    def test_custom_table(self):
        assert resolve_distribution({4: 0.5, 2: 0.5}) == ([2, 4], [0.5, 0.5])

    def test_unknown_name(self):
        with pytest.raises(ValueError):
            resolve_distribution("nightmare")

    def test_empty_table(self):
        with pytest.raises(ValueError):
            resolve_distribution({})

    def test_not_summing_to_one(self):
        with pytest.raises(ValueError):
            resolve_distribution({2: 0.5, 4: 0.4})

    def test_negative_weight(self):
        with pytest.raises(ValueError):
            resolve_distribution({2: 1.5, 4: -0.5})

    @pytest.mark.parametrize("value", [3, 1, 6])
    def test_non_power_of_two(self, value):
        with pytest.raises(ValueError):
            resolve_distribution({value: 1.0})


# ---------------------------------------------------------------------------
# SpawnPolicy
# ---------------------------------------------------------------------------

class TestSpawnPolicy:
    def test_full_board_is_skipped(self, fixed_random):
        board = np.full((4, 4), 2, dtype=int)
        placed = SpawnPolicy("normal", fixed_random).add_new_tile(board)
        assert placed == []
        assert (board == 2).all()

    def test_fills_only_empty_cell(self):
        board = np.full((3, 3), 4, dtype=int)
        board[1, 2] = 0
        placed = SpawnPolicy("normal", SeededRandomSource(7)).add_new_tile(board)
        assert placed == [(1, 2)]
        assert board[1, 2] in (2, 4)

    def test_two_tiles_on_distinct_cells(self):
        board = np.zeros((4, 4), dtype=int)
        placed = SpawnPolicy("easy", SeededRandomSource(3)).add_new_tile(board, count=2)
        assert len(set(placed)) == 2
        assert np.count_nonzero(board) == 2

    def test_count_larger_than_empty_cells(self):
        board = np.full((2, 2), 8, dtype=int)
        board[0, 0] = 0
        placed = SpawnPolicy("normal", SeededRandomSource(3)).add_new_tile(board, count=2)
        assert placed == [(0, 0)]

    def test_values_follow_table(self):
        policy = SpawnPolicy("hard", SeededRandomSource(11))
        seen = set()
        for _ in range(300):
            board = np.zeros((2, 2), dtype=int)
            policy.add_new_tile(board)
            seen.update(int(v) for v in board.flat if v)
        assert seen <= {2, 4, 8}
        assert 2 in seen

    def test_single_value_table(self):
        policy = SpawnPolicy({4: 1.0}, SeededRandomSource(0))
        board = np.zeros((4, 4), dtype=int)
        policy.add_new_tile(board, count=5)
        assert sorted(set(board.flat)) == [0, 4]

    def test_fixed_source_picks_first_empty(self, fixed_random):
        board = np.array([[2, 0], [0, 0]])
        placed = SpawnPolicy("normal", fixed_random).add_new_tile(board)
        assert placed == [(0, 1)]
        assert board[0, 1] == 2


# ---------------------------------------------------------------------------
# Random sources
# ---------------------------------------------------------------------------

class TestRandomSources:
    def test_seeded_sources_repeat(self):
        a, b = SeededRandomSource(99), SeededRandomSource(99)
        assert [a.index(16) for _ in range(20)] == [b.index(16) for _ in range(20)]

    def test_index_in_range(self):
        source = SystemRandomSource()
        assert all(0 <= source.index(5) < 5 for _ in range(50))

    def test_choice_respects_zero_weight(self):
        source = SeededRandomSource(5)
        assert all(source.choice([2, 4], [1.0, 0.0]) == 2 for _ in range(50))


class TestDailySeed:
    def test_same_day_same_seed(self):
        day = datetime.date(2025, 11, 24)
        assert daily_seed(day) == daily_seed(datetime.date(2025, 11, 24))

    def test_different_days_differ(self):
        assert daily_seed(datetime.date(2025, 11, 24)) != daily_seed(datetime.date(2025, 11, 25))

    def test_fits_in_32_bits(self):
        seed = daily_seed(datetime.date(2030, 12, 31))
        assert 0 < seed < 2 ** 32

    def test_string_hash(self):
        expected = 0
        for ch in "2025-1-5":
            expected = (expected * 31 + ord(ch)) % 2 ** 32
        assert daily_seed(datetime.date(2025, 1, 5)) == expected

    def test_daily_source_is_seeded(self):
        day = datetime.date(2025, 11, 24)
        source = daily_random_source(day)
        assert isinstance(source, SeededRandomSource)
        assert source.seed == daily_seed(day)
