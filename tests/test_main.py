"""Tests for main – headless autoplay driver."""

from __future__ import annotations

import datetime

from main import play_game, run_autoplay
from merge_ai.greedy_ai import GreedyAI
from merge_ai.random_ai import RandomAI
from merge_game.records import GameRecord
from merge_game.session import GameSession
from merge_game.spawn import SeededRandomSource


class TestPlayGame:
    def test_plays_until_terminal(self):
        session = GameSession(random_source=SeededRandomSource(8))
        state = play_game(session, GreedyAI())
        assert state.is_over or state.is_won
        assert state.moves > 0

    def test_max_turns(self):
        session = GameSession(random_source=SeededRandomSource(8))
        state = play_game(session, GreedyAI(), max_turns=5)
        assert state.moves <= 5


class TestRunAutoplay:
    def test_one_record_per_game(self):
        ais = {"Greedy": GreedyAI(), "Random": RandomAI(SeededRandomSource(1))}
        records = run_autoplay(mode="limited", games=2, ais=ais)
        assert len(records) == 4
        assert all(isinstance(r, GameRecord) for r in records)
        assert all(r.mode == "limited" and r.moves <= 50 for r in records)

    def test_daily_records_are_dated_today(self):
        records = run_autoplay(mode="daily", games=1, ais={"Greedy": GreedyAI()})
        assert records[0].date_key == datetime.date.today().isoformat()
