"""랭킹용 게임 기록.

저장은 UI 쪽 책임이며 여기서는 기록을 만들고 정렬만 합니다.
"""
import datetime
import time
from dataclasses import dataclass

import config
from merge_game.tiers import tier_name


@dataclass(frozen=True)
class GameRecord:
    mode: str
    score: int
    moves: int
    highest_tier: str
    date_key: str
    timestamp: float


@dataclass(frozen=True)
class LeaderboardEntry:
    rank: int
    score: int
    moves: int
    highest_tier: str
    date_key: str


def date_key(day=None):
    """YYYY-MM-DD 형식의 날짜 키."""
    return (day or datetime.date.today()).isoformat()


def record_from_state(state, day=None, timestamp=None):
    return GameRecord(
        mode=state.mode,
        score=state.score,
        moves=state.moves,
        highest_tier=tier_name(state.highest_level),
        date_key=date_key(day),
        timestamp=time.time() if timestamp is None else timestamp,
    )


def build_leaderboard(records, mode, day_key=None, limit=config.LEADERBOARD_LIMIT):
    """
    모드별 랭킹을 만듭니다. 점수 내림차순, 같으면 이동 수가 적은 기록이 앞섭니다.
    데일리 모드는 day_key (기본값: 오늘) 날짜의 기록만 포함합니다.
    """
    if mode == "daily" and day_key is None:
        day_key = date_key()
    filtered = [r for r in records if r.mode == mode and (day_key is None or r.date_key == day_key)]
    filtered.sort(key=lambda r: (-r.score, r.moves))
    return [
        LeaderboardEntry(rank=idx + 1, score=r.score, moves=r.moves,
                         highest_tier=r.highest_tier, date_key=r.date_key)
        for idx, r in enumerate(filtered[:limit])
    ]


def best_score(records, mode=None):
    scores = [r.score for r in records if mode is None or r.mode == mode]
    return max(scores, default=0)
