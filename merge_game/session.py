"""한 판의 게임 상태를 관리하는 세션.

상태 전이:
    Active -> Won  (최종 단계 값에 도달)
    Active -> Over (더 이상 움직일 수 없음 / 제한 모드의 한도 도달 / 시간 만료)
Won, Over 상태에서는 move() 가 무시되지만 undo() 로 이전 상태를 되살릴 수 있습니다.
"""
import datetime
import logging
from collections import deque
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

import config
from merge_ai.greedy_ai import GreedyAI
from merge_game.board_transform import Direction, transform
from merge_game.records import record_from_state
from merge_game.spawn import SpawnPolicy, SystemRandomSource, daily_random_source, resolve_distribution
from merge_game.terminal import highest_level, no_legal_move
from merge_game.tiers import final_level as default_final_level

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionState:
    """호출자에게 넘겨주는 읽기 전용 상태 스냅샷."""

    board: Tuple[Tuple[int, ...], ...]
    score: int
    moves: int
    highest_level: int
    remaining_undo: int
    remaining_hint: int
    is_over: bool
    is_won: bool
    hint_direction: Optional[Direction] = None
    last_direction: Optional[Direction] = None
    # 이번 움직임으로 처음 도달한 최고 단계 (없으면 None)
    unlocked_level: Optional[int] = None
    mode: str = config.DEFAULT_MODE
    difficulty: str = config.DEFAULT_DIFFICULTY


@dataclass(frozen=True)
class _Snapshot:
    board: np.ndarray
    score: int
    moves: int
    highest_level: int
    is_over: bool
    is_won: bool


def _validate_mode(mode):
    if mode not in config.MODES:
        raise ValueError(f"Unknown mode: {mode!r}")
    return config.MODES[mode]


def _validate_board_size(size):
    if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
        raise ValueError(f"Board size must be an integer, got {size!r}")
    if size < config.MIN_BOARD_SIZE:
        raise ValueError(f"Board size must be >= {config.MIN_BOARD_SIZE}, got {size}")
    return int(size)


def _validate_final_level(level):
    if isinstance(level, bool) or not isinstance(level, (int, np.integer)):
        raise ValueError(f"Final level must be an integer, got {level!r}")
    if level < 4 or level & (level - 1):
        raise ValueError(f"Final level must be a power of two >= 4, got {level}")
    return int(level)


class GameSession:
    def __init__(self, board_size=None, difficulty=config.DEFAULT_DIFFICULTY, mode=config.DEFAULT_MODE,
                 final_level=None, random_source=None, today=None, advisor=None,
                 max_undo=config.MAX_UNDO, max_hint=config.MAX_HINT):
        mode_cfg = _validate_mode(mode)
        self.mode = mode
        self.difficulty = difficulty
        # 호출자가 직접 지정한 크기 (None 이면 모드 기본값)
        self._board_size = board_size
        self.size = _validate_board_size(mode_cfg["board_size"] if board_size is None else board_size)
        self.final_level = _validate_final_level(default_final_level() if final_level is None else final_level)
        self.move_limit = mode_cfg["move_limit"]
        self.time_limit = mode_cfg["time_limit"]
        self.is_daily = mode_cfg["daily"]
        self.max_undo = max_undo
        self.max_hint = max_hint
        self.advisor = advisor or GreedyAI()

        # 난이도는 생성 시점에 검증 (잘못된 값이면 즉시 ValueError)
        resolve_distribution(difficulty)
        self._injected_random = random_source
        self._today = today
        self.reset()

    # --- 내부 헬퍼 ---
    def _new_random_source(self):
        if self._injected_random is not None:
            return self._injected_random
        if self.is_daily:
            # 데일리 모드는 리셋할 때마다 같은 시드로 다시 시작합니다.
            return daily_random_source(self.day)
        return SystemRandomSource()

    def _snapshot(self):
        return _Snapshot(
            board=np.copy(self.board),
            score=self.score,
            moves=self.moves,
            highest_level=self.highest_level,
            is_over=self.is_over,
            is_won=self.is_won,
        )

    def _move_limit_reached(self):
        return self.move_limit is not None and self.moves >= self.move_limit

    @property
    def is_terminal(self):
        return self.is_over or self.is_won

    # --- 공개 API ---
    def reset(self):
        """게임을 초기 상태로 리셋합니다."""
        self.day = self._today or datetime.date.today()
        self.random_source = self._new_random_source()
        self.spawn_policy = SpawnPolicy(self.difficulty, self.random_source)

        self.board = np.zeros((self.size, self.size), dtype=int)
        self.spawn_policy.add_new_tile(self.board, count=2)
        self.score = 0
        self.moves = 0
        self.highest_level = highest_level(self.board)
        self.is_over = False
        self.is_won = False
        self.remaining_undo = self.max_undo
        self.remaining_hint = self.max_hint
        self.hint_direction = None
        self.last_direction = None
        self.unlocked_level = None
        self._history = deque(maxlen=self.max_undo)

        logger.info("New session: mode=%s difficulty=%s size=%d", self.mode, self.difficulty, self.size)
        return self.get_state()

    def move(self, direction):
        """
        주어진 방향으로 보드를 움직이고, 변화가 있었다면 새 타일을 추가합니다.
        변화가 없거나 게임이 끝난 상태면 아무 것도 하지 않습니다.
        """
        direction = Direction.parse(direction)
        if self.is_terminal:
            return self.get_state()

        new_board, gained, moved = transform(self.board, direction)
        if not moved:
            logger.debug("Blocked move %s ignored", direction.value)
            return self.get_state()

        self._history.append(self._snapshot())

        self.board = new_board
        self.spawn_policy.add_new_tile(self.board)
        self.moves += 1
        self.score += gained
        previous_level = self.highest_level
        self.highest_level = max(self.highest_level, highest_level(self.board))
        self.unlocked_level = self.highest_level if self.highest_level > previous_level else None

        was_won = self.is_won
        self.is_won = self.is_won or self.highest_level >= self.final_level
        self.is_over = not self.is_won and (no_legal_move(self.board) or self._move_limit_reached())
        self.hint_direction = None
        self.last_direction = direction

        logger.debug("Move %d %s: +%d (score=%d)", self.moves, direction.value, gained, self.score)
        if self.is_won and not was_won:
            logger.info("Final level %d reached after %d moves", self.final_level, self.moves)
        elif self.is_over:
            logger.info("Game over: score=%d moves=%d", self.score, self.moves)
        return self.get_state()

    def undo(self):
        """직전 움직임 이전 상태로 되돌립니다. 되돌리기 횟수를 하나 소모합니다."""
        if not self._history or self.remaining_undo <= 0:
            return self.get_state()

        snapshot = self._history.pop()
        self.board = np.copy(snapshot.board)
        self.score = snapshot.score
        self.moves = snapshot.moves
        self.highest_level = snapshot.highest_level
        self.is_over = snapshot.is_over
        self.is_won = snapshot.is_won
        self.remaining_undo -= 1
        self.hint_direction = None
        self.last_direction = None
        self.unlocked_level = None
        return self.get_state()

    def hint(self):
        """추천 방향을 계산합니다. 보드/점수/이동 수는 바꾸지 않습니다.

        힌트가 없거나(남은 횟수 0, 게임 오버, 움직일 수 있는 방향 없음) None 을 반환합니다.
        마지막 경우에는 힌트 횟수를 소모하지 않습니다.
        승리 후(오버 아님)에도 힌트는 횟수를 소모하지만, move() 는 그 방향을 무시합니다.
        """
        if self.remaining_hint <= 0 or self.is_over:
            return None

        direction, _ = self.advisor.get_move(self.board)
        if direction is None:
            return None

        self.remaining_hint -= 1
        self.hint_direction = direction
        return direction

    def expire(self):
        """시간 제한 등 외부 사유로 게임을 종료 상태로 만듭니다."""
        if not self.is_terminal:
            self.is_over = True
            logger.info("Session expired: score=%d moves=%d", self.score, self.moves)
        return self.get_state()

    def get_state(self):
        return SessionState(
            board=tuple(tuple(int(v) for v in row) for row in self.board),
            score=int(self.score),
            moves=self.moves,
            highest_level=int(self.highest_level),
            remaining_undo=self.remaining_undo,
            remaining_hint=self.remaining_hint,
            is_over=self.is_over,
            is_won=self.is_won,
            hint_direction=self.hint_direction,
            last_direction=self.last_direction,
            unlocked_level=None if self.unlocked_level is None else int(self.unlocked_level),
            mode=self.mode,
            difficulty=self.difficulty,
        )

    def restart_with(self, mode=None, difficulty=None):
        """모드/난이도를 바꾼 새 세션. 최종 단계 값은 유지합니다.

        난이도만 바꾸면 보드 크기를 그대로 두고, 모드를 바꾸면 새 모드의 기본 크기를 씁니다.
        """
        return GameSession(
            board_size=self._board_size if mode is None else None,
            difficulty=self.difficulty if difficulty is None else difficulty,
            mode=self.mode if mode is None else mode,
            final_level=self.final_level,
            random_source=self._injected_random,
            today=self._today,
            advisor=self.advisor,
            max_undo=self.max_undo,
            max_hint=self.max_hint,
        )

    def record(self, timestamp=None):
        """랭킹에 쓸 GameRecord 를 만듭니다."""
        return record_from_state(self.get_state(), day=self.day, timestamp=timestamp)
