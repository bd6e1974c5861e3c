"""보드 이동/합치기 순수 함수.

모든 방향의 이동은 보드를 회전시켜 "왼쪽으로 밀기" 하나로 처리합니다.
회전 규칙은 ``ROTATIONS`` 한 곳에서만 정의합니다.
"""
from enum import Enum

import numpy as np


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def parse(cls, value):
        """문자열이나 Direction 을 Direction 으로 변환합니다. 잘못된 값이면 ValueError."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(f"Invalid direction: {value!r}") from None


# 방향 -> np.rot90 반시계 회전 횟수.
# 회전 후 해당 방향이 "왼쪽"이 됩니다. (위쪽 행이 왼쪽 열로 가므로 up=1)
ROTATIONS = {
    Direction.LEFT: 0,
    Direction.UP: 1,
    Direction.RIGHT: 2,
    Direction.DOWN: 3,
}

# 힌트 동점 처리 순서
DIRECTION_PRIORITY = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


def merge_line(line):
    """한 줄을 왼쪽으로 밀고 합칩니다.

    같은 값 한 쌍만 합쳐지며 연쇄 합치기는 없습니다. ([2,2,2,0] -> [4,2,0,0])

    Returns:
        list: 원래 길이로 0을 채운 새 줄.
        int: 합치기로 얻은 점수.
    """
    tokens = [int(v) for v in line if v != 0]
    merged = []
    gained = 0
    j = 0
    while j < len(tokens):
        if j + 1 < len(tokens) and tokens[j] == tokens[j + 1]:
            new_value = tokens[j] * 2
            merged.append(new_value)
            gained += new_value
            j += 2
        else:
            merged.append(tokens[j])
            j += 1
    merged.extend([0] * (len(line) - len(merged)))
    return merged, gained


def _move_left(board):
    """왼쪽으로 타일을 밀고 합치는 로직"""
    new_board = np.zeros_like(board)
    score = 0
    for i in range(board.shape[0]):
        new_row, gained = merge_line(board[i])
        new_board[i] = new_row
        score += gained
    return new_board, score


def transform(board, direction):
    """주어진 방향으로 보드를 이동시킨 결과를 계산합니다. 입력 보드는 수정하지 않습니다.

    Args:
        board: N x N 정수 배열 (0 은 빈칸).
        direction: Direction 또는 "up" / "down" / "left" / "right".

    Returns:
        np.ndarray: 이동 후 보드.
        int: 얻은 점수.
        bool: 한 칸이라도 바뀌었는지 여부.
    """
    direction = Direction.parse(direction)
    original = np.asarray(board, dtype=int)
    if original.ndim != 2 or original.shape[0] != original.shape[1]:
        raise ValueError(f"Board must be square, got shape {original.shape}")

    k = ROTATIONS[direction]
    rotated = np.rot90(original, k=k)
    moved_board, gained = _move_left(rotated)
    new_board = np.ascontiguousarray(np.rot90(moved_board, k=(4 - k) % 4))

    moved = not np.array_equal(original, new_board)
    return new_board, gained, moved
