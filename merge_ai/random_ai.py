from .base_ai import BaseAI
from merge_game.board_transform import DIRECTION_PRIORITY, transform
from merge_game.spawn import SystemRandomSource


class RandomAI(BaseAI):
    """움직일 수 있는 방향 중 하나를 무작위로 고르는 간단한 AI입니다."""
    def __init__(self, random_source=None):
        self.random_source = random_source or SystemRandomSource()

    def get_move(self, board):
        possible_moves = [d for d in DIRECTION_PRIORITY if transform(board, d)[2]]
        if not possible_moves:
            return None, {}
        move = possible_moves[self.random_source.index(len(possible_moves))]
        return move, {d: 1.0 / len(possible_moves) for d in possible_moves}
