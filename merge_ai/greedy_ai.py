from .base_ai import BaseAI
from merge_game.board_transform import DIRECTION_PRIORITY, transform
import numpy as np


class GreedyAI(BaseAI):
    """
    바로 얻는 점수가 가장 큰 방향을 고르는 AI 입니다. 힌트 기능이 사용합니다.
    새 타일 생성은 시뮬레이션하지 않습니다.
    점수가 같으면 DIRECTION_PRIORITY (상, 하, 좌, 우) 순서에서 앞선 방향을 고릅니다.
    """
    def __init__(self, priority=DIRECTION_PRIORITY):
        self.priority = tuple(priority)

    def get_move(self, board):
        best_move, best_score = None, -np.inf
        analysis_data = {}

        for move in self.priority:
            _, gained, moved = transform(board, move)
            if not moved:
                analysis_data[move] = -np.inf
                continue

            analysis_data[move] = gained
            # 엄격한 비교: 동점이면 먼저 본 방향이 유지됨
            if gained > best_score:
                best_score = gained
                best_move = move

        return best_move, analysis_data
