import numpy as np


def get_empty_tiles(board):
    """비어있는 타일의 위치를 (행, 열) 튜플 리스트로 반환합니다."""
    return [(int(r), int(c)) for r, c in zip(*np.where(np.asarray(board) == 0))]


def highest_level(board):
    """보드 위 가장 큰 값. 빈 보드는 0."""
    board = np.asarray(board)
    return int(np.max(board)) if board.size else 0


def has_available_moves(board):
    """빈칸이 있거나 상하좌우로 같은 값이 붙어 있으면 True."""
    board = np.asarray(board)
    if np.any(board == 0):
        return True
    # 가로 / 세로 인접 쌍 비교
    if np.any(board[:, :-1] == board[:, 1:]):
        return True
    if np.any(board[:-1, :] == board[1:, :]):
        return True
    return False


def no_legal_move(board):
    return not has_available_moves(board)
