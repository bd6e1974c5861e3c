"""UI 계층이 사용하는 함수형 엔진 인터페이스.

세션 핸들은 GameSession 인스턴스 자체입니다. 모든 함수는 동기적으로 끝까지 실행됩니다.
"""
import config
from merge_game.board_transform import Direction
from merge_game.session import GameSession, SessionState


def create_session(board_size=None, difficulty=config.DEFAULT_DIFFICULTY, mode=config.DEFAULT_MODE,
                   final_level=None, *, today=None, random_source=None) -> GameSession:
    return GameSession(board_size=board_size, difficulty=difficulty, mode=mode,
                       final_level=final_level, random_source=random_source, today=today)


def move(handle: GameSession, direction) -> SessionState:
    return handle.move(direction)


def undo(handle: GameSession) -> SessionState:
    return handle.undo()


def hint(handle: GameSession) -> Direction | None:
    return handle.hint()


def reset(handle: GameSession) -> SessionState:
    return handle.reset()


def get_state(handle: GameSession) -> SessionState:
    return handle.get_state()


def expire(handle: GameSession) -> SessionState:
    return handle.expire()


def change_mode(handle: GameSession, mode=None, difficulty=None) -> GameSession:
    """모드나 난이도를 바꾸면 상태 전체를 새 세션으로 교체합니다."""
    return handle.restart_with(mode=mode, difficulty=difficulty)
