import logging
import sys

import config
from merge_ai.greedy_ai import GreedyAI
from merge_ai.random_ai import RandomAI
from merge_game.records import build_leaderboard
from merge_game.session import GameSession

# --- 로깅 설정 ---
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%H:%M:%S"
)
logger = logging.getLogger("ANIMAL-MERGE")


def play_game(session, ai, max_turns=config.AUTOPLAY_MAX_TURNS):
    """AI 가 게임이 끝날 때까지 (또는 max_turns 까지) 플레이합니다. 마지막 상태를 반환합니다."""
    state = session.get_state()
    for _ in range(max_turns):
        if state.is_over or state.is_won:
            break
        move, _ = ai.get_move(session.board)
        if move is None:
            break
        state = session.move(move)
    return state


def run_autoplay(mode=config.DEFAULT_MODE, difficulty=config.DEFAULT_DIFFICULTY,
                 games=config.AUTOPLAY_GAMES, ais=None):
    """AI 별로 여러 판을 플레이하고 기록 리스트를 반환합니다."""
    ais = ais or {
        "Greedy": GreedyAI(),
        "Random": RandomAI(),
    }
    records = []
    highest_tiles = {name: 0 for name in ais.keys()}

    logger.info("시작: mode=%s difficulty=%s AIs=%s", mode, difficulty, list(ais.keys()))
    for name, ai in ais.items():
        session = GameSession(difficulty=difficulty, mode=mode)
        for game_no in range(1, games + 1):
            if game_no > 1:
                session.reset()
            state = play_game(session, ai)
            highest_tiles[name] = max(highest_tiles[name], state.highest_level)
            records.append(session.record())
            logger.info("[%s] game %d: score=%d moves=%d highest=%d won=%s",
                        name, game_no, state.score, state.moves, state.highest_level, state.is_won)

    logger.info("최고 타일: %s", highest_tiles)
    return records


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    mode = argv[0] if len(argv) > 0 else config.DEFAULT_MODE
    difficulty = argv[1] if len(argv) > 1 else config.DEFAULT_DIFFICULTY

    records = run_autoplay(mode=mode, difficulty=difficulty)
    for entry in build_leaderboard(records, mode):
        print(f"{entry.rank:2d}. {entry.score:6d}  moves={entry.moves:4d}  {entry.highest_tier}  {entry.date_key}")


if __name__ == '__main__':
    main()
