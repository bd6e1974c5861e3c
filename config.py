# --- 게임 보드 설정 ---
BOARD_SIZE = 4
MIN_BOARD_SIZE = 2

# --- 세션 한도 ---
MAX_UNDO = 3  # 되돌리기 횟수이자 히스토리 스택 크기
MAX_HINT = 3

# --- 난이도별 생성 확률 ---
# 새 타일 값 -> 확률. 합은 1이어야 합니다.
DIFFICULTIES = {
    "easy": {2: 0.97, 4: 0.03},
    "normal": {2: 0.90, 4: 0.10},
    "hard": {2: 0.70, 4: 0.20, 8: 0.10},
}
DEFAULT_DIFFICULTY = "normal"

# --- 게임 모드 ---
# move_limit / time_limit 이 None 이면 제한 없음.
# time_limit 은 UI 타이머용 값이며 엔진은 시간을 재지 않습니다.
MODES = {
    "classic": {"board_size": 4, "move_limit": None, "time_limit": None, "daily": False},
    "endless": {"board_size": 5, "move_limit": None, "time_limit": None, "daily": False},
    "limited": {"board_size": 4, "move_limit": 50, "time_limit": None, "daily": False},
    "time": {"board_size": 4, "move_limit": None, "time_limit": 60, "daily": False},
    "daily": {"board_size": 4, "move_limit": None, "time_limit": None, "daily": True},
}
DEFAULT_MODE = "classic"

# --- 동물 진화 단계 (값, 이름, 아이콘) ---
TIERS = [
    (2, "Mouse", "🐭"),
    (4, "Cat", "🐱"),
    (8, "Dog", "🐶"),
    (16, "Rabbit", "🐰"),
    (32, "Fox", "🦊"),
    (64, "Bear", "🐻"),
    (128, "Tiger", "🐯"),
    (256, "Panda", "🐼"),
    (512, "Koala", "🐨"),
    (1024, "Lion", "🦁"),
    (2048, "Dragon", "🐲"),
    (4096, "Unicorn", "🦄"),
]

# --- 랭킹 ---
LEADERBOARD_LIMIT = 10

# --- 자동 플레이 설정 ---
AUTOPLAY_GAMES = 3  # AI 별 게임 수
AUTOPLAY_MAX_TURNS = 5000
