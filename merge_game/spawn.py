"""새 타일 생성 규칙과 난수 공급원.

난수는 세션 생성 시 주입됩니다. 일반 게임은 OS 엔트로피로,
데일리 모드는 날짜에서 만든 시드로 같은 수열을 재현합니다.
"""
import datetime
import logging

import numpy as np

import config

logger = logging.getLogger(__name__)


class RandomSource:
    """세션이 사용하는 난수 공급원의 기본 클래스입니다."""

    def __init__(self, generator):
        self.generator = generator

    def index(self, n):
        """0 이상 n 미만의 정수를 균등하게 뽑습니다."""
        return int(self.generator.integers(n))

    def choice(self, values, weights):
        """weights 확률에 따라 values 중 하나를 뽑습니다."""
        idx = self.generator.choice(len(values), p=weights)
        return values[int(idx)]


class SystemRandomSource(RandomSource):
    """OS 엔트로피로 초기화되는 일반 게임용 난수."""

    def __init__(self):
        super().__init__(np.random.default_rng())


class SeededRandomSource(RandomSource):
    """고정 시드 난수. 같은 시드면 같은 수열을 냅니다."""

    def __init__(self, seed):
        self.seed = int(seed)
        super().__init__(np.random.default_rng(self.seed))


def daily_seed(day=None):
    """날짜 문자열("Y-M-D")을 31 곱셈 해시로 접어 만든 32비트 시드. 0 은 1 로 바꿉니다."""
    day = day or datetime.date.today()
    key = f"{day.year}-{day.month}-{day.day}"
    h = 0
    for ch in key:
        h = (h * 31 + ord(ch)) & 0xFFFFFFFF
    return h or 1


def daily_random_source(day=None):
    seed = daily_seed(day)
    logger.debug("Daily seed for %s: %d", day, seed)
    return SeededRandomSource(seed)


def _is_power_of_two(value):
    return value > 0 and (value & (value - 1)) == 0


def resolve_distribution(difficulty):
    """난이도 이름(또는 {값: 확률} 딕셔너리)을 검증된 (값 리스트, 확률 리스트)로 바꿉니다."""
    if isinstance(difficulty, str):
        if difficulty not in config.DIFFICULTIES:
            raise ValueError(f"Unknown difficulty: {difficulty!r}")
        table = config.DIFFICULTIES[difficulty]
    else:
        table = dict(difficulty)

    if not table:
        raise ValueError("Spawn distribution is empty")
    values = sorted(table)
    weights = [float(table[v]) for v in values]
    if any(not _is_power_of_two(v) or v < 2 for v in values):
        raise ValueError(f"Spawn values must be powers of two >= 2: {values}")
    if any(w < 0 for w in weights) or not np.isclose(sum(weights), 1.0):
        raise ValueError(f"Spawn probabilities must be non-negative and sum to 1: {weights}")
    return values, weights


class SpawnPolicy:
    """빈칸을 균등하게 고르고, 난이도 분포에 따라 값을 정해 타일을 놓습니다."""

    def __init__(self, difficulty, random_source):
        self.values, self.weights = resolve_distribution(difficulty)
        self.random_source = random_source

    def add_new_tile(self, board, count=1):
        """board 를 직접 수정합니다. 놓은 (행, 열) 위치 리스트를 반환합니다."""
        placed = []
        empty_tiles = [(int(r), int(c)) for r, c in zip(*np.where(board == 0))]
        for _ in range(count):
            if not empty_tiles:
                break
            pos = empty_tiles.pop(self.random_source.index(len(empty_tiles)))
            board[pos] = self.random_source.choice(self.values, self.weights)
            placed.append(pos)
        return placed
