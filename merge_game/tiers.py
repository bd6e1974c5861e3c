from dataclasses import dataclass

import config


@dataclass(frozen=True)
class Tier:
    level: int
    name: str
    icon: str


def load_tiers(table=None):
    """(값, 이름, 아이콘) 목록을 값 오름차순 Tier 리스트로 만듭니다."""
    table = config.TIERS if table is None else table
    tiers = sorted((Tier(int(level), name, icon) for level, name, icon in table), key=lambda t: t.level)
    if not tiers:
        raise ValueError("Tier table is empty")
    for tier in tiers:
        if tier.level < 2 or tier.level & (tier.level - 1):
            raise ValueError(f"Tier level must be a power of two >= 2: {tier.level}")
    return tiers


TIERS = load_tiers()
TIER_MAP = {t.level: t for t in TIERS}


def final_level(tiers=TIERS):
    """최종 진화 단계 값 (승리 조건)."""
    return max(t.level for t in tiers)


def tier_for(level):
    return TIER_MAP.get(int(level))


def tier_name(level):
    """값에 해당하는 동물 이름. 없으면 첫 단계 이름을 돌려줍니다."""
    tier = tier_for(level)
    return tier.name if tier else TIERS[0].name
