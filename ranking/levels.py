"""
점수 → 레벨 변환

티어 내부는 선형 보간, 티어 경계에서는 다음 티어 최소 레벨로 점프한다.
floor(내림)와 구간 클램프는 과금 티어를 결정하므로 그대로 유지할 것.
"""
import math
from typing import Dict, Tuple

from loguru import logger

from .tiers import DEFAULT_TIER_TABLE, MAX_LEVEL, MAX_SCORE, TierDefinition, TierTable


class LevelResolver:
    """랭킹 점수 ↔ 레벨/티어 변환기"""

    def __init__(self, tier_table: TierTable = DEFAULT_TIER_TABLE):
        self.tiers = tier_table

    def score_to_level(self, score: float) -> int:
        """
        랭킹 점수로 레벨 계산

        - 999점 초과: 레벨 999 고정
        - 단일 점 티어(Lv.999): 보간 없이 최소 레벨
        - 그 외: 티어 내 점수 비율로 레벨 보간
        - 매칭 티어 없음(.99 경계 사이 값): max(1, floor(score / 5))
        """
        if score > MAX_SCORE:
            return MAX_LEVEL

        tier = self.tiers.match_score(score)
        if tier is None:
            logger.debug(f"점수 {score}에 해당하는 티어 없음 - 기본 레벨 계산 적용")
            return max(1, math.floor(score / 5))

        score_span = tier.max_score - tier.min_score
        if score_span == 0 or tier.min_level == tier.max_level:
            return tier.min_level

        fraction = (score - tier.min_score) / score_span
        level = tier.min_level + math.floor(fraction * (tier.max_level - tier.min_level + 1))
        return max(tier.min_level, min(tier.max_level, level))

    def resolve(self, score: float) -> Tuple[int, TierDefinition]:
        """점수 → (레벨, 레벨 기준 티어)"""
        level = self.score_to_level(score)
        return level, self.tiers.find_by_level(level)

    def level_to_price(self, level: int) -> int:
        """레벨별 분당 크레딧"""
        return self.tiers.find_by_level(level).credits_per_minute

    def level_pricing(self, level: int) -> Dict:
        tier = self.tiers.find_by_level(level)
        return {
            "creditsPerMinute": tier.credits_per_minute,
            "creditsPerHour": tier.credits_per_minute * 60,
            "tierName": tier.name,
        }


_default_resolver = LevelResolver()


def score_to_level(score: float) -> int:
    return _default_resolver.score_to_level(score)


def level_to_price(level: int) -> int:
    return _default_resolver.level_to_price(level)
