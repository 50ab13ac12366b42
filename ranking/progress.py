"""
다음 티어까지 진행률 계산
"""
import math
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .tiers import DEFAULT_TIER_TABLE, MAX_LEVEL, MAX_SCORE, TierDefinition, TierTable


def _percent(numerator: float, denominator: float) -> int:
    """0-100 클램프 후 정수 반올림 (0.5는 올림)"""
    if denominator == 0:
        return 100
    value = max(0.0, min(100.0, numerator / denominator * 100))
    return int(math.floor(value + 0.5))


@dataclass
class LevelProgress:
    """레벨 기준 진행률"""
    is_max_tier: bool
    progress: int
    next_tier: Optional[TierDefinition] = None
    levels_needed: int = 0
    current_tier_max_level: Optional[int] = None
    next_tier_min_level: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "isMaxTier": self.is_max_tier,
            "progress": self.progress,
            "nextTier": self.next_tier.to_dict() if self.next_tier else None,
            "levelsNeeded": self.levels_needed,
        }
        if not self.is_max_tier:
            data["currentTierMaxLevel"] = self.current_tier_max_level
            data["nextTierMinLevel"] = self.next_tier_min_level
        return data


@dataclass
class ScoreProgress:
    """점수 기준 진행률 (999점 초과분은 additional_score로 별도 표시)"""
    is_max_tier: bool
    progress: int
    next_tier: Optional[TierDefinition] = None
    score_needed: float = 0.0
    current_tier_max_score: Optional[float] = None
    next_tier_min_score: Optional[float] = None
    additional_score: Optional[float] = None
    total_score: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "isMaxTier": self.is_max_tier,
            "progress": self.progress,
            "nextTier": self.next_tier.to_dict() if self.next_tier else None,
            "scoreNeeded": self.score_needed,
        }
        if self.current_tier_max_score is not None:
            data["currentTierMaxScore"] = self.current_tier_max_score
            data["nextTierMinScore"] = self.next_tier_min_score
        if self.additional_score is not None:
            data["additionalScore"] = self.additional_score
            data["totalScore"] = self.total_score
        return data


class ProgressCalculator:
    """티어 진행률 계산기

    "다음 티어"는 테이블 순서상 한 칸 위(더 높은 레벨 구간)의 티어
    """

    def __init__(self, tier_table: TierTable = DEFAULT_TIER_TABLE):
        self.tiers = tier_table

    def progress_to_next_tier(self, level: int) -> LevelProgress:
        current = self.tiers.find_by_level(level)
        index = self.tiers.index_of(current)

        if index == 0:
            return LevelProgress(is_max_tier=True, progress=100)

        next_tier = self.tiers[index - 1]
        progress = _percent(level - current.min_level, current.max_level - current.min_level)

        return LevelProgress(
            is_max_tier=False,
            progress=progress,
            next_tier=next_tier,
            levels_needed=max(0, next_tier.min_level - level),
            current_tier_max_level=current.max_level,
            next_tier_min_level=next_tier.min_level,
        )

    def progress_to_next_tier_by_score(self, score: float) -> ScoreProgress:
        current = self.tiers.find_by_score(score)
        index = self.tiers.index_of(current)

        if index == 0:
            if score > MAX_SCORE:
                return ScoreProgress(
                    is_max_tier=True,
                    progress=100,
                    current_tier_max_score=MAX_SCORE,
                    next_tier_min_score=MAX_SCORE,
                    additional_score=round(score - MAX_SCORE, 2),
                    total_score=score,
                )
            return ScoreProgress(is_max_tier=True, progress=100)

        next_tier = self.tiers[index - 1]
        progress = _percent(score - current.min_score, current.max_score - current.min_score)

        return ScoreProgress(
            is_max_tier=False,
            progress=progress,
            next_tier=next_tier,
            score_needed=round(max(0.0, next_tier.min_score - score), 2),
            current_tier_max_score=current.max_score,
            next_tier_min_score=next_tier.min_score,
        )

    def additional_score_info(self, score: float) -> Dict[str, Any]:
        """999점 이후 누적 점수 정보"""
        if score > MAX_SCORE:
            return {
                "currentScore": score,
                "maxLevel": MAX_LEVEL,
                "additionalScore": round(score - MAX_SCORE, 2),
                "totalScore": score,
                "message": "999점 이후에도 점수는 계속 쌓일 수 있습니다. 레벨은 999로 고정됩니다.",
                "tierInfo": self.tiers.find_by_level(MAX_LEVEL).to_dict(),
            }
        return {
            "currentScore": score,
            "maxLevel": MAX_LEVEL,
            "additionalScore": 0,
            "totalScore": score,
            "message": "아직 최고 레벨에 도달하지 않았습니다.",
            "tierInfo": self.tiers.find_by_score(score).to_dict(),
        }
