"""
전문가 레벨/랭킹 엔진

통계 → 랭킹 점수 → 레벨(1-999)/티어 → 진행률, 그리고 랭킹 집계
모든 연산은 입력만으로 결정되는 순수 함수 (I/O 없음)
"""
from .tiers import (
    TierDefinition,
    TierTable,
    LEVEL_TIERS,
    DEFAULT_TIER_TABLE,
    KOREAN_TIER_NAMES,
    MAX_LEVEL,
    MAX_SCORE,
    badge_styles,
    korean_tier_name,
)
from .calculator import ExpertStats, calculate_ranking_score, round_half_up, score_breakdown
from .numbers import parse_float, parse_int
from .levels import LevelResolver, score_to_level, level_to_price
from .progress import ProgressCalculator, LevelProgress, ScoreProgress
from .aggregator import (
    RankingAggregator,
    RankingEntry,
    RankingMode,
    ExpertRecord,
    StatsUnavailableError,
    find_position,
)

__all__ = [
    "TierDefinition",
    "TierTable",
    "LEVEL_TIERS",
    "DEFAULT_TIER_TABLE",
    "KOREAN_TIER_NAMES",
    "MAX_LEVEL",
    "MAX_SCORE",
    "badge_styles",
    "korean_tier_name",
    "ExpertStats",
    "calculate_ranking_score",
    "score_breakdown",
    "round_half_up",
    "parse_int",
    "parse_float",
    "LevelResolver",
    "score_to_level",
    "level_to_price",
    "ProgressCalculator",
    "LevelProgress",
    "ScoreProgress",
    "RankingAggregator",
    "RankingEntry",
    "RankingMode",
    "ExpertRecord",
    "StatsUnavailableError",
    "find_position",
]
