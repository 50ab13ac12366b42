"""
API 의존성

엔진 구성 요소는 시작 시 한 번 생성되어 모든 요청에서 공유 (읽기 전용)
"""
from typing import Optional

from ranking import (
    DEFAULT_TIER_TABLE,
    LevelResolver,
    ProgressCalculator,
    RankingAggregator,
)
from database import create_stats_source

from .config import get_settings


class RankingEngine:
    """티어 테이블을 공유하는 엔진 구성 요소 묶음"""

    def __init__(self, tier_table=DEFAULT_TIER_TABLE):
        self.tiers = tier_table
        self.resolver = LevelResolver(tier_table)
        self.progress = ProgressCalculator(tier_table)
        self.aggregator = RankingAggregator(tier_table)


_engine = RankingEngine()
_stats_source = None


def get_engine() -> RankingEngine:
    return _engine


def get_stats_source():
    """설정된 통계 소스 (최초 호출 시 생성)"""
    global _stats_source
    if _stats_source is None:
        _stats_source = create_stats_source(get_settings())
    return _stats_source


def reset_stats_source(source: Optional[object] = None):
    """통계 소스 교체 (None이면 다음 요청 시 설정에서 재생성)"""
    global _stats_source
    _stats_source = source
