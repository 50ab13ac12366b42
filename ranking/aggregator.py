"""
전문가 랭킹 집계

통계 묶음 → 랭킹 점수/레벨 계산 → 모드별 정렬 → 순위 부여
- overall: 랭킹 점수 내림차순
- rating: 평균 평점 내림차순
- sessions: 총 상담 수 내림차순
- specialty: 분야 필터 후 랭킹 점수 내림차순 (분야 내 순위 부여)

동점은 입력 순서를 유지한다 (안정 정렬, 2차 정렬 키 없음).
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Optional

from loguru import logger

from .calculator import ExpertStats, calculate_ranking_score
from .levels import LevelResolver
from .numbers import parse_float, parse_int
from .tiers import DEFAULT_TIER_TABLE, TierDefinition, TierTable


class StatsUnavailableError(Exception):
    """통계 데이터 소스에 접근할 수 없음"""


class RankingMode(str, Enum):
    """랭킹 유형"""
    OVERALL = "overall"
    RATING = "rating"
    SESSIONS = "sessions"
    SPECIALTY = "specialty"


PLACEHOLDER_NAME = "전문가 #{expert_id}"


@dataclass
class ExpertRecord:
    """랭킹 입력 단위 (전문가 ID + 통계 + 선택적 프로필 이름)"""
    expert_id: str
    stats: ExpertStats
    name: Optional[str] = None


@dataclass
class RankingEntry:
    """랭킹 항목 (요청마다 재계산, 저장하지 않음)"""
    expert_id: str
    expert_name: str
    stats: ExpertStats
    ranking_score: float
    level: int
    tier: TierDefinition
    rank: int = 0
    specialty_rank: Optional[int] = None
    specialty_total: Optional[int] = None

    @property
    def specialty(self) -> Optional[str]:
        return self.stats.specialty

    def to_dict(self) -> Dict[str, Any]:
        return {
            "expertId": self.expert_id,
            "expertName": self.expert_name,
            "specialty": self.specialty,
            "totalSessions": self.stats.total_sessions,
            "avgRating": self.stats.avg_rating,
            "reviewCount": self.stats.review_count,
            "likeCount": self.stats.like_count,
            "rankingScore": self.ranking_score,
            "level": self.level,
            "tierInfo": self.tier.to_dict(),
            "ranking": self.rank,
            "specialtyRanking": self.specialty_rank,
            "specialtyTotalExperts": self.specialty_total,
        }


_SORT_KEYS: Dict[RankingMode, Callable[[RankingEntry], float]] = {
    RankingMode.OVERALL: lambda e: -e.ranking_score,
    RankingMode.RATING: lambda e: -e.stats.avg_rating,
    RankingMode.SESSIONS: lambda e: -e.stats.total_sessions,
    RankingMode.SPECIALTY: lambda e: -e.ranking_score,
}


class RankingAggregator:
    """전문가 랭킹 집계기"""

    def __init__(self, tier_table: TierTable = DEFAULT_TIER_TABLE):
        self.tiers = tier_table
        self.resolver = LevelResolver(tier_table)

    def _resolve_name(
        self,
        record: ExpertRecord,
        name_lookup: Optional[Callable[[str], Optional[str]]],
    ) -> str:
        if record.name:
            return record.name
        if name_lookup is not None:
            try:
                name = name_lookup(record.expert_id)
                if name:
                    return name
            except Exception as e:
                logger.warning(f"전문가 프로필 조회 실패 ({record.expert_id}): {e}")
        return PLACEHOLDER_NAME.format(expert_id=record.expert_id)

    def build_entry(
        self,
        record: ExpertRecord,
        name_lookup: Optional[Callable[[str], Optional[str]]] = None,
    ) -> RankingEntry:
        """단일 전문가의 점수/레벨/티어 계산"""
        score = calculate_ranking_score(record.stats)
        level, tier = self.resolver.resolve(score)
        return RankingEntry(
            expert_id=record.expert_id,
            expert_name=self._resolve_name(record, name_lookup),
            stats=record.stats,
            ranking_score=score,
            level=level,
            tier=tier,
        )

    def rank(
        self,
        records: Iterable[ExpertRecord],
        mode: RankingMode = RankingMode.OVERALL,
        specialty: Optional[str] = None,
        name_lookup: Optional[Callable[[str], Optional[str]]] = None,
    ) -> List[RankingEntry]:
        """
        랭킹 계산

        Args:
            records: 전문가 통계 목록
            mode: 랭킹 유형 (overall/rating/sessions/specialty)
            specialty: specialty 모드의 분야 (None이면 전체를 하나의 분야로 취급)
            name_lookup: 전문가 ID → 표시 이름 (실패 시 placeholder 이름)

        Returns:
            정렬 및 순위가 부여된 전체 목록 (페이지네이션은 호출 측 책임)
        """
        mode = RankingMode(mode)
        entries = [self.build_entry(r, name_lookup) for r in (records or [])]

        if mode == RankingMode.SPECIALTY and specialty is not None:
            entries = [e for e in entries if e.specialty == specialty]

        entries.sort(key=_SORT_KEYS[mode])

        total = len(entries)
        for i, entry in enumerate(entries, 1):
            entry.rank = i
            if mode == RankingMode.SPECIALTY:
                entry.specialty_rank = i
                entry.specialty_total = total

        return entries

    def rank_from_source(
        self,
        fetch: Callable[[], Iterable[ExpertRecord]],
        mode: RankingMode = RankingMode.OVERALL,
        specialty: Optional[str] = None,
        name_lookup: Optional[Callable[[str], Optional[str]]] = None,
    ) -> List[RankingEntry]:
        """통계 소스에서 가져와 랭킹 계산 (소스 장애 시 빈 목록)"""
        try:
            records = list(fetch())
        except StatsUnavailableError as e:
            logger.warning(f"통계 소스 사용 불가 - 빈 랭킹 반환: {e}")
            return []
        return self.rank(records, mode=mode, specialty=specialty, name_lookup=name_lookup)

    def expert_level(self, expert: Dict[str, Any]) -> int:
        """레벨 필드 우선, 없으면 랭킹 점수로 계산, 둘 다 없으면 1

        값은 관대하게 해석 ("12레벨" → 12, "12.5" → 12), 해석 불가 값은 없는 것으로 취급
        """
        level = parse_int(expert.get("level"))
        if level:
            return level
        score = parse_float(expert.get("rankingScore"))
        if score:
            return self.resolver.score_to_level(score)
        return 1

    def tier_statistics(self, experts: Iterable[Dict[str, Any]]) -> Dict[str, Dict[str, int]]:
        """티어별 전문가 수와 비율(%)"""
        stats = {tier.name: {"count": 0, "percentage": 0} for tier in self.tiers}

        experts = list(experts)
        for expert in experts:
            tier = self.tiers.find_by_level(self.expert_level(expert))
            stats[tier.name]["count"] += 1

        total = len(experts)
        if total > 0:
            for tier_stats in stats.values():
                tier_stats["percentage"] = int(tier_stats["count"] / total * 100 + 0.5)

        return stats


def find_position(entries: List[RankingEntry], expert_id: str) -> Optional[RankingEntry]:
    """랭킹 목록에서 특정 전문가 항목 찾기"""
    for entry in entries:
        if entry.expert_id == expert_id:
            return entry
    return None
