"""
전문가 랭킹/통계 API

GET /api/expert-rankings  랭킹 목록 (overall/rating/sessions/specialty)
GET /api/expert-stats     단일 전문가 통계 + 전체/분야 순위
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from loguru import logger

from ranking import RankingMode, StatsUnavailableError, find_position, parse_int

from .config import get_settings
from .dependencies import RankingEngine, get_engine, get_stats_source
from .models import ExpertStatsData, ExpertStatsResponse, RankingData, RankingResponse

router = APIRouter(prefix="/api", tags=["Expert Rankings"])


def _fetch_records():
    """통계 소스 전체 조회 (소스 생성 실패도 사용 불가로 취급)"""
    try:
        source = get_stats_source()
    except ValueError as e:
        raise StatsUnavailableError(str(e)) from e
    return source.fetch_all()


@router.get("/expert-rankings", response_model=RankingResponse)
async def api_expert_rankings(
    ranking_type: str = Query("overall", alias="rankingType", description="overall/rating/sessions/specialty"),
    specialty: Optional[str] = Query(None, description="분야 (specialty 랭킹에서만 적용)"),
    limit: Optional[str] = Query(None, description="상위 N명"),
    engine: RankingEngine = Depends(get_engine),
):
    """
    전문가 랭킹 조회 API

    - overall: 랭킹 점수 순
    - rating: 평균 평점 순
    - sessions: 총 상담 수 순
    - specialty: 분야 필터 후 랭킹 점수 순

    통계 소스 장애 시 에러 대신 빈 목록을 반환한다.
    """
    try:
        mode = RankingMode(ranking_type)
    except ValueError:
        mode = RankingMode.OVERALL

    top_n = parse_int(limit)
    if top_n is None or top_n < 1:
        top_n = get_settings().ranking_default_limit

    rankings = engine.aggregator.rank_from_source(
        _fetch_records,
        mode=mode,
        specialty=specialty if mode == RankingMode.SPECIALTY else None,
    )
    page = rankings[:top_n]

    return RankingResponse(
        data=RankingData(
            rankings=[entry.to_dict() for entry in page],
            total=len(page),
            ranking_type=mode.value,
            specialty=specialty,
        )
    )


@router.get("/expert-stats", response_model=ExpertStatsResponse)
async def api_expert_stats(
    expert_id: str = Query(..., alias="expertId"),
    engine: RankingEngine = Depends(get_engine),
):
    """전문가 통계 조회 API (전체 순위와 분야 내 순위 포함)"""
    try:
        records = _fetch_records()
    except StatsUnavailableError as e:
        logger.error(f"전문가 통계 조회 실패: {e}")
        raise HTTPException(status_code=503, detail="전문가 통계를 사용할 수 없습니다")

    overall = engine.aggregator.rank(records, mode=RankingMode.OVERALL)
    entry = find_position(overall, expert_id)
    if entry is None:
        raise HTTPException(status_code=404, detail="전문가를 찾을 수 없습니다")

    by_specialty = engine.aggregator.rank(
        records, mode=RankingMode.SPECIALTY, specialty=entry.specialty
    )
    specialty_entry = find_position(by_specialty, expert_id)

    stats = entry.stats
    return ExpertStatsResponse(
        data=ExpertStatsData(
            expert_id=entry.expert_id,
            expert_name=entry.expert_name,
            specialty=entry.specialty,
            total_sessions=stats.total_sessions,
            avg_rating=stats.avg_rating,
            review_count=stats.review_count,
            repeat_clients=stats.repeat_clients,
            like_count=stats.like_count,
            ranking_score=entry.ranking_score,
            level=entry.level,
            tier_info=entry.tier.to_dict(),
            ranking=entry.rank,
            total_experts=len(overall),
            specialty_ranking=specialty_entry.specialty_rank,
            specialty_total_experts=specialty_entry.specialty_total,
        )
    )
