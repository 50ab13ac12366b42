"""
전문가 레벨 API

GET  /api/expert-levels?action=...   단일 계산/조회 액션
POST /api/expert-levels {action, data} 일괄 처리 액션

필수 파라미터가 없거나 숫자가 아니면 에러 대신 빈 결과 객체({})를 반환한다.
호출 측은 HTTP 상태가 아니라 응답 필드 존재 여부로 판단해야 한다.
"""
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from loguru import logger
from pydantic import ValidationError

from ranking import (
    ExpertStats,
    MAX_LEVEL,
    MAX_SCORE,
    StatsUnavailableError,
    badge_styles,
    calculate_ranking_score,
    korean_tier_name,
    parse_float,
    parse_int,
    score_breakdown,
)

from .dependencies import RankingEngine, get_engine, get_stats_source
from .models import LevelActionRequest

router = APIRouter(prefix="/api/expert-levels", tags=["Expert Levels"])

SERVER_ERROR = {"error": "서버 오류가 발생했습니다."}


# ==================== 파라미터 파싱 ====================

def _as_float(value: Any) -> float:
    return parse_float(value) or 0.0


@dataclass
class ActionContext:
    """액션 처리에 필요한 입력"""
    params: Mapping[str, str]
    engine: RankingEngine
    stats_source: Callable[[], Any]

    def int_param(self, name: str) -> Optional[int]:
        return parse_int(self.params.get(name))

    def float_param(self, name: str) -> Optional[float]:
        return parse_float(self.params.get(name))


# ==================== GET 액션 ====================

def get_all_levels(ctx: ActionContext) -> Dict:
    return {"levels": ctx.engine.tiers.to_list()}


def calculate_credits_by_level(ctx: ActionContext) -> Dict:
    level = ctx.int_param("level")
    if level is None:
        return {}
    return {"level": level, "creditsPerMinute": ctx.engine.resolver.level_to_price(level)}


def get_tier_info(ctx: ActionContext) -> Dict:
    level = ctx.int_param("level")
    if level is None:
        return {}
    return {"level": level, "tierInfo": ctx.engine.tiers.find_by_level(level).to_dict()}


def get_tier_info_by_name(ctx: ActionContext) -> Dict:
    tier_name = ctx.params.get("tierName")
    if not tier_name:
        return {}
    return {"tierName": tier_name, "tierInfo": ctx.engine.tiers.find_by_name(tier_name).to_dict()}


def get_next_tier_progress(ctx: ActionContext) -> Dict:
    level = ctx.int_param("level")
    if level is None:
        return {}
    return {"level": level, "progress": ctx.engine.progress.progress_to_next_tier(level).to_dict()}


def get_tier_badge_styles(ctx: ActionContext) -> Dict:
    level = ctx.int_param("level")
    if level is None:
        return {}
    return {"level": level, "styles": badge_styles(ctx.engine.tiers.find_by_level(level))}


def get_level_pricing(ctx: ActionContext) -> Dict:
    level = ctx.int_param("level")
    if level is None:
        return {}
    return {"level": level, "pricing": ctx.engine.resolver.level_pricing(level)}


def get_korean_tier_name(ctx: ActionContext) -> Dict:
    tier_name = ctx.params.get("tierName")
    if not tier_name:
        return {}
    return {"tierName": tier_name, "koreanName": korean_tier_name(tier_name)}


def _level_summary(engine: RankingEngine, score: float) -> Dict:
    level, tier = engine.resolver.resolve(score)
    return {
        "currentLevel": level,
        "levelTitle": tier.name,
        "tierInfo": tier.to_dict(),
        "rankingScore": score,
        "levelProgress": engine.progress.progress_to_next_tier(level).to_dict(),
        "scoreProgress": engine.progress.progress_to_next_tier_by_score(score).to_dict(),
        "pricing": engine.resolver.level_pricing(level),
    }


def get_expert_level(ctx: ActionContext) -> Dict:
    """통계 소스에서 전문가 점수를 가져와 레벨 계산

    통계가 없는 전문가는 최저 레벨 placeholder로 응답 (isPlaceholder=True)
    """
    expert_id = ctx.params.get("expertId")
    if not expert_id:
        return {}

    try:
        record = ctx.stats_source().get(expert_id)
    except (StatsUnavailableError, ValueError) as e:
        logger.warning(f"전문가 레벨 조회 실패 ({expert_id}): {e}")
        return {"error": "전문가 레벨 정보를 가져올 수 없습니다."}

    if record is None:
        logger.info(f"통계 없는 전문가 - placeholder 레벨 사용: {expert_id}")
        summary = _level_summary(ctx.engine, 0.0)
        summary.update({"expertId": expert_id, "isPlaceholder": True})
        return summary

    summary = _level_summary(ctx.engine, calculate_ranking_score(record.stats))
    summary.update({"expertId": expert_id, "isPlaceholder": False})
    return summary


def calculate_level_by_score(ctx: ActionContext) -> Dict:
    score = ctx.float_param("rankingScore")
    if score is None:
        return {}
    level, tier = ctx.engine.resolver.resolve(score)
    return {
        "rankingScore": score,
        "calculatedLevel": level,
        "tierInfo": tier.to_dict(),
        "levelProgress": ctx.engine.progress.progress_to_next_tier(level).to_dict(),
        "scoreProgress": ctx.engine.progress.progress_to_next_tier_by_score(score).to_dict(),
    }


def get_score_requirements(ctx: ActionContext) -> Dict:
    return {
        "scoreRequirements": [
            {
                "tier": tier.name,
                "minScore": tier.min_score,
                "maxScore": tier.max_score,
                "levelRange": {"min": tier.min_level, "max": tier.max_level},
                "creditsPerMinute": tier.credits_per_minute,
            }
            for tier in ctx.engine.tiers
        ],
        "maxScoreInfo": {
            "maxLevel": MAX_LEVEL,
            "maxScore": MAX_SCORE,
            "note": "999점 이후에도 점수는 계속 쌓일 수 있습니다. 레벨은 999로 고정됩니다.",
        },
    }


def calculate_ranking_score_action(ctx: ActionContext) -> Dict:
    total_sessions = ctx.int_param("totalSessions")
    avg_rating = ctx.float_param("avgRating")
    if total_sessions is None or avg_rating is None:
        return {}

    stats = ExpertStats(
        total_sessions=total_sessions,
        avg_rating=avg_rating,
        review_count=ctx.int_param("reviewCount") or 0,
        repeat_clients=ctx.int_param("repeatClients") or 0,
        like_count=ctx.int_param("likeCount") or 0,
    )
    score = calculate_ranking_score(stats)
    level, tier = ctx.engine.resolver.resolve(score)

    return {
        "stats": stats.to_dict(),
        "calculatedScore": score,
        "calculatedLevel": level,
        "tierInfo": tier.to_dict(),
        "breakdown": score_breakdown(stats),
    }


def get_additional_score_info(ctx: ActionContext) -> Dict:
    score = ctx.float_param("rankingScore")
    if score is None:
        return {}
    return ctx.engine.progress.additional_score_info(score)


GET_ACTIONS: Dict[str, Callable[[ActionContext], Dict]] = {
    "getAllLevels": get_all_levels,
    "calculateCreditsByLevel": calculate_credits_by_level,
    "getTierInfo": get_tier_info,
    "getTierInfoByName": get_tier_info_by_name,
    "getNextTierProgress": get_next_tier_progress,
    "getTierBadgeStyles": get_tier_badge_styles,
    "getLevelPricing": get_level_pricing,
    "getKoreanTierName": get_korean_tier_name,
    "getExpertLevel": get_expert_level,
    "calculateLevelByScore": calculate_level_by_score,
    "getScoreRequirements": get_score_requirements,
    "calculateRankingScore": calculate_ranking_score_action,
    "getAdditionalScoreInfo": get_additional_score_info,
}


def dispatch_get(ctx: ActionContext) -> Dict:
    """action 파라미터로 처리 함수 선택 (모르는 액션은 액션 목록 반환)"""
    handler = GET_ACTIONS.get(ctx.params.get("action") or "")
    if handler is None:
        return {"message": "사용 가능한 액션들", "actions": list(GET_ACTIONS)}
    return handler(ctx)


# ==================== POST 액션 ====================

def _enrich_expert(engine: RankingEngine, expert: Dict[str, Any]) -> Dict[str, Any]:
    level = engine.aggregator.expert_level(expert)
    tier = engine.tiers.find_by_level(level)
    return {
        **expert,
        "tierInfo": tier.to_dict(),
        "creditsPerMinute": tier.credits_per_minute,
        "badgeStyles": badge_styles(tier),
        "pricing": engine.resolver.level_pricing(level),
    }


def _bulk_update(engine: RankingEngine, expert: Dict[str, Any]) -> Dict[str, Any]:
    score = _as_float(expert.get("rankingScore"))
    level, tier = engine.resolver.resolve(score)
    return {
        "expertId": expert.get("expertId"),
        "rankingScore": expert.get("rankingScore"),
        "level": level,
        "tierInfo": tier.to_dict(),
        "creditsPerMinute": tier.credits_per_minute,
    }


def dispatch_post(request: LevelActionRequest, engine: RankingEngine) -> Dict:
    if request.action not in ("calculateTierStatistics", "batchCalculate", "bulkUpdate"):
        return {"error": "지원하지 않는 액션입니다."}

    experts = request.experts
    if experts is None:
        return {}

    if request.action == "calculateTierStatistics":
        return {"statistics": engine.aggregator.tier_statistics(experts)}

    if request.action == "batchCalculate":
        return {"experts": [_enrich_expert(engine, e) for e in experts]}

    updated = [_bulk_update(engine, e) for e in experts]
    return {
        "updatedExperts": updated,
        "message": f"{len(updated)}명의 전문가 레벨이 업데이트되었습니다.",
    }


# ==================== API Endpoints ====================

@router.get("")
async def api_expert_levels(request: Request, engine: RankingEngine = Depends(get_engine)):
    """레벨/티어 계산 API (action 파라미터 기반)"""
    start = time.perf_counter()
    params = request.query_params
    ctx = ActionContext(params=params, engine=engine, stats_source=get_stats_source)

    try:
        result = dispatch_get(ctx)
    except Exception as e:
        logger.exception(f"레벨 API 오류 (action: {params.get('action')}): {e}")
        return JSONResponse(SERVER_ERROR, status_code=500)

    elapsed = (time.perf_counter() - start) * 1000
    logger.info(f"API 처리 시간: {elapsed:.2f}ms (action: {params.get('action')})")
    return result


@router.post("")
async def api_expert_levels_batch(request: Request, engine: RankingEngine = Depends(get_engine)):
    """레벨 일괄 처리 API"""
    try:
        body = await request.json()
        payload = LevelActionRequest.model_validate(body)
        return dispatch_post(payload, engine)
    except (ValueError, ValidationError) as e:
        logger.warning(f"잘못된 요청 본문: {e}")
        return JSONResponse(SERVER_ERROR, status_code=500)
