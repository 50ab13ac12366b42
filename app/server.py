"""
Expert Level Engine - FastAPI 웹 서버

전문가 랭킹 점수 / 레벨 / 티어 / 랭킹 API
데이터 소스: JSON 파일 또는 Supabase experts 테이블
"""
from fastapi import FastAPI
from loguru import logger

from ranking import StatsUnavailableError

from .config import get_settings
from .dependencies import get_engine, get_stats_source
from .expert_levels import router as expert_levels_router
from .expert_rankings import router as expert_rankings_router
from .models import StatusResponse

# FastAPI 앱
app = FastAPI(
    title="Expert Level Engine",
    description="상담 전문가 랭킹 점수, 레벨, 티어 및 랭킹 계산 API",
    version="1.0.0"
)

app.include_router(expert_levels_router)
app.include_router(expert_rankings_router)


# ==================== API Endpoints ====================

@app.on_event("startup")
async def startup_event():
    """서버 시작 시 통계 소스 확인"""
    settings = get_settings()
    try:
        count = len(get_stats_source().fetch_all())
        logger.info(f"✅ 서버 시작 완료 - {settings.stats_source} 통계 소스, 전문가 {count}명")
    except (StatsUnavailableError, ValueError) as e:
        logger.warning(f"통계 소스를 사용할 수 없음 - 랭킹은 빈 목록으로 응답: {e}")


@app.on_event("shutdown")
async def shutdown_event():
    """서버 종료 시 정리"""
    logger.info("서버 종료됨")


@app.get("/api/status", response_model=StatusResponse)
async def api_status():
    """통계 소스 상태 API"""
    settings = get_settings()
    try:
        experts = len(get_stats_source().fetch_all())
        available = True
    except (StatsUnavailableError, ValueError):
        experts = 0
        available = False

    return StatusResponse(
        stats_source=settings.stats_source,
        experts=experts,
        tiers=len(get_engine().tiers),
        source_available=available,
    )


# ==================== 서버 실행 ====================

if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "app.server:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level="info"
    )
