"""
API 요청/응답 모델
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """JSON은 camelCase, 파이썬 필드는 snake_case"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LevelActionRequest(BaseModel):
    """POST /api/expert-levels 요청 본문"""
    action: Optional[str] = None
    data: Optional[Dict[str, Any]] = None

    @property
    def experts(self) -> Optional[List[Dict[str, Any]]]:
        """data.experts (리스트가 아니면 None)"""
        experts = (self.data or {}).get("experts")
        if not isinstance(experts, list):
            return None
        return [e for e in experts if isinstance(e, dict)]


class RankingData(CamelModel):
    """랭킹 목록"""
    rankings: List[Dict[str, Any]] = Field(default_factory=list)
    total: int = 0
    ranking_type: str = "overall"
    specialty: Optional[str] = None


class RankingResponse(CamelModel):
    """GET /api/expert-rankings 응답"""
    success: bool = True
    data: RankingData


class ExpertStatsData(CamelModel):
    """단일 전문가 통계 + 랭킹"""
    expert_id: str
    expert_name: str
    specialty: Optional[str] = None
    total_sessions: int
    avg_rating: float
    review_count: int
    repeat_clients: int
    like_count: int
    ranking_score: float
    level: int
    tier_info: Dict[str, Any]
    ranking: int
    total_experts: int
    specialty_ranking: int
    specialty_total_experts: int


class ExpertStatsResponse(CamelModel):
    """GET /api/expert-stats 응답"""
    success: bool = True
    data: ExpertStatsData


class StatusResponse(CamelModel):
    """GET /api/status 응답"""
    stats_source: str
    experts: int
    tiers: int
    source_available: bool
