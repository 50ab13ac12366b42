"""
Supabase 전문가 통계 소스
"""
from typing import Any, Dict, List, Optional
from supabase import create_client, Client
from loguru import logger

from ranking import ExpertRecord, ExpertStats, StatsUnavailableError


# experts 테이블 조회 컬럼 (users 조인으로 표시 이름)
EXPERT_COLUMNS = (
    "id, specialty, totalSessions, avgRating, reviewCount, "
    "repeatClients, likeCount, users(name)"
)

# 싱글톤 클라이언트
_supabase_client: Optional[Client] = None


def get_supabase_client(url: str, key: str) -> Client:
    """Supabase 클라이언트 인스턴스 반환 (싱글톤)"""
    global _supabase_client
    if _supabase_client is None:
        if not url or not key:
            raise ValueError("SUPABASE_URL과 SUPABASE_KEY 환경변수를 설정해주세요")
        _supabase_client = create_client(url, key)
    return _supabase_client


def row_to_record(row: Dict[str, Any]) -> ExpertRecord:
    """experts 행 → ExpertRecord"""
    user = row.get("users") or {}
    return ExpertRecord(
        expert_id=str(row.get("id")),
        stats=ExpertStats.from_dict(row),
        name=user.get("name") if isinstance(user, dict) else None,
    )


class SupabaseStatsSource:
    """Supabase experts 테이블 기반 통계 소스 (공개 프로필만)"""

    kind = "supabase"

    def __init__(self, client: Client):
        self.client = client

    def fetch_all(self) -> List[ExpertRecord]:
        """공개 전문가 전체 통계 조회"""
        try:
            result = self.client.table("experts").select(EXPERT_COLUMNS).eq(
                "isProfilePublic", True
            ).execute()
        except Exception as e:
            logger.error(f"전문가 통계 조회 오류: {e}")
            raise StatsUnavailableError(str(e)) from e

        return [row_to_record(row) for row in (result.data or [])]

    def get(self, expert_id: str) -> Optional[ExpertRecord]:
        """단일 전문가 통계 조회"""
        try:
            result = self.client.table("experts").select(EXPERT_COLUMNS).eq(
                "id", expert_id
            ).execute()
        except Exception as e:
            logger.error(f"전문가 통계 조회 오류 ({expert_id}): {e}")
            raise StatsUnavailableError(str(e)) from e

        if result.data:
            return row_to_record(result.data[0])
        return None

    def get_name(self, expert_id: str) -> Optional[str]:
        record = self.get(expert_id)
        return record.name if record else None
