"""
전문가 통계 소스

랭킹 엔진에 입력되는 통계를 가져오는 I/O 계층
- json: 로컬 JSON 파일 (기본값, 개발/테스트)
- supabase: experts 테이블
"""
from .json_source import JsonStatsSource
from .supabase_client import SupabaseStatsSource, get_supabase_client


def create_stats_source(settings):
    """설정에 따라 통계 소스 생성"""
    if settings.stats_source == "supabase":
        client = get_supabase_client(settings.supabase_url, settings.supabase_key)
        return SupabaseStatsSource(client)
    return JsonStatsSource(settings.stats_file)


__all__ = [
    "JsonStatsSource",
    "SupabaseStatsSource",
    "get_supabase_client",
    "create_stats_source",
]
