"""
서버 설정
"""
from functools import lru_cache
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings

load_dotenv()

PROJECT_ROOT = Path(__file__).parent.parent


class AppSettings(BaseSettings):
    """서버 및 통계 소스 설정"""

    # 통계 소스
    stats_source: Literal["json", "supabase"] = Field(default="json", description="통계 소스 종류")
    stats_file: Path = Field(
        default=PROJECT_ROOT / "data" / "expert_stats.json",
        description="JSON 통계 파일 경로"
    )

    # Supabase
    supabase_url: str = Field(default="", description="Supabase Project URL")
    supabase_key: str = Field(default="", description="Supabase anon key")

    # 서버
    host: str = "0.0.0.0"
    port: int = 3071
    reload: bool = False

    # 로깅
    log_level: str = "INFO"
    log_dir: Path = PROJECT_ROOT / "logs"

    # 랭킹 목록 기본 개수
    ranking_default_limit: int = Field(default=50, ge=1, le=500)

    class Config:
        env_prefix = ""
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


@lru_cache()
def get_settings() -> AppSettings:
    return AppSettings()
