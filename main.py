"""
전문가 레벨 엔진 메인

- serve: API 서버 실행
- levels: 티어/레벨 체계 출력
- rank: 통계 소스 기준 랭킹 출력
"""
import sys
from typing import List

from loguru import logger

from app.config import get_settings
from database import create_stats_source
from ranking import (
    DEFAULT_TIER_TABLE,
    RankingAggregator,
    RankingEntry,
    RankingMode,
    korean_tier_name,
)


def setup_logging(level: str, log_dir) -> None:
    """로깅 설정"""
    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=level
    )
    logger.add(
        f"{log_dir}/server_{{time:YYYY-MM-DD}}.log",
        rotation="1 day",
        retention="30 days",
        level="DEBUG"
    )


def print_levels() -> None:
    """티어 체계 출력"""
    print(f"\n{'='*72}")
    print(f"{'티어':<34} {'레벨':>9} {'점수':>15} {'크레딧/분':>9}")
    print(f"{'-'*72}")
    for tier in DEFAULT_TIER_TABLE:
        levels = f"{tier.min_level}-{tier.max_level}"
        scores = f"{tier.min_score}-{tier.max_score}"
        print(f"{korean_tier_name(tier.name):<34} {levels:>9} {scores:>15} {tier.credits_per_minute:>9}")


def print_rankings(rankings: List[RankingEntry], title: str = "", top_n: int = 20) -> None:
    """랭킹 요약 출력"""
    print(f"\n{'='*72}")
    print(f" {title}")
    print(f"{'='*72}")
    print(f"{'순위':>4} {'이름':<12} {'분야':<10} {'점수':>8} {'레벨':>5} {'상담':>5} {'평점':>5}")
    print(f"{'-'*72}")

    for r in rankings[:top_n]:
        specialty = r.specialty or "-"
        print(f"{r.rank:>4} {r.expert_name:<12} {specialty:<10} {r.ranking_score:>8.2f} {r.level:>5} {r.stats.total_sessions:>5} {r.stats.avg_rating:>5.1f}")


def main():
    """메인 함수"""
    import argparse

    parser = argparse.ArgumentParser(description="전문가 레벨/랭킹 엔진")
    parser.add_argument(
        "--mode",
        choices=["serve", "levels", "rank"],
        default="serve",
        help="실행 모드"
    )
    parser.add_argument(
        "--ranking-type",
        choices=[m.value for m in RankingMode],
        default=RankingMode.OVERALL.value,
        help="랭킹 유형 (rank 모드)"
    )
    parser.add_argument("--specialty", type=str, help="분야 (specialty 랭킹)")
    parser.add_argument("--top", type=int, default=20, help="출력할 상위 N명")

    args = parser.parse_args()
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_dir)

    if args.mode == "serve":
        import uvicorn

        uvicorn.run(
            "app.server:app",
            host=settings.host,
            port=settings.port,
            reload=settings.reload,
            log_level=settings.log_level.lower()
        )

    elif args.mode == "levels":
        print_levels()

    elif args.mode == "rank":
        source = create_stats_source(settings)
        aggregator = RankingAggregator(DEFAULT_TIER_TABLE)
        rankings = aggregator.rank_from_source(
            source.fetch_all,
            mode=RankingMode(args.ranking_type),
            specialty=args.specialty,
        )
        if not rankings:
            logger.warning("랭킹 데이터 없음")
            sys.exit(1)

        title = f"{args.ranking_type} 랭킹"
        if args.specialty:
            title = f"{args.specialty} {title}"
        print_rankings(rankings, title=title, top_n=args.top)


if __name__ == "__main__":
    main()
