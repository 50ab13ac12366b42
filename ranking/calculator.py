"""
전문가 랭킹 점수 계산 모듈

3자리 점수 체계 (0-1000점, 세부 항목별 상한 존재)
- 상담 횟수 (40%): 100회까지 400점
- 평점 (30%): 5점 만점 → 300점
- 리뷰 수 (15%): 50개까지 150점
- 재방문 고객 비율 (10%): 100% → 100점
- 좋아요 수 (5%): 100개까지 50점
"""
import math
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .numbers import parse_float, parse_int


# =====================================================
# 상수 정의
# =====================================================

# 항목별 (상한 기준값, 최대 점수)
SESSION_CAP, SESSION_POINTS = 100, 400
RATING_MAX, RATING_POINTS = 5, 300
REVIEW_CAP, REVIEW_POINTS = 50, 150
REPEAT_POINTS = 100
LIKE_CAP, LIKE_POINTS = 100, 50


# =====================================================
# 데이터 클래스
# =====================================================

@dataclass
class ExpertStats:
    """전문가 성과 통계 (호출 측이 요청마다 전달)"""
    total_sessions: int = 0
    avg_rating: float = 0.0
    review_count: int = 0
    repeat_clients: int = 0
    like_count: int = 0
    specialty: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ExpertStats":
        """camelCase 딕셔너리(API/DB 레코드)에서 생성. 누락되거나 해석 불가한 값은 0"""
        return cls(
            total_sessions=parse_int(data.get("totalSessions")) or 0,
            avg_rating=parse_float(data.get("avgRating")) or 0.0,
            review_count=parse_int(data.get("reviewCount")) or 0,
            repeat_clients=parse_int(data.get("repeatClients")) or 0,
            like_count=parse_int(data.get("likeCount")) or 0,
            specialty=data.get("specialty"),
        )

    @property
    def repeat_rate(self) -> float:
        """재방문 비율 (상담 0회면 0)"""
        if self.total_sessions > 0:
            return self.repeat_clients / self.total_sessions
        return 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalSessions": self.total_sessions,
            "avgRating": self.avg_rating,
            "reviewCount": self.review_count,
            "repeatClients": self.repeat_clients,
            "likeCount": self.like_count,
        }


# =====================================================
# 점수 계산
# =====================================================

def round_half_up(value: float, digits: int = 2) -> float:
    """소수점 반올림 (0.5는 항상 올림, round()의 짝수 반올림 대신)"""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def _component_scores(stats: ExpertStats) -> Dict[str, float]:
    return {
        "sessionScore": min(stats.total_sessions / SESSION_CAP, 1.0) * SESSION_POINTS,
        "ratingScore": (stats.avg_rating / RATING_MAX) * RATING_POINTS,
        "reviewScore": min(stats.review_count / REVIEW_CAP, 1.0) * REVIEW_POINTS,
        "repeatScore": stats.repeat_rate * REPEAT_POINTS,
        "likeScore": min(stats.like_count / LIKE_CAP, 1.0) * LIKE_POINTS,
    }


def calculate_ranking_score(stats: ExpertStats) -> float:
    """
    랭킹 점수 계산

    공식: 상담 + 평점 + 리뷰 + 재방문 + 좋아요 (소수점 2자리 반올림)
    """
    total = sum(_component_scores(stats).values())
    return max(0.0, round_half_up(total))


def score_breakdown(stats: ExpertStats) -> Dict[str, Any]:
    """랭킹 점수 항목별 분석"""
    components = {k: round_half_up(v) for k, v in _component_scores(stats).items()}
    total = calculate_ranking_score(stats)

    return {
        **components,
        "totalScore": total,
        "breakdown": {
            "sessions": f"{stats.total_sessions}회 → {components['sessionScore']}점",
            "rating": f"{stats.avg_rating}점 → {components['ratingScore']}점",
            "reviews": f"{stats.review_count}개 → {components['reviewScore']}점",
            "repeat": f"{math.floor(stats.repeat_rate * 100 + 0.5)}% → {components['repeatScore']}점",
            "likes": f"{stats.like_count}개 → {components['likeScore']}점",
        },
    }
