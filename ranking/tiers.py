"""
전문가 레벨 티어 정의

점수 구간(3자리 점수 체계) → 레벨 구간(1-999) → 분당 크레딧 요금
- 티어 테이블은 프로세스 시작 시 한 번 생성되는 불변 목록
- 모든 조회는 높은 티어부터 순서대로 스캔 (첫 번째 매칭 우선)
"""
from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Sequence, Tuple


# 최고 레벨 / 최고 점수 (점수는 999 이후에도 계속 쌓임)
MAX_LEVEL = 999
MAX_SCORE = 999


@dataclass(frozen=True)
class TierDefinition:
    """티어 정의"""
    name: str
    level_range: Tuple[int, int]
    score_range: Tuple[float, float]
    credits_per_minute: int
    color: str = ""
    bg_color: str = ""
    text_color: str = ""
    border_color: str = ""

    @property
    def min_level(self) -> int:
        return self.level_range[0]

    @property
    def max_level(self) -> int:
        return self.level_range[1]

    @property
    def min_score(self) -> float:
        return self.score_range[0]

    @property
    def max_score(self) -> float:
        return self.score_range[1]

    def contains_level(self, level: int) -> bool:
        return self.min_level <= level <= self.max_level

    def contains_score(self, score: float) -> bool:
        return self.min_score <= score <= self.max_score

    def to_dict(self) -> Dict:
        """API 응답용 딕셔너리"""
        return {
            "name": self.name,
            "levelRange": {"min": self.min_level, "max": self.max_level},
            "scoreRange": {"min": self.min_score, "max": self.max_score},
            "creditsPerMinute": self.credits_per_minute,
            "color": self.color,
            "bgColor": self.bg_color,
            "textColor": self.text_color,
            "borderColor": self.border_color,
        }


def _tier(name, levels, scores, credits, gradient, border) -> TierDefinition:
    return TierDefinition(
        name=name,
        level_range=levels,
        score_range=scores,
        credits_per_minute=credits,
        color=gradient,
        bg_color=f"bg-gradient-to-r {gradient}",
        text_color="text-white",
        border_color=border,
    )


# 점수 기반 레벨 체계 (높은 티어 → 낮은 티어)
# 요금: 100크레딧/분 = 1,000원/분
LEVEL_TIERS: Tuple[TierDefinition, ...] = (
    _tier("Legend (전설)", (999, 999), (950, 999), 600,
          "from-red-600 to-pink-700", "border-red-600"),
    _tier("Grand Master (그랜드마스터)", (900, 998), (900, 949.99), 500,
          "from-purple-600 to-indigo-700", "border-purple-600"),
    _tier("Master (마스터)", (800, 899), (850, 899.99), 500,
          "from-indigo-600 to-blue-700", "border-indigo-600"),
    _tier("Expert (전문가)", (700, 799), (800, 849.99), 450,
          "from-blue-600 to-cyan-700", "border-blue-600"),
    _tier("Senior (시니어)", (600, 699), (750, 799.99), 400,
          "from-cyan-600 to-teal-700", "border-cyan-600"),
    _tier("Professional (프로페셔널)", (500, 599), (700, 749.99), 350,
          "from-teal-600 to-green-700", "border-teal-600"),
    _tier("Skilled (숙련)", (400, 499), (650, 699.99), 300,
          "from-green-600 to-emerald-700", "border-green-600"),
    _tier("Core (핵심)", (300, 399), (600, 649.99), 250,
          "from-emerald-600 to-lime-700", "border-emerald-600"),
    _tier("Rising Star (신성)", (200, 299), (550, 599.99), 200,
          "from-lime-600 to-yellow-700", "border-lime-600"),
    _tier("Emerging Talent (신진)", (100, 199), (500, 549.99), 150,
          "from-yellow-600 to-orange-700", "border-yellow-600"),
    _tier("Fresh Mind (신예)", (1, 99), (0, 499.99), 100,
          "from-orange-600 to-red-700", "border-orange-600"),
)

# 한국어 표시명 (UI용)
KOREAN_TIER_NAMES = {
    "Legend (전설)": "전설 (Lv.999) - 최고 레벨",
    "Grand Master (그랜드마스터)": "그랜드마스터 (Lv.900-998)",
    "Master (마스터)": "마스터 (Lv.800-899)",
    "Expert (전문가)": "전문가 (Lv.700-799)",
    "Senior (시니어)": "시니어 (Lv.600-699)",
    "Professional (프로페셔널)": "프로페셔널 (Lv.500-599)",
    "Skilled (숙련)": "숙련 (Lv.400-499)",
    "Core (핵심)": "핵심 (Lv.300-399)",
    "Rising Star (신성)": "신성 (Lv.200-299)",
    "Emerging Talent (신진)": "신진 (Lv.100-199)",
    "Fresh Mind (신예)": "신예 (Lv.1-99)",
}


class TierTable:
    """티어 카탈로그

    높은 티어부터 정렬된 불변 목록. 모든 조회 함수는 매칭 실패 시
    최하위 티어를 반환하며 예외를 던지지 않는다.
    """

    def __init__(self, tiers: Sequence[TierDefinition]):
        if not tiers:
            raise ValueError("티어 목록이 비어 있습니다")
        self._tiers: Tuple[TierDefinition, ...] = tuple(tiers)

    def __iter__(self) -> Iterator[TierDefinition]:
        return iter(self._tiers)

    def __len__(self) -> int:
        return len(self._tiers)

    def __getitem__(self, index: int) -> TierDefinition:
        return self._tiers[index]

    @property
    def top(self) -> TierDefinition:
        return self._tiers[0]

    @property
    def lowest(self) -> TierDefinition:
        return self._tiers[-1]

    def index_of(self, tier: TierDefinition) -> int:
        for i, t in enumerate(self._tiers):
            if t.name == tier.name:
                return i
        return len(self._tiers) - 1

    def match_score(self, score: float) -> Optional[TierDefinition]:
        """점수 구간에 정확히 포함되는 첫 번째 티어 (없으면 None)"""
        for tier in self._tiers:
            if tier.contains_score(score):
                return tier
        return None

    def find_by_score(self, score: float) -> TierDefinition:
        """점수로 티어 조회

        999점 초과는 항상 최고 티어 (점수는 계속 쌓이고 레벨만 고정)
        """
        if score > MAX_SCORE:
            return self.top
        return self.match_score(score) or self.lowest

    def find_by_level(self, level: int) -> TierDefinition:
        """레벨로 티어 조회"""
        for tier in self._tiers:
            if tier.contains_level(level):
                return tier
        return self.lowest

    def find_by_name(self, name: str) -> TierDefinition:
        """티어명으로 조회"""
        for tier in self._tiers:
            if tier.name == name:
                return tier
        return self.lowest

    def to_list(self) -> list:
        return [t.to_dict() for t in self._tiers]


DEFAULT_TIER_TABLE = TierTable(LEVEL_TIERS)


def badge_styles(tier: TierDefinition) -> Dict[str, str]:
    """티어 배지 스타일 토큰"""
    return {
        "gradient": tier.color,
        "background": tier.bg_color,
        "textColor": tier.text_color,
        "borderColor": tier.border_color,
    }


def korean_tier_name(tier_name: str) -> str:
    """티어명 → 한국어 표시명 (모르는 이름은 그대로)"""
    return KOREAN_TIER_NAMES.get(tier_name, tier_name)
