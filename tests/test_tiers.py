"""
티어 테이블 테스트
"""

import pytest
from dataclasses import FrozenInstanceError

from ranking.tiers import (
    DEFAULT_TIER_TABLE,
    LEVEL_TIERS,
    MAX_LEVEL,
    TierDefinition,
    TierTable,
    badge_styles,
    korean_tier_name,
)


class TestTierCatalog:
    """티어 카탈로그 구성"""

    def test_tier_count_and_order(self):
        """11개 티어, 최고 티어부터 정렬"""
        assert len(DEFAULT_TIER_TABLE) == 11
        assert DEFAULT_TIER_TABLE.top.name == "Legend (전설)"
        assert DEFAULT_TIER_TABLE.lowest.name == "Fresh Mind (신예)"

    def test_names_unique(self):
        names = [t.name for t in LEVEL_TIERS]
        assert len(names) == len(set(names))

    def test_level_ranges_partition_1_to_999(self):
        """레벨 1-999는 정확히 하나의 티어에 속함"""
        for level in range(1, MAX_LEVEL + 1):
            owners = [t for t in DEFAULT_TIER_TABLE if t.contains_level(level)]
            assert len(owners) == 1, level

    def test_level_999_reserved_for_top_tier(self):
        assert DEFAULT_TIER_TABLE.top.level_range == (999, 999)
        assert DEFAULT_TIER_TABLE[1].level_range == (900, 998)

    def test_score_bands(self):
        """최고 950-999, 50점 단위 하강, 최하 0-499.99"""
        assert DEFAULT_TIER_TABLE.top.score_range == (950, 999)
        assert DEFAULT_TIER_TABLE[-2].score_range == (500, 549.99)
        assert DEFAULT_TIER_TABLE.lowest.score_range == (0, 499.99)

    def test_price_non_decreasing_with_rank(self):
        """상위 티어일수록 요금이 낮아지지 않음"""
        prices = [t.credits_per_minute for t in reversed(list(DEFAULT_TIER_TABLE))]
        assert prices == sorted(prices)
        assert prices[0] == 100
        assert prices[-1] == 600

    def test_empty_table_rejected(self):
        with pytest.raises(ValueError):
            TierTable([])

    def test_tiers_are_immutable(self):
        with pytest.raises(FrozenInstanceError):
            DEFAULT_TIER_TABLE.top.credits_per_minute = 1


class TestTierLookup:
    """점수/레벨/이름 조회"""

    def test_find_by_score_inside_band(self):
        assert DEFAULT_TIER_TABLE.find_by_score(525).name == "Emerging Talent (신진)"
        assert DEFAULT_TIER_TABLE.find_by_score(0).name == "Fresh Mind (신예)"

    def test_find_by_score_above_cap(self):
        """999점 초과는 항상 최고 티어"""
        assert DEFAULT_TIER_TABLE.find_by_score(1500).name == "Legend (전설)"
        assert DEFAULT_TIER_TABLE.find_by_score(999.01).name == "Legend (전설)"

    def test_find_by_score_gap_falls_back_to_lowest(self):
        """.99 경계 사이 값은 매칭 없음 → 최하위 티어"""
        assert DEFAULT_TIER_TABLE.match_score(549.995) is None
        assert DEFAULT_TIER_TABLE.find_by_score(549.995).name == "Fresh Mind (신예)"

    def test_find_by_score_negative(self):
        assert DEFAULT_TIER_TABLE.find_by_score(-5).name == "Fresh Mind (신예)"

    def test_seam_values_belong_to_expected_tier(self):
        """각 티어의 .99 최대값과 다음 정수 최소값"""
        tiers = list(DEFAULT_TIER_TABLE)
        for upper, lower in zip(tiers, tiers[1:]):
            assert DEFAULT_TIER_TABLE.match_score(lower.max_score) is lower
            assert DEFAULT_TIER_TABLE.match_score(upper.min_score) is upper

    def test_find_by_level(self):
        assert DEFAULT_TIER_TABLE.find_by_level(999).name == "Legend (전설)"
        assert DEFAULT_TIER_TABLE.find_by_level(950).name == "Grand Master (그랜드마스터)"
        assert DEFAULT_TIER_TABLE.find_by_level(100).name == "Emerging Talent (신진)"

    def test_find_by_level_out_of_range(self):
        """범위 밖 레벨은 최하위 티어"""
        assert DEFAULT_TIER_TABLE.find_by_level(0).name == "Fresh Mind (신예)"
        assert DEFAULT_TIER_TABLE.find_by_level(1000).name == "Fresh Mind (신예)"

    def test_find_by_name(self):
        assert DEFAULT_TIER_TABLE.find_by_name("Core (핵심)").credits_per_minute == 250
        assert DEFAULT_TIER_TABLE.find_by_name("없는 티어") is DEFAULT_TIER_TABLE.lowest

    def test_index_of(self):
        assert DEFAULT_TIER_TABLE.index_of(DEFAULT_TIER_TABLE.top) == 0
        assert DEFAULT_TIER_TABLE.index_of(DEFAULT_TIER_TABLE.lowest) == 10


class TestTierDisplay:
    """API 직렬화 및 표시 정보"""

    def test_to_dict_shape(self):
        data = DEFAULT_TIER_TABLE.top.to_dict()
        assert data["name"] == "Legend (전설)"
        assert data["levelRange"] == {"min": 999, "max": 999}
        assert data["scoreRange"] == {"min": 950, "max": 999}
        assert data["creditsPerMinute"] == 600
        assert data["bgColor"] == "bg-gradient-to-r from-red-600 to-pink-700"
        assert data["textColor"] == "text-white"

    def test_badge_styles(self):
        styles = badge_styles(DEFAULT_TIER_TABLE.lowest)
        assert styles["gradient"] == "from-orange-600 to-red-700"
        assert styles["borderColor"] == "border-orange-600"

    def test_korean_tier_name(self):
        assert korean_tier_name("Legend (전설)") == "전설 (Lv.999) - 최고 레벨"
        assert korean_tier_name("Unknown") == "Unknown"

    def test_custom_table(self):
        """주입된 테이블은 기본 테이블과 독립"""
        table = TierTable([
            TierDefinition("High", (51, 100), (50, 100), 20),
            TierDefinition("Low", (1, 50), (0, 49.99), 10),
        ])
        assert table.find_by_score(75).name == "High"
        assert table.find_by_level(10).name == "Low"
        assert len(table.to_list()) == 2
