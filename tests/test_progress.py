"""
다음 티어 진행률 테스트
"""

from ranking.progress import ProgressCalculator


calculator = ProgressCalculator()


class TestProgressByLevel:
    """레벨 기준 진행률"""

    def test_max_tier(self):
        """Lv.999는 최고 티어"""
        progress = calculator.progress_to_next_tier(999)
        assert progress.is_max_tier is True
        assert progress.progress == 100
        assert progress.next_tier is None

        data = progress.to_dict()
        assert data["isMaxTier"] is True
        assert data["progress"] == 100
        assert data["levelsNeeded"] == 0

    def test_lowest_tier_start(self):
        progress = calculator.progress_to_next_tier(1)
        assert progress.is_max_tier is False
        assert progress.progress == 0
        assert progress.next_tier.name == "Emerging Talent (신진)"
        assert progress.levels_needed == 99
        assert progress.current_tier_max_level == 99
        assert progress.next_tier_min_level == 100

    def test_mid_tier(self):
        """(50 - 1) / (99 - 1) = 50%"""
        progress = calculator.progress_to_next_tier(50)
        assert progress.progress == 50
        assert progress.levels_needed == 50

    def test_end_of_tier(self):
        progress = calculator.progress_to_next_tier(99)
        assert progress.progress == 100
        assert progress.levels_needed == 1

    def test_grand_master_targets_legend(self):
        """(950 - 900) / (998 - 900) = 51.02% → 51"""
        progress = calculator.progress_to_next_tier(950)
        assert progress.next_tier.name == "Legend (전설)"
        assert progress.progress == 51
        assert progress.levels_needed == 49

    def test_out_of_range_level_clamped(self):
        """범위 밖 레벨은 최하위 티어 기준, 진행률 0-100 클램프"""
        assert calculator.progress_to_next_tier(0).progress == 0
        assert calculator.progress_to_next_tier(0).levels_needed == 100

    def test_to_dict_includes_tier_bounds(self):
        data = calculator.progress_to_next_tier(150).to_dict()
        assert data["currentTierMaxLevel"] == 199
        assert data["nextTierMinLevel"] == 200
        assert data["nextTier"]["name"] == "Rising Star (신성)"


class TestProgressByScore:
    """점수 기준 진행률"""

    def test_zero_score(self):
        progress = calculator.progress_to_next_tier_by_score(0)
        assert progress.progress == 0
        assert progress.score_needed == 500
        assert progress.next_tier.name == "Emerging Talent (신진)"

    def test_mid_band(self):
        """(525 - 500) / 49.99 = 50.01% → 50"""
        progress = calculator.progress_to_next_tier_by_score(525)
        assert progress.progress == 50
        assert progress.score_needed == 25.0
        assert progress.current_tier_max_score == 549.99
        assert progress.next_tier_min_score == 550

    def test_max_tier_without_overflow(self):
        progress = calculator.progress_to_next_tier_by_score(960)
        assert progress.is_max_tier is True
        assert progress.progress == 100
        assert progress.additional_score is None
        assert "additionalScore" not in progress.to_dict()

    def test_overflow_score(self):
        """999점 초과분은 additionalScore로 표시"""
        progress = calculator.progress_to_next_tier_by_score(1200)
        assert progress.is_max_tier is True
        assert progress.additional_score == 201
        assert progress.total_score == 1200

        data = progress.to_dict()
        assert data["additionalScore"] == 201
        assert data["totalScore"] == 1200
        assert data["currentTierMaxScore"] == 999

    def test_gap_score_uses_lowest_tier(self):
        """.99 경계 사이 점수는 최하위 티어로 조회됨"""
        progress = calculator.progress_to_next_tier_by_score(549.995)
        assert progress.next_tier.name == "Emerging Talent (신진)"
        assert progress.progress == 100
        assert progress.score_needed == 0


class TestAdditionalScoreInfo:
    """999점 이후 누적 점수 정보"""

    def test_overflow(self):
        info = calculator.additional_score_info(1200.5)
        assert info["additionalScore"] == 201.5
        assert info["maxLevel"] == 999
        assert info["tierInfo"]["name"] == "Legend (전설)"

    def test_below_cap(self):
        info = calculator.additional_score_info(525)
        assert info["additionalScore"] == 0
        assert info["totalScore"] == 525
        assert info["tierInfo"]["name"] == "Emerging Talent (신진)"
