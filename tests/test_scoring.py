"""Unit tests for match scoring and weight tiering."""

import pytest

from conftest import make_profile
from mentormatch.config.models import RankingConfig
from mentormatch.matching.scoring import calculate_match_score, is_good_match, weight_for_score


class TestCalculateMatchScore:
    """Tests for calculate_match_score."""

    def test_both_axes(self, viewer, both_axes_match):
        assert calculate_match_score(viewer, both_axes_match) == 100

    def test_expertise_axis_only(self, viewer, expertise_axis_match):
        assert calculate_match_score(viewer, expertise_axis_match) == 50

    def test_interest_axis_only(self, viewer, interest_axis_match):
        assert calculate_match_score(viewer, interest_axis_match) == 50

    def test_no_overlap(self, viewer, no_match):
        assert calculate_match_score(viewer, no_match) == 0

    def test_reciprocal_profiles(self):
        viewer = make_profile("v@example.com", "Data Science", "ML")
        candidate = make_profile("c@example.com", "ML", "Data Science")
        assert calculate_match_score(viewer, candidate) == 100

    def test_unrelated_profiles(self):
        viewer = make_profile("v@example.com", "Marketing", "Sales")
        candidate = make_profile("c@example.com", "Design", "Ops")
        assert calculate_match_score(viewer, candidate) == 0

    def test_case_insensitive(self, viewer):
        candidate = make_profile("c@example.com", "MACHINE LEARNING", "software development")
        assert calculate_match_score(viewer, candidate) == 100

    def test_containment_either_direction(self, viewer):
        """Longer candidate text contains the viewer's, and vice versa."""
        candidate = make_profile("c@example.com", "Advanced Machine Learning", "Software")
        assert calculate_match_score(viewer, candidate) == 100

    def test_no_token_level_credit(self, viewer):
        """Sharing a word is not enough; one string must contain the other."""
        candidate = make_profile("c@example.com", "Machine Vision", "Web Development")
        assert calculate_match_score(viewer, candidate) == 0

    def test_empty_field_matches_anything(self, viewer):
        candidate = make_profile("c@example.com", "", "Sales")
        assert calculate_match_score(viewer, candidate) == 50

    def test_both_empty_fields_match(self):
        viewer = make_profile("v@example.com", "", "")
        candidate = make_profile("c@example.com", "", "")
        assert calculate_match_score(viewer, candidate) == 100

    def test_not_symmetric_in_axes(self):
        """Swapping roles swaps which axis weight applies."""
        config = RankingConfig(
            expertise_match_weight=60, interest_match_weight=40, high_match_threshold=60
        )
        viewer = make_profile("v@example.com", "Cooking", "Python")
        candidate = make_profile("c@example.com", "Python", "Chess")
        assert calculate_match_score(viewer, candidate, config) == 60
        assert calculate_match_score(candidate, viewer, config) == 40

    def test_custom_axis_weights(self, viewer, both_axes_match):
        config = RankingConfig(
            expertise_match_weight=30,
            interest_match_weight=20,
            high_match_threshold=40,
            medium_match_threshold=20,
        )
        assert calculate_match_score(viewer, both_axes_match, config) == 50


class TestWeightForScore:
    """Tests for weight_for_score tiers."""

    @pytest.mark.parametrize(
        "score,expected",
        [
            (0, 1),
            (24, 1),
            (25, 2),
            (49, 2),
            (50, 3),
            (100, 3),
        ],
    )
    def test_default_tiers(self, score, expected):
        assert weight_for_score(score) == expected

    def test_custom_tiers(self):
        config = RankingConfig(
            high_match_threshold=80,
            medium_match_threshold=40,
            high_weight=5,
            medium_weight=3,
            base_weight=1,
        )
        assert weight_for_score(79, config) == 3
        assert weight_for_score(80, config) == 5
        assert weight_for_score(39, config) == 1


class TestIsGoodMatch:
    """Tests for the good-match badge threshold."""

    def test_default_threshold(self):
        assert is_good_match(50) is True
        assert is_good_match(100) is True
        assert is_good_match(49) is False
        assert is_good_match(0) is False

    def test_custom_threshold(self):
        config = RankingConfig(good_match_threshold=100)
        assert is_good_match(50, config) is False
        assert is_good_match(100, config) is True
