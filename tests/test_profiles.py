"""Tests for profile loading, preparation and search."""

import json
from pathlib import Path

import pytest

from conftest import make_profile
from mentormatch.profiles import (
    ProfileLoadError,
    dedupe_profiles,
    exclude_viewer,
    filter_profiles,
    find_profile,
    load_profiles,
)

FIXTURES_DIR = Path(__file__).parent / "fixtures"


class TestLoadProfiles:
    """Tests for load_profiles."""

    def test_load_json(self):
        profiles = load_profiles(FIXTURES_DIR / "profiles.json")

        assert len(profiles) == 5
        assert profiles[0].email == "current@example.com"
        assert profiles[1].expertise_years == 7
        assert profiles[1].location == "Berlin"

    def test_load_yaml_with_profiles_key(self):
        profiles = load_profiles(FIXTURES_DIR / "profiles.yaml")

        assert [p.name for p in profiles] == ["Grace Hopper", "Alan Turing"]
        assert profiles[1].location == "Manchester"
        assert profiles[0].phone_number == "555-1000"

    def test_accepts_string_path(self):
        assert len(load_profiles(str(FIXTURES_DIR / "profiles.json"))) == 5

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_profiles(path) == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(ProfileLoadError, match="not found"):
            load_profiles(tmp_path / "missing.json")

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("[{")
        with pytest.raises(ProfileLoadError, match="Failed to parse"):
            load_profiles(path)

    def test_not_a_list(self, tmp_path):
        path = tmp_path / "object.json"
        path.write_text(json.dumps({"name": "solo"}))
        with pytest.raises(ProfileLoadError, match="must contain a list"):
            load_profiles(path)

    def test_invalid_records_reported_with_index(self, tmp_path):
        path = tmp_path / "invalid.json"
        path.write_text(
            json.dumps(
                [
                    {"name": "Ok", "expertise": "a", "interest": "b", "email": "ok@example.com"},
                    {"name": "Bad", "expertise": "a", "interest": "b", "expertiseYears": -3,
                     "email": "bad@example.com"},
                    {"name": "No email", "expertise": "a", "interest": "b"},
                ]
            )
        )

        with pytest.raises(ProfileLoadError) as exc_info:
            load_profiles(path)

        errors = exc_info.value.errors
        assert len(errors) == 2
        assert errors[0].startswith("record 1: expertiseYears")
        assert errors[1].startswith("record 2: email")
        assert exc_info.value.path == path


class TestPreparation:
    """Tests for dedupe_profiles, exclude_viewer and find_profile."""

    def test_dedupe_keeps_first(self):
        first = make_profile("a@example.com", "x", "y", name="First")
        second = make_profile("a@example.com", "x", "y", name="Second")
        other = make_profile("b@example.com", "x", "y")

        result = dedupe_profiles([first, other, second])
        assert result == [first, other]
        assert result[0] is first

    def test_exclude_viewer(self, viewer, candidates):
        assert exclude_viewer(candidates + [viewer], viewer) == candidates

    def test_exclude_without_viewer(self, candidates):
        assert exclude_viewer(candidates, None) == candidates

    def test_find_profile_case_insensitive(self, candidates):
        assert find_profile(candidates, " PROFILE2@example.com ") is candidates[1]

    def test_find_profile_missing(self, candidates):
        assert find_profile(candidates, "nobody@example.com") is None


class TestFilterProfiles:
    """Tests for filter_profiles search."""

    def test_blank_query_returns_all(self, candidates):
        assert filter_profiles(candidates, "") == candidates
        assert filter_profiles(candidates, "   ") == candidates
        assert filter_profiles(candidates, None) == candidates

    def test_matches_expertise_case_insensitive(self, candidates):
        result = filter_profiles(candidates, "MACHINE")
        assert [p.email for p in result] == ["profile1@example.com", "profile2@example.com"]

    def test_matches_interest(self, candidates):
        result = filter_profiles(candidates, "sales")
        assert [p.email for p in result] == ["profile4@example.com"]

    def test_matches_email_and_name(self, candidates):
        assert filter_profiles(candidates, "profile3@")[0].email == "profile3@example.com"
        assert filter_profiles(candidates, "Profile4")[0].email == "profile4@example.com"

    def test_matches_phone_and_years(self):
        profile = make_profile("p@example.com", "x", "y", phone_number="555-9876", expertise_years=12)
        assert filter_profiles([profile], "9876") == [profile]
        assert filter_profiles([profile], "12") == [profile]

    def test_no_hits(self, candidates):
        assert filter_profiles(candidates, "astrophysics") == []

    def test_preserves_order(self, candidates):
        reordered = list(reversed(candidates))
        result = filter_profiles(reordered, "development")
        assert [p.email for p in result] == ["profile3@example.com", "profile1@example.com"]
