"""Profile loading, preparation and search for the ordering engine's callers."""

from .exceptions import ProfileLoadError
from .loader import dedupe_profiles, exclude_viewer, find_profile, load_profiles
from .search import filter_profiles, profile_matches_query

__all__ = [
    "ProfileLoadError",
    "load_profiles",
    "dedupe_profiles",
    "exclude_viewer",
    "find_profile",
    "filter_profiles",
    "profile_matches_query",
]
