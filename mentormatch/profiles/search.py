"""Free-text search over profile listings."""

from typing import List, Sequence

from mentormatch.domain.models import Profile


def profile_matches_query(profile: Profile, query: str) -> bool:
    """Check whether a normalized (lowercase, stripped) query hits any profile field."""
    return (
        query in profile.name.lower()
        or query in profile.expertise.lower()
        or query in profile.interest.lower()
        or query in profile.email.lower()
        or query in profile.phone_number
        or query in str(profile.expertise_years)
        or query in str(profile.interest_years)
    )


def filter_profiles(profiles: Sequence[Profile], query: str) -> List[Profile]:
    """Filter profiles by a case-insensitive search query, preserving order.

    A blank query returns every profile.
    """
    query = (query or "").strip().lower()
    if not query:
        return list(profiles)
    return [profile for profile in profiles if profile_matches_query(profile, query)]
