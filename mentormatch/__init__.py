"""Mentor Match: profile matching and ordering engine."""

from mentormatch.domain.models import Profile
from mentormatch.matching import (
    ProfileOrderer,
    ScoredCandidate,
    order_profiles,
    order_profiles_for_user,
)

__version__ = "0.1.0"

__all__ = [
    "Profile",
    "ProfileOrderer",
    "ScoredCandidate",
    "order_profiles",
    "order_profiles_for_user",
]
