"""Profile matching and ordering engine.

This module provides:
- ProfileOrderer: service that scores, weights and orders candidate profiles
- order_profiles / order_profiles_for_user: functional entry points
- ScoredCandidate: a candidate with its match score and weight
- Scoring, seeding and shuffle building blocks
"""

from .engine import ProfileOrderer, order_profiles, order_profiles_for_user
from .models import ScoredCandidate
from .prng import SeededRandom, make_generator
from .scoring import calculate_match_score, is_good_match, weight_for_score
from .shuffle import WeightMismatchError, fisher_yates_shuffle, weighted_shuffle

__all__ = [
    "ProfileOrderer",
    "order_profiles",
    "order_profiles_for_user",
    "ScoredCandidate",
    "SeededRandom",
    "make_generator",
    "calculate_match_score",
    "is_good_match",
    "weight_for_score",
    "WeightMismatchError",
    "fisher_yates_shuffle",
    "weighted_shuffle",
]
