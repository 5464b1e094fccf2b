"""Match scoring and weight tiering.

Scores measure how well a candidate complements the viewer:
- expertise axis: the candidate's expertise covers what the viewer wants to learn
- interest axis: the candidate wants to learn what the viewer can teach

Each axis is a plain case-insensitive substring check in both directions.
There is no tokenization or partial credit, so scores stay compatible with the
ones shown by the mobile clients.
"""

from typing import Optional

from mentormatch.config.models import RankingConfig
from mentormatch.domain.models import Profile

DEFAULT_RANKING = RankingConfig()


def _overlaps(left: str, right: str) -> bool:
    """True if either string contains the other, ignoring case.

    An empty string is contained in every string, so an empty field always
    overlaps.
    """
    left = left.lower()
    right = right.lower()
    return right in left or left in right


def calculate_match_score(
    viewer: Profile, candidate: Profile, config: Optional[RankingConfig] = None
) -> int:
    """Compute the match score between the viewer and one candidate.

    Args:
        viewer: Profile of the user browsing
        candidate: Profile being considered for display
        config: Ranking constants (defaults to RankingConfig())

    Returns:
        0, expertise_match_weight, interest_match_weight, or their sum
    """
    config = config or DEFAULT_RANKING
    score = 0

    if _overlaps(candidate.expertise, viewer.interest):
        score += config.expertise_match_weight

    if _overlaps(candidate.interest, viewer.expertise):
        score += config.interest_match_weight

    return score


def weight_for_score(score: int, config: Optional[RankingConfig] = None) -> int:
    """Map a match score to its shuffle weight.

    With the default constants: >= 50 -> 3, 25..49 -> 2, otherwise 1.
    """
    config = config or DEFAULT_RANKING

    if score >= config.high_match_threshold:
        return config.high_weight
    if score >= config.medium_match_threshold:
        return config.medium_weight
    return config.base_weight


def is_good_match(score: int, config: Optional[RankingConfig] = None) -> bool:
    """Whether a score earns the "Good Match" badge in listings."""
    config = config or DEFAULT_RANKING
    return score >= config.good_match_threshold
