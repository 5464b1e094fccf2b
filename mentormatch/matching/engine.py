"""Profile ordering engine.

This module turns an unordered list of candidate profiles into the order shown
to a viewer:
1. Score every candidate against the viewer's profile
2. Map scores to shuffle weights
3. Derive a seed from the viewer's email (or the fallback seed)
4. Run a seeded weighted shuffle

The same candidates and the same seed material always give the same order,
and different viewers see different orders. No state is kept between calls;
each call builds its own generator, so concurrent calls need no locking.
"""

import logging
from typing import List, Optional, Sequence

from mentormatch.config.models import AnonymousStrategy, RankingConfig
from mentormatch.domain.models import Profile
from mentormatch.utils.hashing import seed_from_string

from .models import ScoredCandidate
from .prng import make_generator
from .scoring import calculate_match_score, is_good_match, weight_for_score
from .shuffle import fisher_yates_shuffle, weighted_shuffle

logger = logging.getLogger(__name__)


class ProfileOrderer:
    """Orders candidate profiles for a viewer.

    Responsibilities:
    - Score candidates against the viewer (expertise/interest overlap)
    - Assign tier weights from scores
    - Seed a generator from the viewer's identity
    - Produce a weighted, reproducible permutation
    """

    def __init__(
        self, ranking_config: Optional[RankingConfig] = None, logger_instance: logging.Logger = None
    ):
        """Initialize ProfileOrderer.

        Args:
            ranking_config: Scoring and weighting constants (defaults to RankingConfig())
            logger_instance: Optional logger instance (defaults to module logger)
        """
        self.config = ranking_config or RankingConfig()
        self.logger = logger_instance or logger

    def seed_material_for(self, viewer: Optional[Profile]) -> str:
        """Return the string the ordering seed is derived from for this viewer."""
        if viewer is not None and viewer.email:
            return viewer.email
        return self.config.fallback_seed

    def score_candidates(
        self, candidates: Sequence[Profile], viewer: Optional[Profile]
    ) -> List[ScoredCandidate]:
        """Score and weight every candidate, preserving input order.

        Without a viewer every candidate scores 0 with weight 1.
        """
        if viewer is None:
            return [
                ScoredCandidate(profile=profile, match_score=0, weight=1)
                for profile in candidates
            ]

        scored = []
        for profile in candidates:
            match_score = calculate_match_score(viewer, profile, self.config)
            scored.append(
                ScoredCandidate(
                    profile=profile,
                    match_score=match_score,
                    weight=weight_for_score(match_score, self.config),
                    is_good_match=is_good_match(match_score, self.config),
                )
            )
        return scored

    def rank(
        self, candidates: Sequence[Profile], viewer: Optional[Profile], user_seed: str
    ) -> List[ScoredCandidate]:
        """Order candidates and keep their scores alongside.

        Args:
            candidates: Profiles to order (not modified)
            viewer: Viewer's profile, or None for anonymous browsing
            user_seed: Seed material, e.g. the viewer's email

        Returns:
            ScoredCandidate list in display order
        """
        if not candidates:
            return []

        scored = self.score_candidates(candidates, viewer)
        seed = seed_from_string(user_seed)
        rng = make_generator(seed)

        if viewer is None and self.config.anonymous_strategy == AnonymousStrategy.FISHER_YATES:
            strategy = "fisher-yates"
            ordered = fisher_yates_shuffle(scored, rng)
        else:
            strategy = "weighted"
            ordered = weighted_shuffle(scored, [c.weight for c in scored], rng)

        self.logger.debug(
            f"Ordered {len(ordered)} profiles",
            extra={
                "event": "ordering.completed",
                "candidate_count": len(ordered),
                "has_viewer": viewer is not None,
                "seed": seed,
                "strategy": strategy,
                "high_tier_count": sum(
                    1 for c in scored if c.match_score >= self.config.high_match_threshold
                ),
                "good_match_count": sum(1 for c in scored if c.is_good_match),
            },
        )

        return ordered

    def order(
        self, candidates: Sequence[Profile], viewer: Optional[Profile], user_seed: str
    ) -> List[Profile]:
        """Order candidates using explicit seed material.

        Returns:
            The same Profile instances, in display order
        """
        return [c.profile for c in self.rank(candidates, viewer, user_seed)]

    def order_for_user(
        self, candidates: Sequence[Profile], viewer: Optional[Profile]
    ) -> List[Profile]:
        """Order candidates seeded from the viewer's email, or the fallback seed."""
        return self.order(candidates, viewer, self.seed_material_for(viewer))


def order_profiles(
    candidates: Sequence[Profile],
    viewer: Optional[Profile],
    user_seed: str,
    config: Optional[RankingConfig] = None,
) -> List[Profile]:
    """Order candidates for a viewer with explicit seed material.

    Args:
        candidates: Profiles to order
        viewer: Viewer's profile, or None to shuffle without scoring
        user_seed: Seed material
        config: Ranking constants (defaults to RankingConfig())

    Returns:
        Permutation of candidates (same instances)
    """
    return ProfileOrderer(config).order(candidates, viewer, user_seed)


def order_profiles_for_user(
    candidates: Sequence[Profile],
    viewer: Optional[Profile],
    config: Optional[RankingConfig] = None,
) -> List[Profile]:
    """Order candidates for display, seeded from the viewer's email.

    Callers never manage seeds: the same viewer always sees the same order for
    the same candidates, and anonymous browsing uses the fallback seed.
    """
    return ProfileOrderer(config).order_for_user(candidates, viewer)
