"""Data models for the ordering engine."""

from dataclasses import dataclass

from mentormatch.domain.models import Profile


@dataclass(frozen=True)
class ScoredCandidate:
    """A candidate profile with its score and shuffle weight for one ordering call.

    Attributes:
        profile: The candidate Profile (shared reference, never copied)
        match_score: Score against the viewer (0 when there is no viewer)
        weight: Shuffle weight derived from match_score
        is_good_match: Whether the score earns the "Good Match" badge
    """

    profile: Profile
    match_score: int
    weight: int
    is_good_match: bool = False

    @property
    def email(self) -> str:
        """Convenience accessor for the candidate's identity key."""
        return self.profile.email
