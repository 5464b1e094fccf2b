"""Consistency checks for ranking configuration."""

import warnings
from typing import List

from .models import RankingConfig


def check_for_warnings(ranking: RankingConfig) -> List[str]:
    """
    Check ranking constants for combinations that quietly change ordering.

    Axis weights and tier thresholds are tuned together. These checks flag
    a configuration where one was changed without the other.

    Args:
        ranking: Validated ranking configuration

    Returns:
        List of warning messages
    """
    warning_messages = []

    # A candidate matching on one axis should reach the high tier
    for axis_name, axis_weight in (
        ("expertise_match_weight", ranking.expertise_match_weight),
        ("interest_match_weight", ranking.interest_match_weight),
    ):
        if axis_weight < ranking.high_match_threshold:
            warning_messages.append(
                f"{axis_name} ({axis_weight}) is below high_match_threshold "
                f"({ranking.high_match_threshold}); single-axis matches will not reach the high tier"
            )

    if ranking.max_score < ranking.high_match_threshold:
        warning_messages.append(
            f"No candidate can reach high_match_threshold ({ranking.high_match_threshold}); "
            f"the maximum possible score is {ranking.max_score}"
        )

    if ranking.max_score == 0:
        warning_messages.append(
            "Both axis weights are 0; every candidate gets the base weight"
        )

    if ranking.high_weight == ranking.base_weight:
        warning_messages.append(
            f"high_weight equals base_weight ({ranking.base_weight}); match scores will not bias ordering"
        )

    if ranking.good_match_threshold > ranking.max_score:
        warning_messages.append(
            f"good_match_threshold ({ranking.good_match_threshold}) exceeds the maximum "
            f"possible score ({ranking.max_score}); no candidate will be flagged"
        )

    return warning_messages


def emit_warnings(warning_messages: List[str]) -> None:
    """
    Emit warning messages using Python's warnings module.

    Args:
        warning_messages: List of warning messages to emit
    """
    for message in warning_messages:
        warnings.warn(message, UserWarning, stacklevel=2)
