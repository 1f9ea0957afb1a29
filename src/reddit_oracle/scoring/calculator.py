from __future__ import annotations

import logging
import math
from typing import FrozenSet, Optional, Tuple

from reddit_oracle.config import SCORING_CONFIG, SUBREDDIT_CATEGORIES, ScoringConfig
from reddit_oracle.records import Prediction, ReferencePost, ScoreBreakdown
from reddit_oracle.scoring.similarity import normalize, similarity

logger = logging.getLogger(__name__)


def _round_half_up(value: float) -> int:
    # Python's round() is banker's rounding; the point table expects 0.5 -> 1.
    return int(math.floor(value + 0.5))


def category_of(subreddit: str) -> FrozenSet[str]:
    """Names of every category the subreddit belongs to (possibly several)."""
    name = normalize(subreddit)
    return frozenset(
        category for category, members in SUBREDDIT_CATEGORIES.items() if name in members
    )


def share_category(a: str, b: str) -> bool:
    """True if both subreddits belong to at least one common category."""
    return bool(category_of(a) & category_of(b))


def _subreddit_points(predicted: str, actual: str, config: ScoringConfig) -> Tuple[int, str]:
    if predicted and predicted == actual:
        return config.exact_subreddit, "exact"
    if share_category(predicted, actual):
        return config.category_subreddit, "category"
    if similarity(predicted, actual) >= config.partial_match_threshold:
        return config.partial_subreddit, "partial"
    return 0, "none"


def _title_points(predicted: str, actual: str, config: ScoringConfig) -> Tuple[int, str]:
    if predicted and predicted == actual:
        return config.exact_title, "exact"
    sim = similarity(predicted, actual)
    if sim >= config.partial_match_threshold:
        # Scales with match strength, unlike the flat subreddit partial credit
        return _round_half_up(config.partial_title_max * sim), "partial"
    return 0, "none"


def score(
    prediction: Prediction,
    reference_post: Optional[ReferencePost],
    streak_multiplier: float = 1.0,
    config: ScoringConfig = SCORING_CONFIG,
) -> Tuple[int, ScoreBreakdown]:
    """
    Score a prediction against the day's actual top post.

    Components, in order:
        1. Participation (always awarded).
        2. Subreddit: exact, else shared category, else fuzzy (>= threshold).
        3. Title: exact, else fuzzy credit proportional to similarity.
        4. Streak bonus: round(score_so_far * (streak_multiplier - 1)),
           never compounded onto itself.
        5. Total clamped to >= 0.

    Args:
        prediction: The user's prediction.
        reference_post: The actual top post. Callers must skip scoring until
            it is available.
        streak_multiplier: Precomputed consecutive-day factor (>= 1.0).
        config: Point table and thresholds.

    Returns:
        (total, breakdown). Pure: identical inputs give identical results.

    Raises:
        ValueError if reference_post is None, or streak_multiplier is not a
            finite number >= 1.0.
    """
    if reference_post is None:
        raise ValueError("reference_post is required; skip scoring until the top post is known.")
    if not math.isfinite(streak_multiplier) or streak_multiplier < 1.0:
        raise ValueError(f"streak_multiplier must be a finite number >= 1.0; got {streak_multiplier}")

    subreddit_points, subreddit_match = _subreddit_points(
        normalize(prediction.subreddit), normalize(reference_post.subreddit), config
    )
    title_points, title_match = _title_points(
        normalize(prediction.title), normalize(reference_post.title), config
    )

    score_so_far = config.participation + subreddit_points + title_points

    streak_bonus = 0
    if streak_multiplier > 1.0:
        streak_bonus = _round_half_up(score_so_far * (streak_multiplier - 1.0))

    total = max(0, score_so_far + streak_bonus)

    breakdown = ScoreBreakdown(
        participation=config.participation,
        subreddit_points=subreddit_points,
        title_points=title_points,
        streak_bonus=streak_bonus,
        total=total,
        subreddit_match=subreddit_match,
        title_match=title_match,
    )
    logger.debug(
        "Scored prediction by %s: %s (subreddit=%s, title=%s)",
        prediction.user,
        total,
        subreddit_match,
        title_match,
    )
    return total, breakdown
