from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Mapping, Optional

import numpy as np
import pandas as pd

from reddit_oracle.records import Prediction, ReferencePost
from reddit_oracle.scoring.calculator import score
from reddit_oracle.scoring.similarity import normalize

logger = logging.getLogger(__name__)

LEADERBOARD_COLS = [
    "rank",
    "user",
    "subreddit",
    "title",
    "submitted_at",
    "streak_multiplier",
    "participation",
    "subreddit_points",
    "title_points",
    "streak_bonus",
    "total",
    "subreddit_match",
    "title_match",
]


def score_predictions(
    predictions: Iterable[Prediction],
    reference_post: ReferencePost,
    streak_multipliers: Optional[Mapping[str, float]] = None,
) -> pd.DataFrame:
    """
    Score a day's predictions and rank them into a leaderboard.

    Args:
        predictions: Predictions for one scoring cycle.
        reference_post: The actual top post for that cycle.
        streak_multipliers: Optional user -> multiplier mapping, precomputed
            by the streak-history store. Users not present get 1.0.

    Returns:
        One row per prediction with LEADERBOARD_COLS, sorted by total
        (descending), then earliest submission. Ties share a rank ("1224"
        competition ranking).
    """
    multipliers = streak_multipliers or {}

    rows = []
    for prediction in predictions:
        multiplier = multipliers.get(prediction.user, 1.0)
        _, breakdown = score(
            prediction,
            reference_post,
            streak_multiplier=multiplier,
        )
        rows.append(
            {
                "user": prediction.user,
                "subreddit": prediction.subreddit,
                "title": prediction.title,
                "submitted_at": prediction.submitted_at,
                "streak_multiplier": float(multiplier),
                **breakdown.as_dict(),
            }
        )

    if not rows:
        return pd.DataFrame(columns=LEADERBOARD_COLS)

    df = pd.DataFrame(rows)
    df["submitted_at"] = pd.to_datetime(df["submitted_at"], utc=True)

    # NaT (unknown submission time) sorts after known times on ties
    df = df.sort_values(
        ["total", "submitted_at"], ascending=[False, True], na_position="last"
    ).reset_index(drop=True)
    df["rank"] = df["total"].rank(method="min", ascending=False).astype(int)

    logger.debug("Scored %d predictions against %s", len(df), reference_post.id or "top post")
    return df[LEADERBOARD_COLS]


def summarize_predictions(leaderboard: pd.DataFrame) -> Dict[str, Any]:
    """
    Daily statistics for a scored leaderboard.

    Keys:
        total_predictions, unique_participants,
        average_score: mean total (0.0 when empty),
        top_prediction_rate: share of predictions naming the exact subreddit,
        trending_subreddits: predicted subreddit (normalized) -> count,
            most popular first,
        streak_distribution: streak multiplier (e.g. "1.3x") -> count,
            lowest multiplier first.
    """
    required = ["user", "subreddit", "total", "subreddit_match", "streak_multiplier"]
    missing = [c for c in required if c not in leaderboard.columns]
    if missing:
        raise KeyError(f"Missing leaderboard columns required for summary: {missing}")

    if leaderboard.empty:
        return {
            "total_predictions": 0,
            "unique_participants": 0,
            "average_score": 0.0,
            "top_prediction_rate": 0.0,
            "trending_subreddits": {},
            "streak_distribution": {},
        }

    hits = (leaderboard["subreddit_match"] == "exact").to_numpy()
    trending = leaderboard["subreddit"].map(normalize).value_counts()
    streaks = leaderboard["streak_multiplier"].value_counts().sort_index()

    return {
        "total_predictions": int(len(leaderboard)),
        "unique_participants": int(leaderboard["user"].nunique()),
        "average_score": float(leaderboard["total"].mean()),
        "top_prediction_rate": float(np.mean(hits)),
        "trending_subreddits": {str(k): int(v) for k, v in trending.items()},
        "streak_distribution": {f"{m:g}x": int(n) for m, n in streaks.items()},
    }
