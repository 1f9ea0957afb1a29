"""
Quick Scoring Check

Run this script to eyeball scores for a handful of sample predictions
against a sample top post.

Example:
    python run_scoring_check.py
"""

from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path

# Ensure src/ is on sys.path
PROJECT_ROOT = Path(__file__).resolve().parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from reddit_oracle.evaluation.leaderboard import (  # noqa: E402
    score_predictions,
    summarize_predictions,
)
from reddit_oracle.records import Prediction, ReferencePost  # noqa: E402
from reddit_oracle.utils.logging_utils import setup_logging  # noqa: E402


def main() -> None:
    setup_logging("DEBUG")
    print("▶ Running scoring check...\n")

    top_post = ReferencePost.from_api(
        {
            "kind": "t3",
            "data": {
                "name": "t3_abc123",
                "subreddit": "memes",
                "title": "This is a sample top post title",
                "score": 250000,
                "num_comments": 5000,
                "author": "RedditOracleBot",
                "url": "https://www.reddit.com/r/memes/comments/abc123/sample_post",
            },
        }
    )

    submitted = datetime(2025, 3, 1, 15, 0, tzinfo=timezone.utc)
    predictions = [
        Prediction("alice", "memes", "This is a sample top post title", submitted_at=submitted),
        Prediction("bob", "dankmemes", "sample top post", submitted_at=submitted),
        Prediction("carol", "meme", "A sample top post titled", submitted_at=submitted),
        Prediction("dave", "cooking", "xyz", submitted_at=submitted),
    ]

    leaderboard = score_predictions(predictions, top_post, streak_multipliers={"bob": 1.3})

    print("--- Leaderboard ---")
    print(leaderboard.drop(columns=["title", "submitted_at"]).to_string(index=False))

    print("\n--- Summary ---")
    for key, value in summarize_predictions(leaderboard).items():
        print(f"{key}: {value}")

    print("\nDone.")


if __name__ == "__main__":
    main()
