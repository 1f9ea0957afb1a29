from datetime import datetime, timezone

import pytest

from reddit_oracle.records import Prediction, ReferencePost


@pytest.fixture
def top_post() -> ReferencePost:
    """Reference post for unit tests (no live API calls)."""
    return ReferencePost(
        subreddit="Memes",
        title="funny cat",
        score=250000,
        num_comments=5000,
        url="https://www.reddit.com/r/memes/comments/abc123/funny_cat",
        id="t3_abc123",
        author="RedditOracleBot",
    )


@pytest.fixture
def daily_predictions() -> list:
    """One day's predictions covering exact, category and no-match cases."""
    return [
        Prediction(
            user="carol",
            subreddit="cooking",
            title="xyz",
            submitted_at=datetime(2025, 3, 10, 14, 0, tzinfo=timezone.utc),
        ),
        Prediction(
            user="bob",
            subreddit="dankmemes",
            title="xyz",
            submitted_at=datetime(2025, 3, 10, 16, 0, tzinfo=timezone.utc),
        ),
        Prediction(
            user="alice",
            subreddit="memes",
            title="Funny cat",
            reason="cats always win",
            submitted_at=datetime(2025, 3, 10, 15, 0, tzinfo=timezone.utc),
        ),
        Prediction(
            user="dave",
            subreddit="gaming",
            title="abc",
            submitted_at=datetime(2025, 3, 10, 13, 0, tzinfo=timezone.utc),
        ),
    ]
