from dataclasses import dataclass
from datetime import date
from types import MappingProxyType
from typing import FrozenSet, Mapping


@dataclass(frozen=True)
class ScoringConfig:
    """Point table and similarity constants for prediction scoring."""

    participation: int = 10
    exact_subreddit: int = 100
    category_subreddit: int = 50
    partial_subreddit: int = 10
    exact_title: int = 100
    partial_title_max: int = 20

    # Minimum similarity for fuzzy (partial) credit
    partial_match_threshold: float = 0.6
    # Returned by similarity() when one string contains the other
    containment_score: float = 0.7


@dataclass(frozen=True)
class DeadlineConfig:
    """
    Daily submission cutoff.

    The reference zone is a fixed UTC offset (Eastern Standard Time) and is
    NOT adjusted for daylight saving.
    """

    cutoff_hour: int = 18
    utc_offset_hours: int = -5
    game_start_date: date = date(2025, 1, 1)

    def __post_init__(self):
        if not 0 <= self.cutoff_hour <= 23:
            raise ValueError(f"cutoff_hour must be in 0..23; got {self.cutoff_hour}")
        if not -23 <= self.utc_offset_hours <= 23:
            raise ValueError(
                f"utc_offset_hours must be in -23..23; got {self.utc_offset_hours}"
            )


@dataclass(frozen=True)
class LogConfig:
    """Logging defaults used by setup_logging()."""

    level: str = "INFO"
    fmt: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _freeze_categories(raw: Mapping[str, list]) -> Mapping[str, FrozenSet[str]]:
    return MappingProxyType(
        {name: frozenset(s.lower() for s in members) for name, members in raw.items()}
    )


# Category name -> member subreddits. Groupings overlap on purpose
# (e.g. "technology" is both news and science).
SUBREDDIT_CATEGORIES = _freeze_categories(
    {
        "gaming": [
            "gaming", "games", "playstation", "ps5", "xbox", "xboxseriesx",
            "nintendo", "nintendoswitch", "pcgaming", "pcmasterrace", "steam",
        ],
        "memes": [
            "memes", "dankmemes", "funny", "me_irl", "meirl",
            "wholesomememes", "prequelmemes", "comedyheaven",
        ],
        "news": [
            "news", "worldnews", "politics", "technology", "upliftingnews",
            "nottheonion",
        ],
        "science": [
            "science", "space", "physics", "askscience", "biology",
            "chemistry", "technology", "futurology", "dataisbeautiful",
        ],
        "sports": [
            "sports", "nba", "nfl", "soccer", "baseball", "hockey", "mma",
            "formula1", "tennis",
        ],
        "animals": [
            "aww", "cats", "dogs", "animalsbeingbros", "animalsbeingderps",
            "rarepuppers", "natureisfuckinglit", "eyebleach",
        ],
        "entertainment": [
            "movies", "television", "music", "books", "marvelstudios",
            "netflix", "anime", "celebs",
        ],
        "lifestyle": [
            "cooking", "food", "fitness", "diy", "lifeprotips",
            "personalfinance", "malefashionadvice", "femalefashionadvice",
            "travel",
        ],
    }
)


# Global config instances
SCORING_CONFIG = ScoringConfig()
DEADLINE_CONFIG = DeadlineConfig()
LOG_CONFIG = LogConfig()
