"""
Plain data records exchanged between the engine and its collaborators.

The UI form produces Predictions, the feed-fetch client produces a
ReferencePost, and the engine derives ScoreBreakdowns and DeadlineWindows.
None of these are persisted here.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any, Dict, Mapping, Optional


@dataclass(frozen=True)
class Prediction:
    """
    A user's guess at the day's top post.

    Attributes:
        user: Username of the predictor.
        subreddit: Predicted subreddit (e.g. "memes"), without the r/ prefix.
        title: Predicted post title.
        reason: Free-text reasoning. Display-only, never scored.
        submitted_at: When the prediction was submitted.
        id: Optional identifier assigned by the storage collaborator.
    """

    user: str
    subreddit: str
    title: str
    reason: str = ""
    submitted_at: Optional[datetime] = None
    id: Optional[str] = None


@dataclass(frozen=True)
class ReferencePost:
    """The actual top post for one scoring cycle (one calendar day)."""

    subreddit: str
    title: str
    score: int = 0
    num_comments: int = 0
    url: str = ""
    id: str = ""
    author: str = ""
    created_utc: float = 0.0
    permalink: str = ""
    thumbnail: str = ""
    is_video: bool = False

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> "ReferencePost":
        """
        Build a ReferencePost from a Reddit listing child.

        Accepts either the child itself ({"kind": "t3", "data": {...}}) or
        its "data" mapping. Missing fields fall back to the defaults.
        """
        data = payload.get("data", payload)
        if not isinstance(data, Mapping):
            raise TypeError(f"Expected a mapping for post data; got {type(data).__name__}")

        subreddit = (data.get("subreddit") or "").strip()
        if subreddit.lower().startswith("r/"):
            subreddit = subreddit[2:]

        return cls(
            subreddit=subreddit,
            title=data.get("title") or "",
            score=int(data.get("score") or 0),
            num_comments=int(data.get("num_comments") or 0),
            url=data.get("url") or "",
            id=data.get("name") or data.get("id") or "",
            author=str(data.get("author") or "[deleted]"),
            created_utc=float(data.get("created_utc") or 0.0),
            permalink=data.get("permalink") or "",
            thumbnail=data.get("thumbnail") or "",
            is_video=bool(data.get("is_video", False)),
        )


@dataclass(frozen=True)
class ScoreBreakdown:
    """
    Per-component points for one scored prediction.

    total is the sum of the point fields, clamped to >= 0. The *_match labels
    record which rule awarded the points, for display and audit.
    """

    participation: int
    subreddit_points: int
    title_points: int
    streak_bonus: int
    total: int
    subreddit_match: str = "none"
    title_match: str = "none"

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class DeadlineWindow:
    """Countdown to the next daily cutoff, as seen at one instant."""

    is_open: bool
    hours: int
    minutes: int
    seconds: int
    deadline: datetime

    @property
    def total_seconds(self) -> int:
        return self.hours * 3600 + self.minutes * 60 + self.seconds


@dataclass(frozen=True)
class GameStatus:
    """Snapshot of the game clock for a status display."""

    is_active: bool
    deadline: datetime
    time_remaining: DeadlineWindow
    day_number: int
    challenge_date: str
    last_updated: datetime
