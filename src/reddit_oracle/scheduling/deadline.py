from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Optional, Union

from reddit_oracle.config import DEADLINE_CONFIG, DeadlineConfig
from reddit_oracle.records import DeadlineWindow, GameStatus


def reference_zone(config: DeadlineConfig = DEADLINE_CONFIG) -> timezone:
    """Fixed-offset zone the cutoff is defined in (no daylight saving)."""
    return timezone(timedelta(hours=config.utc_offset_hours))


def to_reference_time(now: datetime, config: DeadlineConfig = DEADLINE_CONFIG) -> datetime:
    """
    Convert an instant to the reference zone.

    Naive datetimes are interpreted as UTC.
    """
    if not isinstance(now, datetime):
        raise TypeError(f"Expected a datetime; got {type(now).__name__}")
    if now.tzinfo is None or now.utcoffset() is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(reference_zone(config))


def is_submission_open(now: datetime, config: DeadlineConfig = DEADLINE_CONFIG) -> bool:
    """True iff the reference-zone hour at `now` is before the cutoff hour."""
    return to_reference_time(now, config).hour < config.cutoff_hour


def next_deadline(now: datetime, config: DeadlineConfig = DEADLINE_CONFIG) -> datetime:
    """
    Next cutoff instant in the reference zone.

    Today's cutoff if it is still strictly in the future, otherwise
    tomorrow's. At exactly the cutoff the next one is 24 hours away.
    """
    local = to_reference_time(now, config)
    deadline = local.replace(hour=config.cutoff_hour, minute=0, second=0, microsecond=0)
    if local >= deadline:
        deadline += timedelta(days=1)
    return deadline


def time_until_deadline(now: datetime, config: DeadlineConfig = DEADLINE_CONFIG) -> DeadlineWindow:
    """
    Time remaining until the next cutoff, truncated to whole seconds.

    The components are never negative: hours, then minutes left after
    hours, then seconds left after minutes.
    """
    local = to_reference_time(now, config)
    deadline = next_deadline(local, config)

    remaining = max(0, (deadline - local) // timedelta(seconds=1))
    hours, rest = divmod(remaining, 3600)
    minutes, seconds = divmod(rest, 60)

    return DeadlineWindow(
        is_open=local.hour < config.cutoff_hour,
        hours=hours,
        minutes=minutes,
        seconds=seconds,
        deadline=deadline,
    )


def challenge_date(now: datetime, config: DeadlineConfig = DEADLINE_CONFIG) -> str:
    """Reference-zone calendar date of `now`, formatted YYYY-MM-DD."""
    return to_reference_time(now, config).date().isoformat()


def week_number(now: datetime, config: DeadlineConfig = DEADLINE_CONFIG) -> int:
    """ISO week number of the reference-zone date."""
    return to_reference_time(now, config).date().isocalendar()[1]


def day_number(
    now: datetime,
    start_date: Optional[date] = None,
    config: DeadlineConfig = DEADLINE_CONFIG,
) -> int:
    """1-based day of the game; 0 or negative before start_date."""
    if start_date is None:
        start_date = config.game_start_date
    return (to_reference_time(now, config).date() - start_date).days + 1


def format_duration(value: Union[int, float, timedelta]) -> str:
    """
    Compact human-readable duration using the two largest units.

    Examples: "2d 3h", "4h 5m", "6m 7s", "8s".
    """
    if isinstance(value, timedelta):
        total = int(value.total_seconds())
    else:
        total = int(value)
    if total < 0:
        raise ValueError(f"Duration must be non-negative; got {value!r}")

    days, rest = divmod(total, 86400)
    hours, rest = divmod(rest, 3600)
    minutes, seconds = divmod(rest, 60)

    if days > 0:
        return f"{days}d {hours}h"
    if hours > 0:
        return f"{hours}h {minutes}m"
    if minutes > 0:
        return f"{minutes}m {seconds}s"
    return f"{seconds}s"


def game_status(now: datetime, config: DeadlineConfig = DEADLINE_CONFIG) -> GameStatus:
    """Snapshot of the game clock at `now` for a status display."""
    window = time_until_deadline(now, config)
    return GameStatus(
        is_active=window.is_open,
        deadline=window.deadline,
        time_remaining=window,
        day_number=day_number(now, config=config),
        challenge_date=challenge_date(now, config),
        last_updated=to_reference_time(now, config),
    )
