"""
Quick Deadline Check

Prints the current game clock: whether submissions are open and the
countdown to the next 6 PM (UTC-5) cutoff.

Example:
    python run_deadline_check.py
"""

import sys
from datetime import datetime, timezone
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from reddit_oracle.scheduling.deadline import format_duration, game_status  # noqa: E402


def main():
    print("=== Reddit Oracle: Deadline Check ===")

    status = game_status(datetime.now(timezone.utc))
    window = status.time_remaining

    print(f"Challenge date: {status.challenge_date} (day {status.day_number})")
    print(f"Submissions open: {status.is_active}")
    print(f"Next deadline: {status.deadline.isoformat()}")
    print(
        f"Time remaining: {window.hours:02d}:{window.minutes:02d}:{window.seconds:02d}"
        f" ({format_duration(window.total_seconds)})"
    )


if __name__ == "__main__":
    main()
