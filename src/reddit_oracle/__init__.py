"""
reddit_oracle

Scoring and deadline engine for the daily "guess the top post" game.

Structure:
- records: plain data records exchanged with collaborators
- scoring: string similarity and prediction scoring
- scheduling: daily submission window and countdown
- evaluation: leaderboard and daily statistics
- utils: shared helpers
"""

__all__ = ["config", "records", "scoring", "scheduling", "evaluation", "utils"]
